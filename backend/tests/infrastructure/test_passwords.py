"""Password hashing — passlib context used by the user store."""

from exam_tracker.infrastructure.user_store import check_password, hash_password


def test_hash_is_not_the_password():
    hashed = hash_password("password")
    assert hashed != "password"
    assert hashed.startswith("$pbkdf2-sha256$")


def test_correct_password_verifies():
    assert check_password("password", hash_password("password"))


def test_wrong_password_fails():
    assert not check_password("passw0rd", hash_password("password"))


def test_missing_hash_fails():
    assert not check_password("password", None)


def test_non_string_password_fails():
    assert not check_password(None, hash_password("password"))


def test_unrecognized_stored_hash_fails():
    assert not check_password("password", "not-a-hash")
