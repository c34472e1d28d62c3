"""Session Routes — login, logout and current-user lookup.

Invariants:
    - Login failure message identical for unknown user and wrong password
    - Logout without a session still answers 200 with an empty body
    - GET /current without a session → 401 {error: "Unauthenticated user!"}
"""

from tests.services.conftest import JOHN


async def test_login_returns_principal_and_cookie(client, login):
    res = await login()
    assert res.status_code == 200
    assert res.json() == {"id": 1, "username": JOHN, "name": "John"}
    assert "exams_session" in res.cookies


async def test_login_response_has_no_password_material(client, login):
    body = (await login()).json()
    assert "password" not in body
    assert "password_hash" not in body


async def test_wrong_password_and_unknown_user_get_same_401(client, login):
    wrong_password = await login(JOHN, "not-the-password")
    unknown_user = await login("nobody@polito.it", "password")
    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.json()["message"] == "Incorrect username and/or password."


async def test_login_body_is_validated(client):
    res = await client.post("/api/sessions", json={"username": JOHN})
    assert res.status_code == 422


async def test_current_session_after_login(client, login):
    await login()
    res = await client.get("/api/sessions/current")
    assert res.status_code == 200
    assert res.json()["username"] == JOHN


async def test_current_session_without_login(client):
    res = await client.get("/api/sessions/current")
    assert res.status_code == 401
    assert res.json()["error"] == "Unauthenticated user!"


async def test_logout_without_login_is_harmless(client):
    res = await client.delete("/api/sessions/current")
    assert res.status_code == 200
    assert res.content == b""


async def test_logout_ends_session(client, login):
    await login()
    await client.delete("/api/sessions/current")
    res = await client.get("/api/sessions/current")
    assert res.status_code == 401


async def test_logout_destroys_server_side_session(client, login):
    from exam_tracker.main import app

    await login()
    assert len(app.state.session_store) == 1
    await client.delete("/api/sessions/current")
    assert len(app.state.session_store) == 0


async def test_forged_cookie_is_rejected(client):
    client.cookies.set("exams_session", "forged-token")
    res = await client.get("/api/sessions/current")
    assert res.status_code == 401


async def test_login_again_replaces_previous_session(client, login):
    from exam_tracker.main import app

    await login()
    first = client.cookies.get("exams_session")
    await login()
    assert client.cookies.get("exams_session") != first
    assert len(app.state.session_store) == 1
    assert app.state.session_store.get(first) is None
