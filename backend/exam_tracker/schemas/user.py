"""User Schemas — login body and the principal returned to clients.

Invariants:
    - PrincipalResponse never exposes credential material
"""

from pydantic import BaseModel, Field

from exam_tracker.core.domain_types import Principal


class LoginRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=1024)


class PrincipalResponse(BaseModel):
    id: int
    username: str
    name: str

    @classmethod
    def from_principal(cls, principal: Principal) -> "PrincipalResponse":
        return cls(id=principal.id, username=principal.username, name=principal.name)
