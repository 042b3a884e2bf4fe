from pydantic import BaseModel

from app.core.constants import RoleEnum

class TokenPayload(BaseModel):
    """Claims carried by access tokens from the identity service."""
    user_id: int | None = None
    username: str | None = None
    role: RoleEnum | None = None
    sub: str | None = None
    exp: int | None = None
