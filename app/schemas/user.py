from pydantic import BaseModel, ConfigDict
from typing import Optional

from app.core.constants import RoleEnum, STAFF_ROLES

class UserContext(BaseModel):
    """The authenticated caller as seen by the session and result endpoints."""
    user_id: int
    role: RoleEnum
    username: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES
