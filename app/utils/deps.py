from fastapi import Depends, Query
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.config import settings
from app.core.database import SessionLocal, get_db
from app.core.exceptions import PermissionDeniedError
from app.core.security import InvalidTokenError, decode_access_token
from app.schemas.user import UserContext

http_bearer = HTTPBearer(auto_error=False)

__all__ = [
    "get_db",
    "get_transactional_db",
    "get_current_user_context",
    "require_staff",
    "Pagination",
]

def get_transactional_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def get_current_user_context(
    credentials: HTTPAuthorizationCredentials = Depends(http_bearer)
) -> UserContext:
    if credentials is None:
        raise InvalidTokenError("Not authenticated")

    token_data = decode_access_token(credentials.credentials)
    return UserContext(user_id=token_data.user_id, role=token_data.role, username=token_data.username)

def require_staff(context: UserContext = Depends(get_current_user_context)) -> UserContext:
    """Teachers and admins only."""
    if not context.is_staff:
        raise PermissionDeniedError("You do not have permission to perform this action.")
    return context

class Pagination:
    def __init__(
        self,
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        offset: int = Query(0, ge=0),
    ):
        self.limit = limit
        self.offset = offset
