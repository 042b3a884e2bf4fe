from jose import jwt, JWTError
from pydantic import ValidationError
from app.core.config import settings
from app.core.exceptions import CBTError
from app.schemas.token import TokenPayload


class InvalidTokenError(CBTError):
    code = "UNAUTHORIZED"


def decode_access_token(token: str) -> TokenPayload:
    """Verify a bearer token issued by the identity service and return its claims."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        token_data = TokenPayload(**payload)
    except JWTError:
        raise InvalidTokenError("Could not validate credentials")
    except ValidationError:
        raise InvalidTokenError("Invalid token payload")

    if token_data.user_id is None or token_data.role is None:
        raise InvalidTokenError("Invalid token payload")
    return token_data
