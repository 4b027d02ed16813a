# app/utils/auth.py
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError
from pydantic import ValidationError as SchemaValidationError

from app.schemas.user import CurrentUser
from app.utils.errors import AuthenticationError, AuthorizationError
from app.utils.security import decode_access_token

logger = logging.getLogger(__name__)

# auto_error=False so a missing or malformed header goes through our own 401
bearer_scheme = HTTPBearer(auto_error=False)

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    """Protect: require a valid `Authorization: Bearer <token>` and return the decoded identity"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authorized, no token")

    try:
        payload = decode_access_token(credentials.credentials)
    except ExpiredSignatureError:
        logger.info("Rejected expired token")
        raise AuthenticationError("Not authorized, token expired")
    except JWTError as e:
        logger.warning(f"Rejected invalid token: {e}")
        raise AuthenticationError("Not authorized, token invalid")

    try:
        return CurrentUser(
            user_id=int(payload.get("sub")),
            username=payload.get("username"),
            email=payload.get("email"),
            role=payload.get("role"),
        )
    except (TypeError, ValueError, SchemaValidationError) as e:
        logger.warning(f"Rejected token with malformed claims: {e}")
        raise AuthenticationError("Not authorized, token invalid")

def require_admin(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Admin gate, applied after Protect"""
    if not current_user.is_admin:
        raise AuthorizationError("Not authorized, admin role required")
    return current_user
