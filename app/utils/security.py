# app/utils/security.py
from datetime import datetime, timedelta
from typing import Optional

from jose import jwt
from passlib.context import CryptContext

from app.config.settings import settings

# bcrypt with a fixed cost factor of 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return pwd_context.verify(plain_password, password_hash)
    except ValueError:
        # Unrecognised or corrupt hash
        return False

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token carrying `data`; expires after ACCESS_TOKEN_EXPIRE_MINUTES unless overridden"""
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.require_jwt_secret(), algorithm=settings.JWT_ALGORITHM)

def decode_access_token(token: str) -> dict:
    """Verify signature and expiry; raises jose.ExpiredSignatureError or jose.JWTError"""
    return jwt.decode(token, settings.require_jwt_secret(), algorithms=[settings.JWT_ALGORITHM])

def build_token_claims(user) -> dict:
    return {
        "sub": str(user.user_id),
        "username": user.username,
        "email": user.email,
        "role": user.role.value if hasattr(user.role, "value") else user.role,
    }
