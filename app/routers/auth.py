import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User, UserRole
from app.schemas.user import UserCreate, UserLogin, RegisterResponse
from app.schemas.tokens import Token
from app.utils.errors import ValidationError, AuthenticationError, ConflictError, is_unique_violation
from app.utils.security import hash_password, verify_password, create_access_token, build_token_claims

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS = "Invalid credentials."

def find_existing_user(db: Session, username: str, email: str):
    return db.query(User).filter(or_(User.email == email, User.username == username)).first()

@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    if not user.username or not user.email or not user.password:
        raise ValidationError("Username, email, and password are required.")

    if find_existing_user(db, user.username, user.email):
        raise ConflictError("User already exists with this email or username.")

    new_user = User(
        username=user.username,
        email=user.email,
        password_hash=hash_password(user.password),
        role=user.role or UserRole.EMPLOYEE,
    )

    db.add(new_user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise ConflictError("User already exists with this email or username.")
        raise
    db.refresh(new_user)

    logger.info(f"Registered user {new_user.user_id} ({new_user.username}) as {new_user.role.value}")
    return {"message": "User registered successfully", "user": new_user}

@router.post("/login", response_model=Token)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    if not credentials.email or not credentials.password:
        raise ValidationError("Email and password are required.")

    db_user = db.query(User).filter(User.email == credentials.email).first()
    # Same failure for an unknown email and a wrong password
    if not db_user or not verify_password(credentials.password, db_user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)

    token = create_access_token(data=build_token_claims(db_user))
    return {
        "message": "Login successful",
        "token": token,
        "token_type": "bearer",
        "user": db_user,
    }
