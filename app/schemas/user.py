from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

from app.models.user import UserRole

class UserCreate(BaseModel):
    username: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None

class UserLogin(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None

class UserOut(BaseModel):
    user_id: int
    username: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }

class RegisterResponse(BaseModel):
    message: str
    user: UserOut

class CurrentUser(BaseModel):
    """Identity decoded from a bearer token"""
    user_id: int
    username: Optional[str] = None
    email: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
