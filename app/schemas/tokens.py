# app/schemas/tokens.py
from pydantic import BaseModel
from app.schemas.user import UserOut

class Token(BaseModel):
    message: str = "Login successful"
    token: str
    token_type: str = "bearer"
    user: UserOut
