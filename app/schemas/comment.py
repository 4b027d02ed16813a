from pydantic import BaseModel
from datetime import datetime
from typing import Optional

class CommentCreate(BaseModel):
    comment_text: Optional[str] = None

class CommentOut(BaseModel):
    comment_id: int
    comment_text: str
    created_at: datetime
    author_username: Optional[str] = None

    model_config = {
        "from_attributes": True
    }
