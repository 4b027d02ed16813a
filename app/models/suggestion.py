# app/models/suggestion.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
import enum

from app.database import Base

class SuggestionStatus(str, enum.Enum):
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    IMPLEMENTED = "implemented"

    @classmethod
    def values(cls):
        return [member.value for member in cls]

class Suggestion(Base):
    __tablename__ = "suggestions"

    suggestion_id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    department = Column(String(100), nullable=True)
    file_attachment_path = Column(String(500), nullable=True)
    status = Column(
        Enum(
            SuggestionStatus,
            name="suggestion_status",
            native_enum=False,
            create_constraint=True,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        default=SuggestionStatus.SUBMITTED,
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    submitter = relationship("User", back_populates="suggestions")
    comments = relationship("Comment", back_populates="suggestion", order_by="Comment.created_at")

    @property
    def submitted_by_username(self):
        return self.submitter.username if self.submitter else None

    @property
    def submitted_by_email(self):
        return self.submitter.email if self.submitter else None
