from pydantic import BaseModel
from datetime import datetime, date as calendar_date
from typing import Optional, List

from app.models.suggestion import SuggestionStatus

class SuggestionOut(BaseModel):
    suggestion_id: int
    user_id: int
    title: str
    description: str
    department: Optional[str] = None
    file_attachment_path: Optional[str] = None
    status: SuggestionStatus
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }

class SuggestionListItem(SuggestionOut):
    submitted_by_username: Optional[str] = None

class SuggestionDetail(SuggestionListItem):
    submitted_by_email: Optional[str] = None

# Status is validated by the handler so that the error message lists the allowed values
class StatusUpdate(BaseModel):
    status: Optional[str] = None

class StatusUpdateResponse(BaseModel):
    message: str
    suggestion: SuggestionOut

# Analytics
class StatusCount(BaseModel):
    status: SuggestionStatus
    count: int

class DepartmentCount(BaseModel):
    department: str
    count: int

class TrendPoint(BaseModel):
    date: calendar_date
    count: int

class SuggestionAnalytics(BaseModel):
    statusCounts: List[StatusCount]
    departmentCounts: List[DepartmentCount]
    submissionsTrend: List[TrendPoint]
