# app/routers/suggestions.py
import logging
import os
from datetime import datetime, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import FileResponse
from sqlalchemy import func, literal_column
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.models import Suggestion, SuggestionStatus
from app.schemas import (
    CurrentUser, SuggestionOut, SuggestionListItem, SuggestionDetail,
    StatusUpdate, StatusUpdateResponse, SuggestionAnalytics,
)
from app.services.file_storage import file_storage, store_attachment
from app.utils.auth import get_current_user, require_admin
from app.utils.errors import (
    ValidationError, NotFoundError, AuthorizationError, is_foreign_key_violation, parse_id,
    id_in_range,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["suggestions"])

TREND_WINDOW_DAYS = 30
UNASSIGNED_DEPARTMENT = "Unassigned"

def _discard_attachment(file_path: Optional[str]):
    if file_path:
        file_storage.delete_file(file_path)

def _newest_first(query):
    return query.order_by(Suggestion.created_at.desc(), Suggestion.suggestion_id.desc())

@router.post("", response_model=SuggestionOut, status_code=status.HTTP_201_CREATED)
def create_suggestion(
    current_user: CurrentUser = Depends(get_current_user),
    user_id: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    file_path: Optional[str] = Depends(store_attachment),
    db: Session = Depends(get_db),
):
    """Create a suggestion from multipart form data with an optional attachment"""
    try:
        user_id_num = int(user_id)
    except (TypeError, ValueError):
        user_id_num = None

    if user_id_num is None or not (title and title.strip()) or not (description and description.strip()):
        _discard_attachment(file_path)
        raise ValidationError("Missing required fields: user_id (must be number), title, description")
    if not id_in_range(user_id_num):
        _discard_attachment(file_path)
        raise ValidationError(f"User with ID {user_id_num} does not exist.")

    suggestion = Suggestion(
        user_id=user_id_num,
        title=title.strip(),
        description=description.strip(),
        department=(department or "").strip() or None,
        file_attachment_path=file_path,
        status=SuggestionStatus.SUBMITTED,
    )
    db.add(suggestion)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        _discard_attachment(file_path)
        if is_foreign_key_violation(e):
            raise ValidationError(f"User with ID {user_id_num} does not exist.")
        raise
    except Exception:
        db.rollback()
        _discard_attachment(file_path)
        raise
    db.refresh(suggestion)

    logger.info(f"Suggestion {suggestion.suggestion_id} submitted by user {user_id_num} (caller {current_user.user_id})")
    return suggestion

@router.get("", response_model=List[SuggestionListItem])
def get_suggestions(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    """Get all suggestions with the submitter's username, newest first (admin only)"""
    query = db.query(Suggestion).options(joinedload(Suggestion.submitter))
    return _newest_first(query).all()

@router.get("/analytics", response_model=SuggestionAnalytics)
def get_suggestion_analytics(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    """Counts by status, counts by department, and daily submissions for the last 30 days"""
    status_counts = (
        db.query(Suggestion.status, func.count(Suggestion.suggestion_id))
        .group_by(Suggestion.status)
        .all()
    )

    # Literal rather than a bound parameter so SELECT and GROUP BY render identically
    department = func.coalesce(Suggestion.department, literal_column(f"'{UNASSIGNED_DEPARTMENT}'"))
    department_counts = (
        db.query(department, func.count(Suggestion.suggestion_id))
        .group_by(department)
        .all()
    )

    day = func.date(Suggestion.created_at)
    since = datetime.utcnow() - timedelta(days=TREND_WINDOW_DAYS)
    trend = (
        db.query(day, func.count(Suggestion.suggestion_id))
        .filter(Suggestion.created_at >= since)
        .group_by(day)
        .order_by(day)
        .all()
    )

    return {
        "statusCounts": [{"status": s, "count": count} for s, count in status_counts],
        "departmentCounts": [{"department": d, "count": count} for d, count in department_counts],
        "submissionsTrend": [{"date": d, "count": count} for d, count in trend],
    }

@router.get("/my", response_model=List[SuggestionOut])
def get_my_suggestions(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Get the caller's own suggestions, newest first"""
    query = db.query(Suggestion).filter(Suggestion.user_id == current_user.user_id)
    return _newest_first(query).all()

def _get_suggestion_or_404(db: Session, suggestion_id: int) -> Suggestion:
    if not id_in_range(suggestion_id):
        raise NotFoundError("Suggestion not found.")
    suggestion = (
        db.query(Suggestion)
        .options(joinedload(Suggestion.submitter))
        .filter(Suggestion.suggestion_id == suggestion_id)
        .first()
    )
    if not suggestion:
        raise NotFoundError("Suggestion not found.")
    return suggestion

@router.get("/{suggestion_id}", response_model=SuggestionDetail)
def get_suggestion_by_id(
    suggestion_id: str,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    return _get_suggestion_or_404(db, parse_id(suggestion_id))

@router.put("/{suggestion_id}/status", response_model=StatusUpdateResponse)
def update_suggestion_status(
    suggestion_id: str,
    status_update: StatusUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    """Update only the status of a suggestion (admin only)"""
    suggestion_id_num = parse_id(suggestion_id)

    new_status = status_update.status
    if not new_status:
        raise ValidationError("New status is required in the request body.")

    allowed_statuses = SuggestionStatus.values()
    if new_status not in allowed_statuses:
        raise ValidationError(f"Invalid status value. Allowed values are: {', '.join(allowed_statuses)}")

    suggestion = None
    if id_in_range(suggestion_id_num):
        suggestion = db.query(Suggestion).filter(Suggestion.suggestion_id == suggestion_id_num).first()
    if not suggestion:
        raise NotFoundError("Suggestion not found, cannot update status.")

    previous_status = suggestion.status
    suggestion.status = SuggestionStatus(new_status)
    suggestion.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(suggestion)

    logger.info(
        f"Suggestion {suggestion_id_num} status {previous_status.value} -> {new_status} by admin {current_user.user_id}"
    )
    return {"message": "Suggestion status updated successfully", "suggestion": suggestion}

@router.get("/{suggestion_id}/attachment")
def download_attachment(
    suggestion_id: str,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Download a suggestion's attachment (submitter or admin)"""
    suggestion = _get_suggestion_or_404(db, parse_id(suggestion_id))

    if not current_user.is_admin and suggestion.user_id != current_user.user_id:
        raise AuthorizationError("You don't have permission to download this attachment")

    file_path = file_storage.resolve(suggestion.file_attachment_path)
    if not file_path:
        raise NotFoundError("Attachment not found.")

    return FileResponse(
        path=file_path,
        filename=os.path.basename(file_path),
        media_type=file_storage.guess_mime_type(file_path),
    )
