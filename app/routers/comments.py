# app/routers/comments.py
import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.database import get_db
from app.models import Comment, Suggestion
from app.schemas import CommentCreate, CommentOut, CurrentUser
from app.utils.auth import get_current_user
from app.utils.errors import ValidationError, NotFoundError, is_foreign_key_violation, parse_id, id_in_range

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suggestions", tags=["comments"])

@router.get("/{suggestion_id}/comments", response_model=List[CommentOut])
def get_comments_for_suggestion(
    suggestion_id: str,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Get all comments for a suggestion, oldest first"""
    suggestion_id_num = parse_id(suggestion_id)
    if not id_in_range(suggestion_id_num):
        return []
    return (
        db.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.suggestion_id == suggestion_id_num)
        .order_by(Comment.created_at.asc(), Comment.comment_id.asc())
        .all()
    )

@router.post("/{suggestion_id}/comments", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
def add_comment_to_suggestion(
    suggestion_id: str,
    comment: CommentCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    suggestion_id_num = parse_id(suggestion_id)

    comment_text = (comment.comment_text or "").strip()
    if not comment_text:
        raise ValidationError("Comment text cannot be empty.")

    # Not atomic with the insert; the foreign key is the real guard
    exists = id_in_range(suggestion_id_num) and (
        db.query(Suggestion.suggestion_id).filter(Suggestion.suggestion_id == suggestion_id_num).first()
    )
    if not exists:
        raise NotFoundError("Suggestion not found, cannot add comment.")

    db_comment = Comment(
        suggestion_id=suggestion_id_num,
        user_id=current_user.user_id,
        comment_text=comment_text,
    )
    db.add(db_comment)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_foreign_key_violation(e):
            raise NotFoundError("Suggestion not found or user invalid.")
        raise
    db.refresh(db_comment)

    logger.info(f"Comment {db_comment.comment_id} added to suggestion {suggestion_id_num} by user {current_user.user_id}")
    return CommentOut(
        comment_id=db_comment.comment_id,
        comment_text=db_comment.comment_text,
        created_at=db_comment.created_at,
        author_username=current_user.username or "Unknown",
    )
