# backend/modules/feedback/routers/feedback_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, Path, Body, Response
from sqlalchemy.orm import Session
from typing import Optional, List
import logging

from core.database import get_db
from core.exceptions import NotFoundError, ValidationError
from modules.feedback.services.feedback_service import (
    FeedbackService,
    parse_sentiment_filter,
)
from modules.feedback.schemas.feedback_schemas import (
    FeedbackCreate,
    FeedbackUpdate,
    FeedbackResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/feedback", tags=["Feedback"])


@router.get("", response_model=List[FeedbackResponse])
def list_feedback(
    sentiment: Optional[str] = Query(
        None, description="Filter by sentiment (positive, neutral, negative)"
    ),
    db: Session = Depends(get_db),
):
    """List all feedback, newest first"""

    try:
        feedback_service = FeedbackService(db)
        return feedback_service.list_feedback(parse_sentiment_filter(sentiment))

    except Exception as e:
        logger.error(f"Error fetching feedback: {e}")
        raise HTTPException(status_code=500, detail="Error fetching feedback")


@router.get("/{feedback_id}", response_model=FeedbackResponse)
def get_feedback(
    feedback_id: int = Path(..., description="Feedback ID"),
    db: Session = Depends(get_db),
):
    """Get specific feedback by ID"""

    try:
        feedback_service = FeedbackService(db)
        return feedback_service.get_feedback(feedback_id)

    except KeyError:
        raise NotFoundError("Feedback not found")
    except Exception as e:
        logger.error(f"Error fetching feedback {feedback_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching feedback")


@router.post("", response_model=FeedbackResponse, status_code=201)
def create_feedback(
    feedback_data: FeedbackCreate,
    db: Session = Depends(get_db),
):
    """Create feedback, scoring the message when no sentiment is supplied"""

    try:
        feedback_service = FeedbackService(db)
        return feedback_service.create_feedback(feedback_data)

    except ValueError as e:
        logger.warning(f"Rejected feedback: {e}")
        raise ValidationError(str(e))
    except Exception as e:
        logger.error(f"Error creating feedback: {e}")
        raise HTTPException(status_code=500, detail="Error creating feedback")


@router.put("/{feedback_id}", response_model=FeedbackResponse)
def update_feedback(
    feedback_id: int = Path(..., description="Feedback ID"),
    update_data: FeedbackUpdate = Body(...),
    db: Session = Depends(get_db),
):
    """Update the supplied fields of a feedback entry"""

    try:
        feedback_service = FeedbackService(db)
        return feedback_service.update_feedback(feedback_id, update_data)

    except KeyError:
        raise NotFoundError("Feedback not found")
    except Exception as e:
        logger.error(f"Error updating feedback {feedback_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating feedback")


@router.delete("/{feedback_id}", status_code=204)
def delete_feedback(
    feedback_id: int = Path(..., description="Feedback ID"),
    db: Session = Depends(get_db),
):
    """Delete a feedback entry"""

    try:
        feedback_service = FeedbackService(db)
        deleted = feedback_service.delete_feedback(feedback_id)

    except Exception as e:
        logger.error(f"Error deleting feedback {feedback_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting feedback")

    if not deleted:
        raise NotFoundError("Feedback not found")

    return Response(status_code=204)
