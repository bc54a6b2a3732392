# backend/modules/forms/routers/form_router.py

from fastapi import APIRouter, Depends, HTTPException, Path, Body, Response
from sqlalchemy.orm import Session
from typing import List
import logging

from core.database import get_db
from core.exceptions import NotFoundError
from modules.forms.services.form_service import FeedbackFormService
from modules.forms.schemas.form_schemas import (
    FeedbackFormCreate,
    FeedbackFormUpdate,
    FeedbackFormResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/forms", tags=["Feedback Forms"])


@router.get("", response_model=List[FeedbackFormResponse])
def list_forms(db: Session = Depends(get_db)):
    """List all feedback forms"""

    try:
        return FeedbackFormService(db).list_forms()

    except Exception as e:
        logger.error(f"Error fetching forms: {e}")
        raise HTTPException(status_code=500, detail="Error fetching forms")


@router.get("/{form_id}", response_model=FeedbackFormResponse)
def get_form(
    form_id: int = Path(..., description="Form ID"),
    db: Session = Depends(get_db),
):
    """Get a specific feedback form"""

    try:
        return FeedbackFormService(db).get_form(form_id)

    except KeyError:
        raise NotFoundError("Form not found")
    except Exception as e:
        logger.error(f"Error fetching form {form_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching form")


@router.post("", response_model=FeedbackFormResponse, status_code=201)
def create_form(
    form_data: FeedbackFormCreate,
    db: Session = Depends(get_db),
):
    """Create a new feedback form"""

    try:
        return FeedbackFormService(db).create_form(form_data)

    except Exception as e:
        logger.error(f"Error creating form: {e}")
        raise HTTPException(status_code=500, detail="Error creating form")


@router.put("/{form_id}", response_model=FeedbackFormResponse)
def update_form(
    form_id: int = Path(..., description="Form ID"),
    form_data: FeedbackFormUpdate = Body(...),
    db: Session = Depends(get_db),
):
    """Update a feedback form"""

    try:
        return FeedbackFormService(db).update_form(form_id, form_data)

    except KeyError:
        raise NotFoundError("Form not found")
    except Exception as e:
        logger.error(f"Error updating form {form_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating form")


@router.delete("/{form_id}", status_code=204)
def delete_form(
    form_id: int = Path(..., description="Form ID"),
    db: Session = Depends(get_db),
):
    """Delete a feedback form"""

    try:
        deleted = FeedbackFormService(db).delete_form(form_id)

    except Exception as e:
        logger.error(f"Error deleting form {form_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting form")

    if not deleted:
        raise NotFoundError("Form not found")

    return Response(status_code=204)
