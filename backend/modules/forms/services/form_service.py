# backend/modules/forms/services/form_service.py

from sqlalchemy.orm import Session
from typing import List
import logging

from modules.forms.models.form_models import FeedbackForm
from modules.forms.schemas.form_schemas import (
    FeedbackFormCreate,
    FeedbackFormUpdate,
    FeedbackFormResponse,
)

logger = logging.getLogger(__name__)


class FeedbackFormService:
    """Service for managing feedback forms"""

    def __init__(self, db: Session):
        self.db = db

    def create_form(self, form_data: FeedbackFormCreate) -> FeedbackFormResponse:
        """Create a new feedback form"""

        try:
            form = FeedbackForm(
                name=form_data.name,
                questions=[q.model_dump() for q in form_data.questions],
                appearance=form_data.appearance.model_dump(),
                business_id=form_data.business_id,
            )

            self.db.add(form)
            self.db.commit()
            self.db.refresh(form)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating feedback form: {e}")
            raise

        logger.info(
            f"Created feedback form {form.id} ({form.name}) "
            f"with {len(form.questions)} questions"
        )
        return FeedbackFormResponse.model_validate(form)

    def get_form(self, form_id: int) -> FeedbackFormResponse:
        """Get a specific form by ID"""
        return FeedbackFormResponse.model_validate(self._get_or_raise(form_id))

    def list_forms(self) -> List[FeedbackFormResponse]:
        forms = self.db.query(FeedbackForm).order_by(FeedbackForm.id).all()
        return [FeedbackFormResponse.model_validate(f) for f in forms]

    def update_form(
        self, form_id: int, form_data: FeedbackFormUpdate
    ) -> FeedbackFormResponse:
        """Replace the supplied top-level fields of a form"""

        form = self._get_or_raise(form_id)
        changes = form_data.model_dump(exclude_unset=True)

        try:
            if form_data.name is not None:
                form.name = form_data.name
            if form_data.questions is not None:
                form.questions = [q.model_dump() for q in form_data.questions]
            if form_data.appearance is not None:
                form.appearance = form_data.appearance.model_dump()
            if "business_id" in changes:
                form.business_id = form_data.business_id

            self.db.commit()
            self.db.refresh(form)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating feedback form {form_id}: {e}")
            raise

        logger.info(f"Updated feedback form {form_id}: {sorted(changes)}")
        return FeedbackFormResponse.model_validate(form)

    def delete_form(self, form_id: int) -> bool:
        """Delete a form; False when it does not exist"""

        form = self.db.query(FeedbackForm).filter(FeedbackForm.id == form_id).first()
        if not form:
            return False

        try:
            self.db.delete(form)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error deleting feedback form {form_id}: {e}")
            raise

        logger.info(f"Deleted feedback form {form_id}")
        return True

    def _get_or_raise(self, form_id: int) -> FeedbackForm:
        form = self.db.query(FeedbackForm).filter(FeedbackForm.id == form_id).first()
        if not form:
            raise KeyError(f"Form {form_id} not found")
        return form
