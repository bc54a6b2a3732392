# backend/modules/forms/models/form_models.py

from sqlalchemy import Column, Integer, String, JSON

from core.database import Base
from core.mixins import TimestampMixin, BusinessScopedMixin


class FeedbackForm(Base, TimestampMixin, BusinessScopedMixin):
    """Customer feedback questionnaire"""
    __tablename__ = "feedback_forms"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    questions = Column(JSON, nullable=False, default=list)  # List of question dicts
    appearance = Column(JSON, nullable=False, default=dict)
