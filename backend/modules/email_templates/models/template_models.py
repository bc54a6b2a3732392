# backend/modules/email_templates/models/template_models.py

from sqlalchemy import Column, Integer, String, Text, DateTime, Enum
from sqlalchemy.sql import func
import enum

from core.database import Base
from core.mixins import TimestampMixin, BusinessScopedMixin


class TemplateStatus(str, enum.Enum):
    ACTIVE = "active"
    DRAFT = "draft"


class EmailTemplate(Base, TimestampMixin, BusinessScopedMixin):
    """Email sent to customers to collect feedback"""
    __tablename__ = "email_templates"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    subject = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    status = Column(
        Enum(TemplateStatus, name="template_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TemplateStatus.DRAFT,
        index=True,
    )
    last_edited = Column(DateTime, nullable=False, default=func.now())
