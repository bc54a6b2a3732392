# backend/modules/email_templates/schemas/template_schemas.py

from pydantic import Field
from typing import Optional, Dict, Any
from datetime import datetime

from core.schemas import CamelModel
from modules.email_templates.models.template_models import TemplateStatus


class EmailTemplateBase(CamelModel):
    """Base email template schema"""

    name: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)
    status: TemplateStatus = TemplateStatus.DRAFT
    business_id: Optional[int] = None


class EmailTemplateCreate(EmailTemplateBase):
    pass


class EmailTemplateUpdate(CamelModel):
    """Schema for partial template updates"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    subject: Optional[str] = Field(None, min_length=1, max_length=500)
    content: Optional[str] = Field(None, min_length=1)
    status: Optional[TemplateStatus] = None
    business_id: Optional[int] = None


class EmailTemplateResponse(EmailTemplateBase):
    """Schema for template responses"""

    id: int
    last_edited: datetime


class TemplatePreviewRequest(CamelModel):
    """Variables overriding the brand defaults in a preview"""

    variables: Dict[str, Any] = Field(default_factory=dict)


class TemplatePreviewResponse(CamelModel):
    template_id: int
    subject: str
    content: str
