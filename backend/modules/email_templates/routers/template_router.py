# backend/modules/email_templates/routers/template_router.py

from fastapi import APIRouter, Depends, HTTPException, Path, Body, Response
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from core.database import get_db
from core.exceptions import NotFoundError, ValidationError
from modules.email_templates.services.template_service import EmailTemplateService
from modules.email_templates.schemas.template_schemas import (
    EmailTemplateCreate,
    EmailTemplateUpdate,
    EmailTemplateResponse,
    TemplatePreviewRequest,
    TemplatePreviewResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/templates", tags=["Email Templates"])


@router.get("", response_model=List[EmailTemplateResponse])
def list_templates(db: Session = Depends(get_db)):
    """List all email templates"""

    try:
        return EmailTemplateService(db).list_templates()

    except Exception as e:
        logger.error(f"Error fetching templates: {e}")
        raise HTTPException(status_code=500, detail="Error fetching templates")


@router.get("/{template_id}", response_model=EmailTemplateResponse)
def get_template(
    template_id: int = Path(..., description="Template ID"),
    db: Session = Depends(get_db),
):
    """Get a specific email template"""

    try:
        return EmailTemplateService(db).get_template(template_id)

    except KeyError:
        raise NotFoundError("Template not found")
    except Exception as e:
        logger.error(f"Error fetching template {template_id}: {e}")
        raise HTTPException(status_code=500, detail="Error fetching template")


@router.post("", response_model=EmailTemplateResponse, status_code=201)
def create_template(
    template_data: EmailTemplateCreate,
    db: Session = Depends(get_db),
):
    """Create a new email template"""

    try:
        return EmailTemplateService(db).create_template(template_data)

    except ValueError as e:
        logger.warning(f"Rejected template: {e}")
        raise ValidationError(str(e))
    except Exception as e:
        logger.error(f"Error creating template: {e}")
        raise HTTPException(status_code=500, detail="Error creating template")


@router.put("/{template_id}", response_model=EmailTemplateResponse)
def update_template(
    template_id: int = Path(..., description="Template ID"),
    template_data: EmailTemplateUpdate = Body(...),
    db: Session = Depends(get_db),
):
    """Update an email template"""

    try:
        return EmailTemplateService(db).update_template(template_id, template_data)

    except KeyError:
        raise NotFoundError("Template not found")
    except ValueError as e:
        logger.warning(f"Rejected template update: {e}")
        raise ValidationError(str(e))
    except Exception as e:
        logger.error(f"Error updating template {template_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating template")


@router.delete("/{template_id}", status_code=204)
def delete_template(
    template_id: int = Path(..., description="Template ID"),
    db: Session = Depends(get_db),
):
    """Delete an email template"""

    try:
        deleted = EmailTemplateService(db).delete_template(template_id)

    except Exception as e:
        logger.error(f"Error deleting template {template_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting template")

    if not deleted:
        raise NotFoundError("Template not found")

    return Response(status_code=204)


@router.post("/{template_id}/preview", response_model=TemplatePreviewResponse)
def preview_template(
    template_id: int = Path(..., description="Template ID"),
    preview_request: Optional[TemplatePreviewRequest] = Body(None),
    db: Session = Depends(get_db),
):
    """Render a template with brand settings and optional variables"""

    variables = preview_request.variables if preview_request else {}

    try:
        return EmailTemplateService(db).render_preview(template_id, variables)

    except KeyError:
        raise NotFoundError("Template not found")
    except ValueError as e:
        raise ValidationError(str(e))
    except Exception as e:
        logger.error(f"Error rendering template {template_id}: {e}")
        raise HTTPException(status_code=500, detail="Error rendering template")
