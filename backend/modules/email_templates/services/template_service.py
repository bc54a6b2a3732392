# backend/modules/email_templates/services/template_service.py

import logging
import re
from typing import Optional, Dict, Any, List
from sqlalchemy.orm import Session
from jinja2 import select_autoescape, TemplateError
from jinja2.exceptions import SecurityError
from jinja2.sandbox import SandboxedEnvironment

from core.time_utils import utcnow
from modules.branding.models.brand_models import BrandSettings
from modules.branding.services.brand_service import BrandSettingsService
from modules.email_templates.models.template_models import EmailTemplate
from modules.email_templates.schemas.template_schemas import (
    EmailTemplateCreate,
    EmailTemplateUpdate,
    EmailTemplateResponse,
    TemplatePreviewResponse,
)

logger = logging.getLogger(__name__)

# Placeholders written by dashboard users, e.g. "[Customer Name]"
PLACEHOLDER_PATTERN = re.compile(r"\[([A-Za-z][A-Za-z0-9 _-]*)\]")


def placeholder_to_variable(placeholder: str) -> str:
    """Map a bracket placeholder label to a template variable name"""
    return re.sub(r"[^0-9a-z]+", "_", placeholder.lower()).strip("_")


def translate_placeholders(text: str) -> str:
    """Rewrite "[Customer Name]" style placeholders as Jinja2 expressions"""
    return PLACEHOLDER_PATTERN.sub(
        lambda match: "{{ " + placeholder_to_variable(match.group(1)) + " }}", text
    )


def brand_variables(brand: Optional[BrandSettings]) -> Dict[str, Any]:
    """Default preview variables derived from the brand settings"""
    if brand is None:
        return {"share_feedback_button": "Share Feedback"}

    button = "Share Feedback"
    if brand.website_url:
        button = f"Share Feedback: {brand.website_url}"

    return {
        "your_business": brand.business_name,
        "business_name": brand.business_name,
        "contact_email": brand.contact_email,
        "website_url": brand.website_url or "",
        "share_feedback_button": button,
    }


class EmailTemplateService:
    """Service for managing feedback email templates"""

    def __init__(self, db: Session):
        self.db = db

        # Templates are user-authored plain-text emails
        self.jinja_env = SandboxedEnvironment(
            autoescape=select_autoescape(['html', 'xml'], default_for_string=False),
            trim_blocks=True,
            lstrip_blocks=True
        )

    def create_template(self, template_data: EmailTemplateCreate) -> EmailTemplateResponse:
        """
        Create a new email template

        Args:
            template_data: Template creation data

        Returns:
            Created template

        Raises:
            ValueError: If the subject or content cannot be parsed
        """
        self._validate_template(template_data.subject, "subject")
        self._validate_template(template_data.content, "content")

        try:
            template = EmailTemplate(
                name=template_data.name,
                subject=template_data.subject,
                content=template_data.content,
                status=template_data.status,
                last_edited=utcnow(),
                business_id=template_data.business_id,
            )

            self.db.add(template)
            self.db.commit()
            self.db.refresh(template)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating email template: {e}")
            raise

        logger.info(f"Created email template: {template.name} (ID: {template.id})")
        return EmailTemplateResponse.model_validate(template)

    def update_template(
        self, template_id: int, template_data: EmailTemplateUpdate
    ) -> EmailTemplateResponse:
        """
        Update the supplied fields of a template and stamp last_edited

        Raises:
            KeyError: If the template does not exist
            ValueError: If the new subject or content cannot be parsed
        """
        template = self._get_or_raise(template_id)

        update_data = {
            field: value
            for field, value in template_data.model_dump(exclude_unset=True).items()
            if value is not None or field == "business_id"
        }

        if "subject" in update_data:
            self._validate_template(update_data["subject"], "subject")
        if "content" in update_data:
            self._validate_template(update_data["content"], "content")

        try:
            for field, value in update_data.items():
                setattr(template, field, value)
            template.last_edited = utcnow()

            self.db.commit()
            self.db.refresh(template)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating email template {template_id}: {e}")
            raise

        logger.info(f"Updated email template: {template.name} (ID: {template.id})")
        return EmailTemplateResponse.model_validate(template)

    def get_template(self, template_id: int) -> EmailTemplateResponse:
        """Get template by ID"""
        return EmailTemplateResponse.model_validate(self._get_or_raise(template_id))

    def list_templates(self) -> List[EmailTemplateResponse]:
        """List all templates in creation order"""
        templates = self.db.query(EmailTemplate).order_by(EmailTemplate.id).all()
        return [EmailTemplateResponse.model_validate(t) for t in templates]

    def delete_template(self, template_id: int) -> bool:
        """
        Delete a template

        Returns:
            True if deleted, False if it did not exist
        """
        template = self.db.query(EmailTemplate).filter(
            EmailTemplate.id == template_id
        ).first()

        if not template:
            return False

        try:
            self.db.delete(template)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error deleting email template {template_id}: {e}")
            raise

        logger.info(f"Deleted email template: {template.name} (ID: {template_id})")
        return True

    def render_preview(
        self, template_id: int, variables: Optional[Dict[str, Any]] = None
    ) -> TemplatePreviewResponse:
        """
        Render a template with brand defaults and the given variables

        Args:
            template_id: Template ID
            variables: Values overriding the brand defaults

        Returns:
            Rendered subject and content, with the brand email footer appended
        """
        template = self._get_or_raise(template_id)
        brand = BrandSettingsService(self.db).get_brand_settings()

        render_vars = brand_variables(brand)
        render_vars.update(variables or {})

        try:
            subject = self.jinja_env.from_string(
                translate_placeholders(template.subject)
            ).render(**render_vars)
            content = self.jinja_env.from_string(
                translate_placeholders(template.content)
            ).render(**render_vars)

        except SecurityError as e:
            logger.warning(f"Blocked unsafe expression in template {template.name}: {str(e)}")
            raise ValueError(f"Template uses an unsafe expression: {str(e)}")
        except TemplateError as e:
            logger.error(f"Error rendering template {template.name}: {str(e)}")
            raise ValueError(f"Template rendering error: {str(e)}")

        if brand is not None and brand.email_footer:
            content = f"{content}\n\n{brand.email_footer}"

        return TemplatePreviewResponse(
            template_id=template.id, subject=subject, content=content
        )

    def _validate_template(self, template_string: str, template_type: str) -> None:
        """
        Validate template syntax

        Raises:
            ValueError: If template is invalid
        """
        try:
            self.jinja_env.from_string(translate_placeholders(template_string))
        except TemplateError as e:
            raise ValueError(f"Invalid {template_type} template: {str(e)}")

    def _get_or_raise(self, template_id: int) -> EmailTemplate:
        template = self.db.query(EmailTemplate).filter(
            EmailTemplate.id == template_id
        ).first()
        if not template:
            raise KeyError(f"Template {template_id} not found")
        return template
