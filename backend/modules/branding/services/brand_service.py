# backend/modules/branding/services/brand_service.py

from sqlalchemy.orm import Session
from typing import Optional
import logging

from modules.branding.models.brand_models import BrandSettings
from modules.branding.schemas.brand_schemas import (
    BrandSettingsUpdate,
    BrandSettingsResponse,
)

logger = logging.getLogger(__name__)

# Needed before a first row can be created
REQUIRED_ON_CREATE = ("business_name", "contact_email")


class BrandSettingsService:
    """Service for the single brand settings record"""

    def __init__(self, db: Session):
        self.db = db

    def get_brand_settings(self) -> Optional[BrandSettings]:
        """Return the stored brand settings row, if any"""
        return self.db.query(BrandSettings).order_by(BrandSettings.id).first()

    def get_brand_settings_response(self) -> Optional[BrandSettingsResponse]:
        settings = self.get_brand_settings()
        if settings is None:
            return None
        return BrandSettingsResponse.model_validate(settings)

    def upsert_brand_settings(
        self, settings_data: BrandSettingsUpdate
    ) -> BrandSettingsResponse:
        """
        Create the brand settings row or overwrite the supplied fields

        Raises:
            ValueError: If no row exists yet and a required field is missing
        """
        changes = {
            field: value
            for field, value in settings_data.model_dump(exclude_unset=True).items()
            if value is not None
        }

        settings = self.get_brand_settings()
        try:
            if settings is None:
                missing = [f for f in REQUIRED_ON_CREATE if f not in changes]
                if missing:
                    raise ValueError(
                        f"Missing required brand settings: {', '.join(missing)}"
                    )
                settings = BrandSettings(**changes)
                self.db.add(settings)
                action = "Created"
            else:
                for field, value in changes.items():
                    setattr(settings, field, value)
                action = "Updated"

            self.db.commit()
            self.db.refresh(settings)

        except ValueError:
            raise
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error saving brand settings: {e}")
            raise

        logger.info(f"{action} brand settings for {settings.business_name}")
        return BrandSettingsResponse.model_validate(settings)
