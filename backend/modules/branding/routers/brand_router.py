# backend/modules/branding/routers/brand_router.py

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
import logging

from core.database import get_db
from core.exceptions import ValidationError
from modules.branding.services.brand_service import BrandSettingsService
from modules.branding.schemas.brand_schemas import (
    BrandSettingsUpdate,
    BrandSettingsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/brand-settings", tags=["Brand Settings"])


@router.get("")
def get_brand_settings(db: Session = Depends(get_db)):
    """Get brand settings, or an empty object when none are saved"""

    try:
        brand_service = BrandSettingsService(db)
        settings = brand_service.get_brand_settings_response()
        if settings is None:
            return {}
        return settings.model_dump(by_alias=True)

    except Exception as e:
        logger.error(f"Error fetching brand settings: {e}")
        raise HTTPException(status_code=500, detail="Error fetching brand settings")


@router.put("", response_model=BrandSettingsResponse)
def update_brand_settings(
    settings_data: BrandSettingsUpdate,
    db: Session = Depends(get_db),
):
    """Create or update brand settings"""

    try:
        brand_service = BrandSettingsService(db)
        return brand_service.upsert_brand_settings(settings_data)

    except ValueError as e:
        logger.warning(f"Rejected brand settings: {e}")
        raise ValidationError(str(e))
    except Exception as e:
        logger.error(f"Error updating brand settings: {e}")
        raise HTTPException(status_code=500, detail="Error updating brand settings")
