# backend/modules/branding/schemas/brand_schemas.py

from pydantic import Field
from typing import Optional, Literal

from core.schemas import CamelModel
from modules.branding.models.brand_models import (
    DEFAULT_PRIMARY_COLOR,
    DEFAULT_SECONDARY_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_BUTTON_STYLE,
)

ButtonStyle = Literal["rounded", "square", "outline"]

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class BrandSettingsUpdate(CamelModel):
    """Fields accepted by the brand settings upsert; omitted fields are kept"""

    business_name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_email: Optional[str] = Field(None, min_length=3, max_length=255)
    website_url: Optional[str] = Field(None, max_length=500)
    primary_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    secondary_color: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    logo: Optional[str] = None
    font_family: Optional[str] = Field(None, min_length=1, max_length=100)
    button_style: Optional[ButtonStyle] = None
    email_footer: Optional[str] = None
    business_id: Optional[int] = None


class BrandSettingsResponse(CamelModel):
    """Schema for brand settings responses"""

    id: int
    business_name: str
    contact_email: str
    website_url: Optional[str] = None
    primary_color: str = DEFAULT_PRIMARY_COLOR
    secondary_color: str = DEFAULT_SECONDARY_COLOR
    logo: Optional[str] = None
    font_family: str = DEFAULT_FONT_FAMILY
    button_style: ButtonStyle = DEFAULT_BUTTON_STYLE
    email_footer: Optional[str] = None
    business_id: Optional[int] = None
