# backend/modules/branding/models/brand_models.py

from sqlalchemy import Column, Integer, String, Text

from core.database import Base
from core.mixins import TimestampMixin, BusinessScopedMixin

DEFAULT_PRIMARY_COLOR = "#3B82F6"
DEFAULT_SECONDARY_COLOR = "#10B981"
DEFAULT_FONT_FAMILY = "Inter"
DEFAULT_BUTTON_STYLE = "rounded"


class BrandSettings(Base, TimestampMixin, BusinessScopedMixin):
    """Business branding applied to outgoing emails and forms"""
    __tablename__ = "brand_settings"

    id = Column(Integer, primary_key=True, index=True)

    business_name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=False)
    website_url = Column(String(500), nullable=True)

    primary_color = Column(String(20), nullable=False, default=DEFAULT_PRIMARY_COLOR)
    secondary_color = Column(String(20), nullable=False, default=DEFAULT_SECONDARY_COLOR)
    logo = Column(String(500), nullable=True)  # URL or data URI
    font_family = Column(String(100), nullable=False, default=DEFAULT_FONT_FAMILY)
    button_style = Column(String(20), nullable=False, default=DEFAULT_BUTTON_STYLE)
    email_footer = Column(Text, nullable=True)
