# backend/core/mixins.py

from sqlalchemy import Column, DateTime, Integer
from sqlalchemy.sql import func


class TimestampMixin:
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(),
                        onupdate=func.now(), nullable=False)


class BusinessScopedMixin:
    """Owning business of a record; NULL while a single business is served"""
    business_id = Column(Integer, nullable=True, index=True)
