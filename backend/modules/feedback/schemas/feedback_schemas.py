# backend/modules/feedback/schemas/feedback_schemas.py

from pydantic import Field, field_validator
from typing import Optional, List
from datetime import datetime

from core.schemas import CamelModel
from core.time_utils import to_naive_utc
from modules.sentiment.models.sentiment_models import Sentiment


class FeedbackBase(CamelModel):
    """Base feedback schema"""

    customer: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    tags: Optional[List[str]] = None
    business_id: Optional[int] = None

    @field_validator("tags")
    @classmethod
    def strip_tags(cls, v):
        if v is None:
            return v
        return [tag.strip() for tag in v if tag and tag.strip()]


class FeedbackCreate(FeedbackBase):
    """Schema for creating feedback; sentiment is computed when omitted"""

    sentiment: Optional[Sentiment] = None
    sentiment_score: Optional[int] = Field(None, ge=0, le=100)
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_naive_utc(v)


class FeedbackUpdate(CamelModel):
    """Schema for partial feedback updates"""

    customer: Optional[str] = Field(None, min_length=1, max_length=255)
    message: Optional[str] = Field(None, min_length=1)
    sentiment: Optional[Sentiment] = None
    sentiment_score: Optional[int] = Field(None, ge=0, le=100)
    date: Optional[datetime] = None
    tags: Optional[List[str]] = None
    business_id: Optional[int] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_naive_utc(v)


class FeedbackResponse(CamelModel):
    """Schema for feedback responses"""

    id: int
    customer: str
    sentiment: Sentiment
    sentiment_score: Optional[int]
    message: str
    date: datetime
    tags: Optional[List[str]] = None
    business_id: Optional[int] = None
