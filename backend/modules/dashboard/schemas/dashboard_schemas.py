# backend/modules/dashboard/schemas/dashboard_schemas.py

from pydantic import Field

from core.schemas import CamelModel


class SentimentDistribution(CamelModel):
    """Share of feedback per sentiment, in whole percent"""

    positive: int = 0
    neutral: int = 0
    negative: int = 0


class DashboardStats(CamelModel):
    recent_responses: int = Field(..., ge=0)
    active_campaigns: int = Field(..., ge=0)
    avg_sentiment: str  # 0-5 scale, one decimal, e.g. "4.2"
    response_rate: int
    sentiment_distribution: SentimentDistribution
