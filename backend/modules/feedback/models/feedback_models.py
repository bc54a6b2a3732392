# backend/modules/feedback/models/feedback_models.py

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, Enum, Index
from sqlalchemy.sql import func

from core.database import Base
from core.mixins import TimestampMixin, BusinessScopedMixin
from modules.sentiment.models.sentiment_models import Sentiment


class Feedback(Base, TimestampMixin, BusinessScopedMixin):
    """Customer feedback message with its sentiment classification"""
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)

    customer = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False, default=func.now(), index=True)
    tags = Column(JSON, nullable=True)  # List of tag strings

    # Sentiment analysis
    sentiment = Column(
        Enum(Sentiment, name="sentiment", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )
    sentiment_score = Column(Integer, nullable=True)  # 0 to 100

    __table_args__ = (
        Index("idx_feedback_sentiment_date", "sentiment", "date"),
    )
