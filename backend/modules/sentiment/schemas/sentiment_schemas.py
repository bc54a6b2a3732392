# backend/modules/sentiment/schemas/sentiment_schemas.py

from pydantic import BaseModel, StrictStr

from modules.sentiment.models.sentiment_models import Sentiment


class SentimentRequest(BaseModel):
    """Free text to score"""

    text: StrictStr


class SentimentResponse(BaseModel):
    """Sentiment label and 0-100 score"""

    sentiment: Sentiment
    score: int
