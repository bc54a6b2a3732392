# backend/modules/sentiment/routers/sentiment_router.py

from fastapi import APIRouter, Depends, HTTPException
import logging

from modules.sentiment.schemas.sentiment_schemas import (
    SentimentRequest,
    SentimentResponse,
)
from modules.sentiment.services.sentiment_service import (
    SentimentAnalyzer,
    get_sentiment_analyzer,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Sentiment"])


@router.post("/analyze-sentiment", response_model=SentimentResponse)
def analyze_sentiment(
    request: SentimentRequest,
    analyzer: SentimentAnalyzer = Depends(get_sentiment_analyzer),
):
    """Analyze sentiment without saving feedback"""

    try:
        result = analyzer.analyze(request.text)
        return SentimentResponse(sentiment=result.sentiment, score=result.score)

    except Exception as e:
        logger.error(f"Error analyzing sentiment: {e}")
        raise HTTPException(status_code=500, detail="Error analyzing sentiment")
