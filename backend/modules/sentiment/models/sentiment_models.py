# backend/modules/sentiment/models/sentiment_models.py

from dataclasses import dataclass, field
from typing import List, Tuple
import enum


class Sentiment(str, enum.Enum):
    """Coarse sentiment classification of a text"""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


NEUTRAL_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

# Inclusive classification thresholds on the 0-100 scale
POSITIVE_THRESHOLD = 65
NEGATIVE_THRESHOLD = 35


@dataclass(frozen=True)
class SentimentResult:
    """Sentiment analysis result"""
    sentiment: Sentiment
    score: int

    def to_dict(self) -> dict:
        return {"sentiment": self.sentiment.value, "score": self.score}


NEUTRAL_RESULT = SentimentResult(sentiment=Sentiment.NEUTRAL, score=NEUTRAL_SCORE)


@dataclass(frozen=True)
class SentimentBreakdown:
    """Scoring result together with the intermediate values that produced it"""
    result: SentimentResult
    token_count: int
    match_count: int
    total_weight: int
    raw_average: float
    matches: List[Tuple[str, str, int]] = field(default_factory=list)  # (token, stem, weight)
