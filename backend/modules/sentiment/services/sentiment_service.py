# backend/modules/sentiment/services/sentiment_service.py

import logging
import math
from functools import lru_cache
from typing import List, Optional, Tuple

from core.config import get_settings
from modules.sentiment.models.sentiment_models import (
    Sentiment,
    SentimentResult,
    SentimentBreakdown,
    NEUTRAL_RESULT,
    MIN_SCORE,
    MAX_SCORE,
    POSITIVE_THRESHOLD,
    NEGATIVE_THRESHOLD,
)
from modules.sentiment.services.lexicon import Lexicon, MIN_WEIGHT, MAX_WEIGHT
from modules.sentiment.services.stemmer import Stemmer
from modules.sentiment.services.tokenizer import WordTokenizer

logger = logging.getLogger(__name__)

# Linear map of the lexicon weight range onto 0..100
SCORE_SCALE = (MAX_SCORE - MIN_SCORE) / (MAX_WEIGHT - MIN_WEIGHT)

# Dashboard averages are shown as 0-5 stars
SCORE_PER_STAR = (MAX_SCORE - MIN_SCORE) / 5


def round_half_up(value: float) -> int:
    """Round .5 away from the floor, e.g. 64.5 -> 65 and -0.5 -> 0"""
    return int(math.floor(value + 0.5))


def classify_score(score: int) -> Sentiment:
    if score >= POSITIVE_THRESHOLD:
        return Sentiment.POSITIVE
    if score <= NEGATIVE_THRESHOLD:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL


def normalize_average(raw_average: float) -> int:
    """Map an average lexicon weight onto the clamped 0-100 score scale"""
    score = round_half_up((raw_average - MIN_WEIGHT) * SCORE_SCALE)
    return max(MIN_SCORE, min(MAX_SCORE, score))


class SentimentAnalyzer:
    """Lexicon-based sentiment scorer for free-text feedback"""

    def __init__(
        self,
        lexicon: Lexicon,
        stemmer: Optional[Stemmer] = None,
        tokenizer: Optional[WordTokenizer] = None,
    ):
        self.lexicon = lexicon
        self.stemmer = stemmer or Stemmer()
        self.tokenizer = tokenizer or WordTokenizer()

    def analyze(self, text: str) -> SentimentResult:
        """Score text as {sentiment, score}; never raises for str input"""
        return self.analyze_detailed(text).result

    def analyze_detailed(self, text: str) -> SentimentBreakdown:
        tokens = self.tokenizer.tokenize(text)

        matches: List[Tuple[str, str, int]] = []
        for token in tokens:
            stem = self.stemmer.stem(token)
            weight = self.lexicon.lookup_word(token.lower())
            if weight is None:
                weight = self.lexicon.lookup(stem)
            if weight is not None:
                matches.append((token, stem, weight))

        if not matches:
            return SentimentBreakdown(
                result=NEUTRAL_RESULT,
                token_count=len(tokens),
                match_count=0,
                total_weight=0,
                raw_average=0.0,
            )

        total_weight = sum(weight for _, _, weight in matches)
        raw_average = total_weight / len(matches)
        score = normalize_average(raw_average)

        return SentimentBreakdown(
            result=SentimentResult(sentiment=classify_score(score), score=score),
            token_count=len(tokens),
            match_count=len(matches),
            total_weight=total_weight,
            raw_average=raw_average,
            matches=matches,
        )


def score_to_stars(score: float) -> float:
    """Convert a 0-100 score to the 0-5 star scale shown on the dashboard"""
    return score / SCORE_PER_STAR


def build_sentiment_analyzer(lexicon_path: Optional[str] = None) -> SentimentAnalyzer:
    stemmer = Stemmer()
    if lexicon_path:
        lexicon = Lexicon.from_file(lexicon_path, stemmer=stemmer)
    else:
        lexicon = Lexicon.load_default(stemmer=stemmer)
    return SentimentAnalyzer(lexicon, stemmer=stemmer)


@lru_cache()
def get_sentiment_analyzer() -> SentimentAnalyzer:
    """Process-wide analyzer, built once from the configured lexicon"""
    settings = get_settings()
    analyzer = build_sentiment_analyzer(settings.sentiment_lexicon_path)
    logger.info(f"Sentiment analyzer ready with {len(analyzer.lexicon)} lexicon stems")
    return analyzer
