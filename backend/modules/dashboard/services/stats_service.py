# backend/modules/dashboard/services/stats_service.py

from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy import func
import logging

from core.config import get_settings
from core.time_utils import utcnow
from modules.email_templates.models.template_models import EmailTemplate, TemplateStatus
from modules.feedback.models.feedback_models import Feedback
from modules.sentiment.models.sentiment_models import Sentiment
from modules.sentiment.services.sentiment_service import round_half_up, score_to_stars

logger = logging.getLogger(__name__)


def format_average(scores_total: int, count: int) -> str:
    """Average score as stars with one decimal, ties rounded up"""
    if count == 0:
        return "0.0"
    stars = Decimal(score_to_stars(scores_total / count))
    return str(stars.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def distribution_percentages(counts: Dict[Sentiment, int], total: int) -> Dict[str, int]:
    divisor = max(total, 1)
    return {
        sentiment.value: round_half_up(counts.get(sentiment, 0) / divisor * 100)
        for sentiment in Sentiment
    }


class DashboardStatsService:
    """Aggregates feedback and template data for the dashboard"""

    def __init__(
        self,
        db: Session,
        recent_days: Optional[int] = None,
        response_rate: Optional[int] = None,
    ):
        settings = get_settings()
        self.db = db
        self.recent_days = recent_days if recent_days is not None else settings.stats_recent_days
        self.response_rate = (
            response_rate if response_rate is not None else settings.stats_response_rate
        )

    def get_stats(self) -> Dict:
        since = utcnow() - timedelta(days=self.recent_days)

        recent_responses = (
            self.db.query(func.count(Feedback.id)).filter(Feedback.date >= since).scalar()
        )
        active_campaigns = (
            self.db.query(func.count(EmailTemplate.id))
            .filter(EmailTemplate.status == TemplateStatus.ACTIVE)
            .scalar()
        )

        total, scores_total = self.db.query(
            func.count(Feedback.id),
            func.coalesce(func.sum(func.coalesce(Feedback.sentiment_score, 0)), 0),
        ).one()

        counts = dict(
            self.db.query(Feedback.sentiment, func.count(Feedback.id))
            .group_by(Feedback.sentiment)
            .all()
        )

        stats = {
            "recent_responses": recent_responses or 0,
            "active_campaigns": active_campaigns or 0,
            "avg_sentiment": format_average(int(scores_total or 0), total or 0),
            "response_rate": self.response_rate,
            "sentiment_distribution": distribution_percentages(counts, total or 0),
        }

        logger.debug(f"Dashboard stats: {stats}")
        return stats
