# backend/modules/feedback/services/feedback_service.py

from sqlalchemy.orm import Session
from sqlalchemy import desc
from typing import Optional, List
import logging

from core.time_utils import utcnow
from modules.feedback.models.feedback_models import Feedback
from modules.feedback.schemas.feedback_schemas import (
    FeedbackCreate,
    FeedbackUpdate,
    FeedbackResponse,
)
from modules.sentiment.models.sentiment_models import Sentiment
from modules.sentiment.services.sentiment_service import (
    SentimentAnalyzer,
    get_sentiment_analyzer,
)

logger = logging.getLogger(__name__)

# Columns that cannot be cleared by an update
REQUIRED_FIELDS = {"customer", "message", "sentiment", "date"}


def parse_sentiment_filter(value: Optional[str]) -> Optional[Sentiment]:
    """Return the Sentiment named by a query value, or None for anything else"""
    if not value:
        return None
    try:
        return Sentiment(value)
    except ValueError:
        return None


class FeedbackService:
    """Service for managing customer feedback"""

    def __init__(self, db: Session, analyzer: Optional[SentimentAnalyzer] = None):
        self.db = db
        self.analyzer = analyzer or get_sentiment_analyzer()

    def create_feedback(self, feedback_data: FeedbackCreate) -> FeedbackResponse:
        """Create a new feedback entry, scoring the message when needed"""

        sentiment = feedback_data.sentiment
        sentiment_score = feedback_data.sentiment_score

        # Both values are taken from the analyzer unless the caller supplied both
        if sentiment is None or sentiment_score is None:
            result = self.analyzer.analyze(feedback_data.message)
            sentiment = result.sentiment
            sentiment_score = result.score

        try:
            feedback = Feedback(
                customer=feedback_data.customer,
                message=feedback_data.message,
                sentiment=sentiment,
                sentiment_score=sentiment_score,
                date=feedback_data.date or utcnow(),
                tags=feedback_data.tags or [],
                business_id=feedback_data.business_id,
            )

            self.db.add(feedback)
            self.db.commit()
            self.db.refresh(feedback)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error creating feedback: {e}")
            raise

        logger.info(
            f"Created feedback {feedback.id} from {feedback.customer} "
            f"({feedback.sentiment.value}, score {feedback.sentiment_score})"
        )

        return FeedbackResponse.model_validate(feedback)

    def get_feedback(self, feedback_id: int) -> FeedbackResponse:
        """Get a specific feedback entry by ID"""

        return FeedbackResponse.model_validate(self._get_or_raise(feedback_id))

    def list_feedback(self, sentiment: Optional[Sentiment] = None) -> List[FeedbackResponse]:
        """List feedback newest first, optionally restricted to one sentiment"""

        query = self.db.query(Feedback)
        if sentiment is not None:
            query = query.filter(Feedback.sentiment == sentiment)

        feedback_list = query.order_by(desc(Feedback.date), desc(Feedback.id)).all()
        return [FeedbackResponse.model_validate(f) for f in feedback_list]

    def update_feedback(
        self, feedback_id: int, update_data: FeedbackUpdate
    ) -> FeedbackResponse:
        """Merge the supplied fields into an existing feedback entry"""

        feedback = self._get_or_raise(feedback_id)

        changes = update_data.model_dump(exclude_unset=True)
        try:
            for field, value in changes.items():
                if value is None and field in REQUIRED_FIELDS:
                    continue
                setattr(feedback, field, value)

            self.db.commit()
            self.db.refresh(feedback)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating feedback {feedback_id}: {e}")
            raise

        logger.info(f"Updated feedback {feedback_id}: {sorted(changes)}")

        return FeedbackResponse.model_validate(feedback)

    def delete_feedback(self, feedback_id: int) -> bool:
        """Delete a feedback entry; False when it does not exist"""

        feedback = self.db.query(Feedback).filter(Feedback.id == feedback_id).first()
        if not feedback:
            return False

        try:
            self.db.delete(feedback)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error deleting feedback {feedback_id}: {e}")
            raise

        logger.info(f"Deleted feedback {feedback_id}")
        return True

    def _get_or_raise(self, feedback_id: int) -> Feedback:
        feedback = self.db.query(Feedback).filter(Feedback.id == feedback_id).first()
        if not feedback:
            raise KeyError(f"Feedback {feedback_id} not found")
        return feedback
