# backend/modules/feedback/tests/test_feedback_service.py

import pytest
from datetime import datetime, timedelta, timezone

from modules.feedback.services.feedback_service import (
    FeedbackService,
    parse_sentiment_filter,
)
from modules.feedback.schemas.feedback_schemas import FeedbackCreate, FeedbackUpdate
from modules.sentiment.models.sentiment_models import Sentiment


@pytest.fixture
def feedback_service(db_session, small_analyzer):
    return FeedbackService(db_session, analyzer=small_analyzer)


class TestFeedbackService:
    """Test cases for FeedbackService"""

    def test_create_scores_message(self, feedback_service: FeedbackService):
        """Feedback without sentiment is scored from its message"""
        result = feedback_service.create_feedback(
            FeedbackCreate(customer="Sarah Johnson", message="nice great")
        )

        assert result.id is not None
        assert result.sentiment == Sentiment.POSITIVE
        assert result.sentiment_score == 65
        assert result.tags == []
        assert result.date is not None

    def test_create_keeps_supplied_sentiment(self, feedback_service: FeedbackService):
        result = feedback_service.create_feedback(
            FeedbackCreate(
                customer="Mike Reynolds",
                message="nice great",
                sentiment=Sentiment.NEGATIVE,
                sentiment_score=25,
            )
        )

        assert result.sentiment == Sentiment.NEGATIVE
        assert result.sentiment_score == 25

    def test_create_with_partial_sentiment_is_rescored(
        self, feedback_service: FeedbackService
    ):
        """A label without a score (or the reverse) is replaced by the analyzer"""
        result = feedback_service.create_feedback(
            FeedbackCreate(
                customer="Emma Lewis",
                message="poor awful",
                sentiment=Sentiment.POSITIVE,
            )
        )

        assert result.sentiment == Sentiment.NEGATIVE
        assert result.sentiment_score == 35

    def test_create_normalizes_aware_dates(self, feedback_service: FeedbackService):
        date = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        result = feedback_service.create_feedback(
            FeedbackCreate(customer="Alex Thompson", message="ok", date=date)
        )

        assert result.date == datetime(2024, 1, 1, 10, 0)

    def test_list_is_newest_first(self, feedback_service: FeedbackService):
        for day, customer in [(1, "Old"), (3, "Newest"), (2, "Middle")]:
            feedback_service.create_feedback(
                FeedbackCreate(
                    customer=customer, message="nice", date=datetime(2024, 5, day)
                )
            )

        customers = [f.customer for f in feedback_service.list_feedback()]
        assert customers == ["Newest", "Middle", "Old"]

    def test_list_filters_by_sentiment(self, feedback_service: FeedbackService):
        feedback_service.create_feedback(FeedbackCreate(customer="A", message="great"))
        feedback_service.create_feedback(FeedbackCreate(customer="B", message="fraud"))

        negative = feedback_service.list_feedback(Sentiment.NEGATIVE)

        assert [f.customer for f in negative] == ["B"]

    def test_get_missing_feedback(self, feedback_service: FeedbackService):
        with pytest.raises(KeyError):
            feedback_service.get_feedback(999)

    def test_update_merges_fields_without_rescoring(
        self, feedback_service: FeedbackService
    ):
        created = feedback_service.create_feedback(
            FeedbackCreate(customer="David Clark", message="great", tags=["support"])
        )

        updated = feedback_service.update_feedback(
            created.id, FeedbackUpdate(message="fraud fraud fraud")
        )

        assert updated.message == "fraud fraud fraud"
        assert updated.customer == "David Clark"
        assert updated.tags == ["support"]
        assert updated.sentiment == created.sentiment
        assert updated.sentiment_score == created.sentiment_score

    def test_update_ignores_null_required_fields(self, feedback_service: FeedbackService):
        created = feedback_service.create_feedback(
            FeedbackCreate(customer="David Clark", message="great")
        )

        updated = feedback_service.update_feedback(
            created.id, FeedbackUpdate(customer=None, sentiment_score=None)
        )

        assert updated.customer == "David Clark"
        assert updated.sentiment_score is None

    def test_update_missing_feedback(self, feedback_service: FeedbackService):
        with pytest.raises(KeyError):
            feedback_service.update_feedback(999, FeedbackUpdate(message="x"))

    def test_delete(self, feedback_service: FeedbackService):
        created = feedback_service.create_feedback(
            FeedbackCreate(customer="A", message="nice")
        )

        assert feedback_service.delete_feedback(created.id) is True
        assert feedback_service.delete_feedback(created.id) is False
        assert feedback_service.list_feedback() == []


class TestSentimentFilter:
    """Test cases for parsing the sentiment query value"""

    def test_known_values(self):
        assert parse_sentiment_filter("positive") == Sentiment.POSITIVE
        assert parse_sentiment_filter("neutral") == Sentiment.NEUTRAL
        assert parse_sentiment_filter("negative") == Sentiment.NEGATIVE

    @pytest.mark.parametrize("value", [None, "", "all", "POSITIVE", "happy"])
    def test_other_values_are_ignored(self, value):
        assert parse_sentiment_filter(value) is None
