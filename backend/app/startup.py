"""
Application startup validation and initialization.

This module performs startup checks and initialization
so the application is properly configured before serving requests.
"""

import logging
import sys
from typing import List, Tuple
from sqlalchemy import text

from core.config import get_settings
from core.database import engine, init_db, SessionLocal

logger = logging.getLogger(__name__)


class StartupValidator:
    """Validates application startup requirements"""

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def check_database_connection(self) -> bool:
        """Check database connectivity"""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            logger.info("Database connection successful")
            return True
        except Exception as e:
            self.errors.append(f"Database connection failed: {str(e)}")
            return False

    def check_sentiment_lexicon(self) -> bool:
        """Load the sentiment lexicon once so the first request does not pay for it"""
        from modules.sentiment.services.lexicon import LexiconError
        from modules.sentiment.services.sentiment_service import get_sentiment_analyzer

        try:
            analyzer = get_sentiment_analyzer()
            logger.info(f"Sentiment lexicon ready ({len(analyzer.lexicon)} stems)")
            return True
        except LexiconError as e:
            self.errors.append(f"Sentiment lexicon could not be loaded: {str(e)}")
            return False

    def check_environment_config(self) -> bool:
        settings = get_settings()
        if settings.database_url.startswith("sqlite") and settings.is_production:
            self.warnings.append("SQLite database configured in production")
        return True

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        """Run all validation checks"""
        checks = [
            ("Environment Configuration", self.check_environment_config),
            ("Database Connection", self.check_database_connection),
            ("Sentiment Lexicon", self.check_sentiment_lexicon),
        ]

        all_passed = True

        for check_name, check_func in checks:
            logger.info(f"Running check: {check_name}")
            try:
                if not check_func():
                    all_passed = False
            except Exception as e:
                self.errors.append(f"{check_name} check failed with error: {str(e)}")
                all_passed = False

        return all_passed, self.errors, self.warnings


def run_startup_checks():
    """Run all startup validation checks"""
    settings = get_settings()
    logger.info(f"Starting feedback dashboard backend ({settings.environment})")

    validator = StartupValidator()
    passed, errors, warnings = validator.validate_all()

    for warning in warnings:
        logger.warning(f"Startup warning: {warning}")

    for error in errors:
        logger.error(f"Startup error: {error}")

    if not passed and settings.is_production:
        logger.error("Cannot start in production with errors!")
        sys.exit(1)
    elif not passed:
        logger.warning("Starting in development mode despite errors")
    else:
        logger.info("All startup checks passed")

    return passed, warnings


def initialize_database():
    """Create tables and optionally load the sample data"""
    settings = get_settings()
    init_db()

    if not settings.seed_sample_data:
        return

    from app.sample_data import seed_sample_data

    db = SessionLocal()
    try:
        seed_sample_data(db)
    except Exception as e:
        db.rollback()
        logger.error(f"Error seeding sample data: {str(e)}")
        raise
    finally:
        db.close()


def configure_startup_logging():
    """Configure logging for startup"""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
