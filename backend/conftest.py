"""
Pytest configuration file for backend testing.
"""
import os
import sys
from pathlib import Path

# Tests run against an in-memory SQLite database
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

# Add the backend directory to Python path so imports work correctly
backend_dir = Path(__file__).parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from core.database import Base, SessionLocal, engine, get_db, init_db
from modules.sentiment.services.lexicon import Lexicon
from modules.sentiment.services.sentiment_service import (
    SentimentAnalyzer,
    get_sentiment_analyzer,
)
from modules.sentiment.services.stemmer import Stemmer


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a test database session on freshly created tables."""
    init_db()
    session = SessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client sharing the test database session."""
    from app.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def stemmer() -> Stemmer:
    return Stemmer()


@pytest.fixture(scope="session")
def analyzer() -> SentimentAnalyzer:
    """Analyzer backed by the AFINN lexicon."""
    return get_sentiment_analyzer()


@pytest.fixture
def small_analyzer(stemmer: Stemmer) -> SentimentAnalyzer:
    """Analyzer over a tiny lexicon with easy-to-follow arithmetic."""
    lexicon = Lexicon.from_entries(
        {"nice": 1, "great": 2, "awful": -2, "poor": -1, "fraud": -4}.items(), stemmer
    )
    return SentimentAnalyzer(lexicon, stemmer=stemmer)


@pytest.fixture
def seeded_db(db_session: Session) -> Session:
    """Database loaded with the sample dashboard data."""
    from app.sample_data import seed_sample_data

    seed_sample_data(db_session)
    return db_session
