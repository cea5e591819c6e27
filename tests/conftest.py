import os
import tempfile

# environment must be in place before movie_scores.config.environment is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("USE_SQLITE", "true")
os.environ.setdefault("SQLITE_PATH", os.path.join(tempfile.gettempdir(), "movie_scores_test.db"))
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "movie_scores_logs"))

import pytest
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from movie_scores.db.models import Base


@pytest.fixture
def make_token():
    """Sign a bearer token for the given username with the test secret."""
    def _make_token(username: str, secret: str = "test-secret-key") -> str:
        return jwt.encode({"sub": username}, secret, algorithm="HS256")
    return _make_token


@pytest.fixture
def session():
    """Create a fresh in-memory SQLite database for each test."""
    engine = create_engine("sqlite:///:memory:")
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    yield db
    db.close()
    engine.dispose()


@pytest.fixture
def shared_engine():
    """In-memory SQLite engine shared by every session, used across threads by the API tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()
