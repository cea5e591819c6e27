import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from movie_scores.config.environment import (
    DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, DB_NAME, USE_SQLITE, SQLITE_PATH, DB_LOCK_TIMEOUT_SECONDS
)

class Base(DeclarativeBase):
    pass


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores foreign keys unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if USE_SQLITE:
    SQLALCHEMY_DATABASE_URL = f"sqlite:///{SQLITE_PATH}"
    # requests are served from a thread pool, one session per request
    connect_args = {"check_same_thread": False, "timeout": DB_LOCK_TIMEOUT_SECONDS}
else:
    SQLALCHEMY_DATABASE_URL = f"postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
    connect_args = {"options": f"-c lock_timeout={int(DB_LOCK_TIMEOUT_SECONDS * 1000)}"}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
