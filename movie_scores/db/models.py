from sqlalchemy import Column, Integer, String, Boolean, Float, ForeignKey
from movie_scores.db.database import Base

class UserORM(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    username = Column(String, unique=True, index=True, nullable=False)
    is_admin = Column(Boolean, default=False)


class MovieORM(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    image = Column(String)
    # cached aggregate, only written by the score service
    score = Column(Float, nullable=False, default=0.0)
    count = Column(Integer, nullable=False, default=0)


class ScoreORM(Base):
    __tablename__ = "scores"

    # both references restrict, a removed score row would leave the aggregate stale
    movie_id = Column(Integer, ForeignKey("movies.id", ondelete="RESTRICT"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="RESTRICT"), primary_key=True)
    value = Column(Float, nullable=False)
