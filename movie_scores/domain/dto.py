from pydantic import BaseModel, Field
from typing import Optional, List

from movie_scores.config import MIN_SCORE, MAX_SCORE


class ScoreCreate(BaseModel):
    movie_id: int
    score: float = Field(..., ge=MIN_SCORE, le=MAX_SCORE, allow_inf_nan=False)


class MovieCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    image: Optional[str] = None


class MovieDTO(BaseModel):
    """Read view of a movie, aggregate fields included."""
    id: int
    title: str
    score: float
    count: int
    image: Optional[str] = None


class MoviePage(BaseModel):
    content: List[MovieDTO]
    page: int
    size: int
    total_elements: int
    total_pages: int
