from abc import ABC, abstractmethod
from typing import List, Optional

from movie_scores.domain.models import Score

class ScoreRepository(ABC):
    @abstractmethod
    def upsert(self, movie_id: int, user_id: int, value: float) -> "Score":
        pass

    @abstractmethod
    def all_for_movie(self, movie_id: int) -> List["Score"]:
        pass

    @abstractmethod
    def get_by_movie_id_and_user_id(self, movie_id: int, user_id: int) -> Optional["Score"]:
        pass
