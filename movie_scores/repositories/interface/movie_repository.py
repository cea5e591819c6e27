from abc import ABC, abstractmethod
from typing import List, Optional

from movie_scores.domain.models import Movie


class MovieRepository(ABC):
    @abstractmethod
    def get_by_id(self, movie_id: int) -> Optional["Movie"]:
        pass

    @abstractmethod
    def get_by_id_for_update(self, movie_id: int) -> Optional["Movie"]:
        """Load a movie and lock its row until the surrounding transaction ends."""
        pass

    @abstractmethod
    def exists_by_id(self, movie_id: int) -> bool:
        pass

    @abstractmethod
    def search_by_title(self, title: str, offset: int, limit: int) -> List["Movie"]:
        pass

    @abstractmethod
    def count_by_title(self, title: str) -> int:
        pass

    @abstractmethod
    def create(self, movie: "Movie") -> "Movie":
        pass

    @abstractmethod
    def update(self, movie: "Movie") -> "Movie":
        pass

    @abstractmethod
    def save_aggregate(self, movie: "Movie") -> "Movie":
        pass

    @abstractmethod
    def delete(self, movie_id: int) -> bool:
        pass
