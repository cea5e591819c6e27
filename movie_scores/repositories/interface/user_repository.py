from abc import ABC, abstractmethod
from typing import Optional

from movie_scores.domain.models import User


class UserRepository(ABC):
    @abstractmethod
    def get_by_username(self, username: str) -> Optional["User"]:
        pass
