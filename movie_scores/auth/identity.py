import logging
from abc import ABC, abstractmethod
from typing import Optional

from jose import JWTError, jwt

from movie_scores.domain.models import User
from movie_scores.repositories.interface.user_repository import UserRepository
from movie_scores.exceptions.auth import UnauthenticatedException

logger = logging.getLogger(__name__)


class IdentityProvider(ABC):
    @abstractmethod
    def current_user(self) -> User:
        """Resolve the user acting in the current request or raise UnauthenticatedException."""
        pass


class TokenIdentityProvider(IdentityProvider):
    """Resolves the caller from a signed bearer token whose ``sub`` is a username."""

    def __init__(self, token: Optional[str], user_repository: UserRepository, secret_key: str, algorithm: str):
        self.token = token
        self.user_repository = user_repository
        self.secret_key = secret_key
        self.algorithm = algorithm

    def current_user(self) -> User:
        if not self.token:
            raise UnauthenticatedException("Missing bearer token")

        try:
            payload = jwt.decode(self.token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.info(f"Rejected bearer token: {str(e)}")
            raise UnauthenticatedException("Could not validate credentials")

        username = payload.get("sub")
        if not username:
            raise UnauthenticatedException("Could not validate credentials")

        user = self.user_repository.get_by_username(username)
        if user is None:
            raise UnauthenticatedException(f"User {username} not found")
        return user
