from sqlalchemy.orm import Session
from typing import Optional

from movie_scores.domain.models import User
from movie_scores.db.models import UserORM
from movie_scores.repositories.interface.user_repository import UserRepository
from movie_scores.exceptions.repository import RepositoryOperationException

class SQLAlchemyUserRepo(UserRepository):
    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, user_orm: UserORM) -> User:
        return User(
            id=user_orm.id,
            name=user_orm.name,
            username=user_orm.username,
            is_admin=bool(user_orm.is_admin)
        )

    def get_by_username(self, username: str) -> Optional[User]:
        """Get a user by username"""
        try:
            user_orm = self.db.query(UserORM).filter(UserORM.username == username).first()
            return self._to_domain(user_orm) if user_orm else None
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get user by username: {str(e)}")
