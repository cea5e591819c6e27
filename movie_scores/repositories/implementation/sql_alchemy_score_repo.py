from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session
from typing import List, Optional

from movie_scores.db.models import ScoreORM
from movie_scores.domain.models import Score
from movie_scores.repositories.interface.score_repository import ScoreRepository
from movie_scores.exceptions.repository import (
    IntegrityViolationException,
    InvalidEntityDataException,
    RepositoryOperationException,
    TransientRepositoryException
)

# dialects with a native INSERT ... ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLAlchemyScoreRepo(ScoreRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_domain(self, score_orm: ScoreORM) -> Score:
        try:
            return Score(
                movie_id=score_orm.movie_id,
                user_id=score_orm.user_id,
                value=score_orm.value
            )
        except Exception as e:
            raise InvalidEntityDataException("Score", f"Failed to convert score data: {str(e)}")

    def upsert(self, movie_id: int, user_id: int, value: float) -> Score:
        """Insert the (movie, user) score or replace its value.

        Runs inside the caller's transaction and never commits.
        """
        try:
            insert = UPSERT_INSERTS.get(self.session.get_bind().dialect.name)
            if insert is None:
                return self._upsert_in_transaction(movie_id, user_id, value)

            stmt = insert(ScoreORM).values(movie_id=movie_id, user_id=user_id, value=value)
            stmt = stmt.on_conflict_do_update(
                index_elements=["movie_id", "user_id"],
                set_={"value": stmt.excluded.value}
            )
            self.session.execute(stmt)
            return Score(movie_id=movie_id, user_id=user_id, value=value)
        except IntegrityError as e:
            raise IntegrityViolationException(f"Score for movie {movie_id} and user {user_id} rejected: {str(e)}")
        except OperationalError as e:
            raise TransientRepositoryException(f"Failed to upsert score: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to upsert score: {str(e)}")

    def _upsert_in_transaction(self, movie_id: int, user_id: int, value: float) -> Score:
        # the primary key still rejects a concurrent duplicate insert
        stmt = (
            select(ScoreORM)
            .where(ScoreORM.movie_id == movie_id, ScoreORM.user_id == user_id)
            .with_for_update()
        )
        score_orm = self.session.execute(stmt).scalar_one_or_none()
        if score_orm is None:
            score_orm = ScoreORM(movie_id=movie_id, user_id=user_id, value=value)
            self.session.add(score_orm)
        else:
            score_orm.value = value
        self.session.flush()
        return self._to_domain(score_orm)

    def all_for_movie(self, movie_id: int) -> List[Score]:
        try:
            stmt = (
                select(ScoreORM)
                .where(ScoreORM.movie_id == movie_id)
                .execution_options(populate_existing=True)
            )
            scores_orm = self.session.execute(stmt).scalars().all()
            return [self._to_domain(s) for s in scores_orm]
        except OperationalError as e:
            raise TransientRepositoryException(f"Failed to get scores for movie: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get scores for movie: {str(e)}")

    def get_by_movie_id_and_user_id(self, movie_id: int, user_id: int) -> Optional[Score]:
        try:
            score_orm = self.session.query(ScoreORM).filter(
                ScoreORM.movie_id == movie_id,
                ScoreORM.user_id == user_id
            ).populate_existing().first()
            return self._to_domain(score_orm) if score_orm else None
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get score by movie and user: {str(e)}")
