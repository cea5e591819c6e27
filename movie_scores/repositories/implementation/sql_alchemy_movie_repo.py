from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session
from typing import List, Optional

from movie_scores.db.models import MovieORM
from movie_scores.domain.models import Movie
from movie_scores.repositories.interface.movie_repository import MovieRepository
from movie_scores.exceptions.repository import (
    EntityNotFoundException,
    IntegrityViolationException,
    InvalidEntityDataException,
    RepositoryOperationException,
    TransientRepositoryException
)


class SQLAlchemyMovieRepo(MovieRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_domain(self, movie_orm: MovieORM) -> Movie:
        try:
            return Movie(
                id=movie_orm.id,
                title=movie_orm.title,
                image=movie_orm.image,
                score=float(movie_orm.score or 0.0),
                count=int(movie_orm.count or 0)
            )
        except Exception as e:
            raise InvalidEntityDataException("Movie", f"Failed to convert movie data: {str(e)}")

    def _to_orm(self, movie: Movie) -> MovieORM:
        return MovieORM(
            id=movie.id,
            title=movie.title,
            image=movie.image,
            score=movie.score,
            count=movie.count
        )

    def _title_filter(self, title: str):
        return MovieORM.title.icontains(title or "", autoescape=True)

    def get_by_id(self, movie_id: int) -> Optional[Movie]:
        try:
            if not isinstance(movie_id, int):
                raise RepositoryOperationException(f"Invalid movie_id type. Expected int, got {type(movie_id)}")

            movie_orm = self.session.get(MovieORM, movie_id)
            if not movie_orm:
                return None
            return self._to_domain(movie_orm)
        except (InvalidEntityDataException, RepositoryOperationException):
            raise
        except OperationalError as e:
            raise TransientRepositoryException(f"Failed to get movie by ID: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get movie by ID: {str(e)}")

    def get_by_id_for_update(self, movie_id: int) -> Optional[Movie]:
        # FOR UPDATE is dropped by dialects without row locks (SQLite), where
        # the first write of the transaction takes the database lock instead
        try:
            stmt = (
                select(MovieORM)
                .where(MovieORM.id == movie_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            movie_orm = self.session.execute(stmt).scalar_one_or_none()
            return self._to_domain(movie_orm) if movie_orm else None
        except InvalidEntityDataException:
            raise
        except OperationalError as e:
            raise TransientRepositoryException(f"Failed to lock movie {movie_id}: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to lock movie {movie_id}: {str(e)}")

    def exists_by_id(self, movie_id: int) -> bool:
        try:
            stmt = select(MovieORM.id).where(MovieORM.id == movie_id)
            return self.session.execute(stmt).first() is not None
        except Exception as e:
            raise RepositoryOperationException(f"Failed to check movie existence: {str(e)}")

    def search_by_title(self, title: str, offset: int, limit: int) -> List[Movie]:
        try:
            stmt = (
                select(MovieORM)
                .where(self._title_filter(title))
                .order_by(MovieORM.id)
                .offset(offset)
                .limit(limit)
            )
            movies_orm = self.session.execute(stmt).scalars().all()
            return [self._to_domain(movie_orm) for movie_orm in movies_orm]
        except InvalidEntityDataException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to search movies by title: {str(e)}")

    def count_by_title(self, title: str) -> int:
        try:
            stmt = select(func.count(MovieORM.id)).where(self._title_filter(title))
            return self.session.execute(stmt).scalar_one()
        except Exception as e:
            raise RepositoryOperationException(f"Failed to count movies by title: {str(e)}")

    def create(self, movie: Movie) -> Movie:
        try:
            movie_orm = self._to_orm(movie)
            self.session.add(movie_orm)
            self.session.flush()
            return self._to_domain(movie_orm)
        except IntegrityError as e:
            raise IntegrityViolationException(f"Failed to create movie: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to create movie: {str(e)}")

    def update(self, movie: Movie) -> Movie:
        """Update descriptive fields only, the aggregate is left as stored."""
        try:
            movie_orm = self.session.get(MovieORM, movie.id)
            if not movie_orm:
                raise EntityNotFoundException(f"Movie {movie.id} not found")

            movie_orm.title = movie.title
            movie_orm.image = movie.image

            self.session.flush()
            return self._to_domain(movie_orm)
        except EntityNotFoundException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to update movie: {str(e)}")

    def save_aggregate(self, movie: Movie) -> Movie:
        # Explicit UPDATE: the ORM would skip a column whose new value equals
        # a stale value loaded earlier in the session
        try:
            stmt = (
                update(MovieORM)
                .where(MovieORM.id == movie.id)
                .values(score=movie.score, count=movie.count)
            )
            result = self.session.execute(stmt)
            if result.rowcount == 0:
                raise EntityNotFoundException(f"Movie {movie.id} not found")
            return movie
        except EntityNotFoundException:
            raise
        except OperationalError as e:
            raise TransientRepositoryException(f"Failed to save movie aggregate: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to save movie aggregate: {str(e)}")

    def delete(self, movie_id: int) -> bool:
        try:
            movie_orm = self.session.get(MovieORM, movie_id)
            if not movie_orm:
                return False

            self.session.delete(movie_orm)
            self.session.flush()
            return True
        except IntegrityError as e:
            raise IntegrityViolationException(f"Movie {movie_id} is still referenced: {str(e)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to delete movie: {str(e)}")
