import logging
import math

from movie_scores.config import DEFAULT_PAGE_SIZE
from movie_scores.domain.dto import MovieCreate, MovieDTO, MoviePage
from movie_scores.domain.models import Movie
from movie_scores.repositories import MovieRepository, TransactionManager
from movie_scores.exceptions.movie import (
    MovieServiceException,
    ResourceNotFoundException,
    DatabaseException
)
from movie_scores.exceptions.repository import (
    EntityNotFoundException,
    IntegrityViolationException
)

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, movie_repository: MovieRepository, transaction_manager: TransactionManager):
        self.movie_repository = movie_repository
        self.transaction_manager = transaction_manager

    def find_all(self, title: str = "", page: int = 0, size: int = DEFAULT_PAGE_SIZE) -> MoviePage:
        if page < 0 or size < 1:
            raise MovieServiceException("page must be >= 0 and size >= 1")

        movies = self.movie_repository.search_by_title(title, page * size, size)
        total = self.movie_repository.count_by_title(title)
        return MoviePage(
            content=[self._to_dto(movie) for movie in movies],
            page=page,
            size=size,
            total_elements=total,
            total_pages=math.ceil(total / size)
        )

    def find_by_id(self, movie_id: int) -> MovieDTO:
        movie = self.movie_repository.get_by_id(movie_id)
        if movie is None:
            raise ResourceNotFoundException(f"Movie with ID {movie_id} not found")
        return self._to_dto(movie)

    def insert(self, movie_data: MovieCreate) -> MovieDTO:
        # aggregate starts empty, only scores move it
        movie = Movie(title=movie_data.title, image=movie_data.image)
        with self.transaction_manager.transaction():
            created = self.movie_repository.create(movie)
        logger.info(f"Created movie {created.id}")
        return self._to_dto(created)

    def update(self, movie_id: int, movie_data: MovieCreate) -> MovieDTO:
        movie = Movie(id=movie_id, title=movie_data.title, image=movie_data.image)
        try:
            with self.transaction_manager.transaction():
                updated = self.movie_repository.update(movie)
        except EntityNotFoundException:
            raise ResourceNotFoundException(f"Movie with ID {movie_id} not found")
        return self._to_dto(updated)

    def delete(self, movie_id: int) -> None:
        if not self.movie_repository.exists_by_id(movie_id):
            raise ResourceNotFoundException(f"Movie with ID {movie_id} not found")
        try:
            with self.transaction_manager.transaction():
                deleted = self.movie_repository.delete(movie_id)
        except IntegrityViolationException:
            raise DatabaseException("Integrity violation")
        if not deleted:
            raise ResourceNotFoundException(f"Movie with ID {movie_id} not found")
        logger.info(f"Deleted movie {movie_id}")

    def _to_dto(self, movie: Movie) -> MovieDTO:
        return MovieDTO(
            id=movie.id,
            title=movie.title,
            score=movie.score,
            count=movie.count,
            image=movie.image
        )
