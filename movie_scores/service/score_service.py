import logging
import math
from typing import List

from movie_scores.auth.identity import IdentityProvider
from movie_scores.domain.dto import MovieDTO
from movie_scores.domain.models import Movie, Score
from movie_scores.repositories import MovieRepository, ScoreRepository, TransactionManager
from movie_scores.exceptions.auth import UnauthenticatedException
from movie_scores.exceptions.movie import ResourceNotFoundException
from movie_scores.exceptions.repository import RepositoryException
from movie_scores.exceptions.score import ScoreServiceException, ScoreInvariantException

logger = logging.getLogger(__name__)


def compute_aggregate(scores: List[Score]) -> tuple[float, int]:
    """Return ``(mean, count)`` of the given scores, ``(0.0, 0)`` when empty."""
    count = len(scores)
    if count == 0:
        return 0.0, 0
    total = sum(s.value for s in scores)
    if math.isinf(total):
        # the sum of large finite values can overflow where the mean does not
        return sum(s.value / count for s in scores), count
    return total / count, count


class ScoreService:
    """Records a user's score for a movie and keeps the movie aggregate in step.

    The aggregate stored on the movie is a cache of the score rows. It is
    recomputed from every row of the movie inside the same transaction as the
    upsert that changed them, so it can always be derived again from the rows.
    """

    def __init__(
        self,
        identity_provider: IdentityProvider,
        movie_repo: MovieRepository,
        score_repo: ScoreRepository,
        transaction_manager: TransactionManager
    ):
        self.identity_provider = identity_provider
        self.movie_repo = movie_repo
        self.score_repo = score_repo
        self.transaction_manager = transaction_manager

    def save_score(self, movie_id: int, value: float) -> MovieDTO:
        try:
            user = self.identity_provider.current_user()

            # Fast existence check, nothing is written for an unknown movie
            if self.movie_repo.get_by_id(movie_id) is None:
                raise ResourceNotFoundException(f"Movie with ID {movie_id} not found")

            with self.transaction_manager.transaction():
                # Revalidate under the row lock, the movie may be gone by now
                movie = self.movie_repo.get_by_id_for_update(movie_id)
                if movie is None:
                    raise ResourceNotFoundException(f"Movie with ID {movie_id} not found")

                self.score_repo.upsert(movie_id, user.id, value)

                score, count = compute_aggregate(self.score_repo.all_for_movie(movie_id))
                if count == 0:
                    raise ScoreInvariantException(
                        f"Movie {movie_id} has no scores right after user {user.id} scored it"
                    )

                movie.score = score
                movie.count = count
                saved = self.movie_repo.save_aggregate(movie)

            logger.info(f"User {user.id} scored movie {movie_id}: score={saved.score:.4f} count={saved.count}")
            return self._to_dto(saved)
        except (UnauthenticatedException, ResourceNotFoundException, ScoreInvariantException):
            raise
        except RepositoryException as e:
            logger.warning(f"Saving score for movie {movie_id} failed: {str(e)}")
            raise
        except Exception as e:
            logger.error(f"Unexpected error while saving score for movie {movie_id}: {str(e)}")
            raise ScoreServiceException(f"Unexpected error while saving score: {str(e)}")

    def _to_dto(self, movie: Movie) -> MovieDTO:
        return MovieDTO(
            id=movie.id,
            title=movie.title,
            score=movie.score,
            count=movie.count,
            image=movie.image
        )
