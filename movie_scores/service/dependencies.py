from fastapi import Depends
from sqlalchemy.orm import Session

from movie_scores.auth.dependencies import get_identity_provider
from movie_scores.auth.identity import IdentityProvider
from movie_scores.db.database import get_db
from movie_scores.repositories import SQLAlchemyMovieRepo, SQLAlchemyScoreRepo, SQLAlchemyTransactionManager
from movie_scores.service.movie_service import MovieService
from movie_scores.service.score_service import ScoreService

def get_score_service(
    db: Session = Depends(get_db),
    identity_provider: IdentityProvider = Depends(get_identity_provider)
) -> ScoreService:
    return ScoreService(
        identity_provider=identity_provider,
        movie_repo=SQLAlchemyMovieRepo(db),
        score_repo=SQLAlchemyScoreRepo(db),
        transaction_manager=SQLAlchemyTransactionManager(db)
    )

def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService(SQLAlchemyMovieRepo(db), SQLAlchemyTransactionManager(db))
