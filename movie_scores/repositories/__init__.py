from movie_scores.repositories.interface.movie_repository import MovieRepository
from movie_scores.repositories.interface.score_repository import ScoreRepository
from movie_scores.repositories.interface.user_repository import UserRepository
from movie_scores.repositories.interface.transaction_manager import TransactionManager

from movie_scores.repositories.implementation.sql_alchemy_movie_repo import SQLAlchemyMovieRepo
from movie_scores.repositories.implementation.sql_alchemy_score_repo import SQLAlchemyScoreRepo
from movie_scores.repositories.implementation.sql_alchemy_user_repo import SQLAlchemyUserRepo
from movie_scores.repositories.implementation.sql_alchemy_transaction_manager import SQLAlchemyTransactionManager
