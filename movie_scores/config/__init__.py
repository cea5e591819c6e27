from movie_scores.config.scores import *

VERSION = "0.1.0"
API_TITLE = "Movie Scores API"
API_DESCRIPTION = "API for the movie catalogue and user scores"


def validate_config():
    if MIN_SCORE >= MAX_SCORE:
        raise ValueError("MIN_SCORE must be less than MAX_SCORE")
    if not 0 < DEFAULT_PAGE_SIZE <= MAX_PAGE_SIZE:
        raise ValueError("DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE")


validate_config()
