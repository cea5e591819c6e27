import logging

from fastapi import APIRouter, Depends, HTTPException, status

from movie_scores.domain.dto import MovieDTO, ScoreCreate
from movie_scores.service.dependencies import get_score_service
from movie_scores.service.score_service import ScoreService
from movie_scores.exceptions.auth import UnauthenticatedException
from movie_scores.exceptions.movie import ResourceNotFoundException
from movie_scores.exceptions.repository import TransientRepositoryException

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/scores",
    tags=["Scores"],
    responses={404: {"description": "Not found"}}
)

@router.put("", response_model=MovieDTO)
def save_score(
    score_data: ScoreCreate,
    score_service: ScoreService = Depends(get_score_service)
):
    try:
        return score_service.save_score(score_data.movie_id, score_data.score)
    except UnauthenticatedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"}
        )
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except TransientRepositoryException:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Score could not be saved right now, retry the request"
        )
    except Exception as e:
        logger.error(f"Failed to save score: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save score"
        )
