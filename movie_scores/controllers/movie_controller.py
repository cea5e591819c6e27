from fastapi import APIRouter, Depends, HTTPException, Query, status

from movie_scores.auth.dependencies import get_current_admin_user
from movie_scores.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from movie_scores.domain.dto import MovieCreate, MovieDTO, MoviePage
from movie_scores.domain.models import User
from movie_scores.service.dependencies import get_movie_service
from movie_scores.service.movie_service import MovieService
from movie_scores.exceptions.movie import ResourceNotFoundException, DatabaseException


router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    responses={404: {"description": "Not found"}}
)


@router.get("", response_model=MoviePage)
def find_all(
    title: str = "",
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    movie_service: MovieService = Depends(get_movie_service)
):
    return movie_service.find_all(title, page, size)


@router.get("/{movie_id}", response_model=MovieDTO)
def find_by_id(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return movie_service.find_by_id(movie_id)
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MovieDTO)
def insert(
    movie_data: MovieCreate,
    admin: User = Depends(get_current_admin_user),
    movie_service: MovieService = Depends(get_movie_service)
):
    return movie_service.insert(movie_data)


@router.put("/{movie_id}", response_model=MovieDTO)
def update(
    movie_id: int,
    movie_data: MovieCreate,
    admin: User = Depends(get_current_admin_user),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        return movie_service.update(movie_id, movie_data)
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    movie_id: int,
    admin: User = Depends(get_current_admin_user),
    movie_service: MovieService = Depends(get_movie_service)
):
    try:
        movie_service.delete(movie_id)
    except ResourceNotFoundException as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DatabaseException as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
