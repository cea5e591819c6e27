import pytest
from unittest.mock import Mock, MagicMock

from movie_scores.domain.dto import MovieCreate
from movie_scores.domain.models import Movie
from movie_scores.service.movie_service import MovieService
from movie_scores.exceptions.movie import (
    MovieServiceException,
    ResourceNotFoundException,
    DatabaseException
)
from movie_scores.exceptions.repository import EntityNotFoundException, IntegrityViolationException


@pytest.fixture
def mock_movie_repo():
    return Mock()


@pytest.fixture
def movie_service(mock_movie_repo):
    return MovieService(mock_movie_repo, MagicMock())


@pytest.fixture
def movie():
    return Movie(id=1, title="The Witcher", image="https://img/witcher.jpg", score=4.5, count=2)


def test_find_all_returns_page(movie_service, mock_movie_repo, movie):
    """Test paged search maps movies and totals."""
    mock_movie_repo.search_by_title.return_value = [movie]
    mock_movie_repo.count_by_title.return_value = 11

    page = movie_service.find_all("witcher", page=1, size=10)

    assert len(page.content) == 1
    assert page.content[0].title == "The Witcher"
    assert page.page == 1
    assert page.size == 10
    assert page.total_elements == 11
    assert page.total_pages == 2
    mock_movie_repo.search_by_title.assert_called_once_with("witcher", 10, 10)


def test_find_all_invalid_paging(movie_service):
    with pytest.raises(MovieServiceException):
        movie_service.find_all("", page=-1, size=10)


def test_find_by_id(movie_service, mock_movie_repo, movie):
    mock_movie_repo.get_by_id.return_value = movie

    result = movie_service.find_by_id(1)

    assert result.title == movie.title
    assert result.score == 4.5
    assert result.count == 2
    mock_movie_repo.get_by_id.assert_called_once_with(1)


def test_find_by_id_not_found(movie_service, mock_movie_repo):
    mock_movie_repo.get_by_id.return_value = None
    with pytest.raises(ResourceNotFoundException, match="Movie with ID 1000 not found"):
        movie_service.find_by_id(1000)


def test_insert_starts_with_empty_aggregate(movie_service, mock_movie_repo):
    """Test a new movie is created with no score and no count."""
    mock_movie_repo.create.side_effect = lambda m: Movie(id=7, title=m.title, image=m.image, score=m.score, count=m.count)

    result = movie_service.insert(MovieCreate(title="Dune", image=None))

    created = mock_movie_repo.create.call_args[0][0]
    assert created.score == 0.0
    assert created.count == 0
    assert result.id == 7


def test_update(movie_service, mock_movie_repo, movie):
    mock_movie_repo.update.return_value = movie

    result = movie_service.update(1, MovieCreate(title="The Witcher", image="https://img/witcher.jpg"))

    assert result.id == 1
    sent = mock_movie_repo.update.call_args[0][0]
    assert sent.id == 1
    assert sent.title == "The Witcher"


def test_update_not_found(movie_service, mock_movie_repo):
    mock_movie_repo.update.side_effect = EntityNotFoundException("Movie 1000 not found")
    with pytest.raises(ResourceNotFoundException):
        movie_service.update(1000, MovieCreate(title="Nope"))


def test_delete(movie_service, mock_movie_repo):
    mock_movie_repo.exists_by_id.return_value = True
    mock_movie_repo.delete.return_value = True

    movie_service.delete(1)

    mock_movie_repo.delete.assert_called_once_with(1)


def test_delete_not_found(movie_service, mock_movie_repo):
    """Test deleting a missing movie never reaches the repository delete."""
    mock_movie_repo.exists_by_id.return_value = False

    with pytest.raises(ResourceNotFoundException):
        movie_service.delete(1000)
    mock_movie_repo.delete.assert_not_called()


def test_delete_dependent_movie(movie_service, mock_movie_repo):
    """Test deleting a movie that still has scores."""
    mock_movie_repo.exists_by_id.return_value = True
    mock_movie_repo.delete.side_effect = IntegrityViolationException("still referenced")

    with pytest.raises(DatabaseException, match="Integrity violation"):
        movie_service.delete(3)
    mock_movie_repo.delete.assert_called_once_with(3)
