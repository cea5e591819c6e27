import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock

from jose import jwt

from movie_scores.auth.identity import TokenIdentityProvider
from movie_scores.domain.models import User
from movie_scores.exceptions.auth import UnauthenticatedException

SECRET = "test-secret-key"


@pytest.fixture
def mock_user_repo():
    return Mock()


@pytest.fixture
def user():
    return User(id=1, name="Maria", username="maria@gmail.com", is_admin=False)


def provider(token, user_repo):
    return TokenIdentityProvider(token, user_repo, SECRET, "HS256")


def test_current_user(mock_user_repo, user, make_token):
    """Test a valid token resolves to its user."""
    mock_user_repo.get_by_username.return_value = user

    result = provider(make_token("maria@gmail.com"), mock_user_repo).current_user()

    assert result.username == "maria@gmail.com"
    mock_user_repo.get_by_username.assert_called_once_with("maria@gmail.com")


def test_missing_token(mock_user_repo):
    with pytest.raises(UnauthenticatedException, match="Missing bearer token"):
        provider(None, mock_user_repo).current_user()
    mock_user_repo.get_by_username.assert_not_called()


def test_token_with_wrong_signature(mock_user_repo, make_token):
    token = make_token("maria@gmail.com", secret="another-secret")
    with pytest.raises(UnauthenticatedException):
        provider(token, mock_user_repo).current_user()


def test_expired_token(mock_user_repo):
    expired = datetime.now(timezone.utc) - timedelta(minutes=5)
    token = jwt.encode({"sub": "maria@gmail.com", "exp": expired}, SECRET, algorithm="HS256")
    with pytest.raises(UnauthenticatedException):
        provider(token, mock_user_repo).current_user()


def test_token_without_subject(mock_user_repo):
    token = jwt.encode({"role": "client"}, SECRET, algorithm="HS256")
    with pytest.raises(UnauthenticatedException):
        provider(token, mock_user_repo).current_user()


def test_unknown_user(mock_user_repo, make_token):
    """Test a well-formed token for a user that does not exist."""
    mock_user_repo.get_by_username.return_value = None
    with pytest.raises(UnauthenticatedException, match="notfound@gmail.com"):
        provider(make_token("notfound@gmail.com"), mock_user_repo).current_user()
