from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from movie_scores.auth.identity import IdentityProvider, TokenIdentityProvider
from movie_scores.config.environment import JWT_SECRET_KEY, JWT_ALGORITHM
from movie_scores.db.database import get_db
from movie_scores.domain.models import User
from movie_scores.exceptions.auth import UnauthenticatedException
from movie_scores.repositories import SQLAlchemyUserRepo

# missing credentials are reported by the identity provider, not by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)

def get_identity_provider(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> IdentityProvider:
    token = credentials.credentials if credentials else None
    return TokenIdentityProvider(token, SQLAlchemyUserRepo(db), JWT_SECRET_KEY, JWT_ALGORITHM)

def get_current_admin_user(identity: IdentityProvider = Depends(get_identity_provider)) -> User:
    try:
        user = identity.current_user()
    except UnauthenticatedException as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin role required")
    return user
