# backend/auth/dependencies.py
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.errors import AuthenticationError
from models.user import User
from repositories.user_repository import get_user_by_id
from .utils import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class TokenClaims:
    user_id: str
    username: str


def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenClaims:
    """Verifies the ``Authorization: Bearer`` token and returns its claims."""
    if credentials is None:
        raise AuthenticationError("Missing bearer token")
    payload = decode_access_token(credentials.credentials)
    return TokenClaims(user_id=payload["sub"], username=payload.get("username"))


def get_current_user(claims: TokenClaims = Depends(get_token_claims)) -> User:
    """Loads the account named by the token subject; a vanished account is 401."""
    user = get_user_by_id(claims.user_id)
    if user is None:
        raise AuthenticationError("User no longer exists")
    return user
