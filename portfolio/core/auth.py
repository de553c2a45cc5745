import uuid
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio.core.config import settings
from portfolio.core.errors import AuthenticationError
from portfolio.core.security import verify_token
from portfolio.domains.identity.schemas import UserOut

bearer_scheme = HTTPBearer(auto_error=False)


def get_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Токен из cookie, либо из заголовка Authorization"""
    token = request.cookies.get(settings.auth_cookie_name)
    if token:
        return token
    if credentials:
        return credentials.credentials
    return None


async def get_optional_user(token: Optional[str] = Depends(get_token)) -> Optional[UserOut]:
    if not token:
        return None

    payload = verify_token(token)
    if not payload:
        return None

    try:
        return UserOut(
            id=uuid.UUID(payload.get("sub", "")),
            email=payload.get("email", ""),
            role=payload.get("role", ""),
        )
    except ValueError:
        return None


async def get_current_user(user: Optional[UserOut] = Depends(get_optional_user)) -> UserOut:
    if user is None:
        raise AuthenticationError("Unauthorized")
    return user
