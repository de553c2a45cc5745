from portfolio.domains.identity.entities import User
from portfolio.domains.identity.schemas import LoginRequest, LoginResponse, UserOut
from portfolio.domains.identity.services import IdentityService

__all__ = [
    "User",
    "LoginRequest", "LoginResponse", "UserOut",
    "IdentityService",
]
