from fastapi import APIRouter, Depends, Response

from portfolio.api.deps import get_identity_service
from portfolio.core.auth import get_current_user
from portfolio.core.config import settings
from portfolio.domains.identity.schemas import LoginRequest, LoginResponse, UserOut
from portfolio.domains.identity.services import IdentityService

router = APIRouter(prefix="/api/auth", tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    response: Response,
    identity_service: IdentityService = Depends(get_identity_service),
):
    """Вход администратора; токен кладётся в http-only cookie"""
    token, user = await identity_service.login(login_data.email, login_data.password)

    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.access_token_expire_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )

    return LoginResponse(user=UserOut.model_validate(user))


@router.post("/logout")
async def logout(response: Response):
    """Выход: cookie с токеном удаляется"""
    response.delete_cookie(key=settings.auth_cookie_name, httponly=True, samesite="lax")
    return {"success": True}


@router.get("/me", response_model=UserOut)
async def me(current_user: UserOut = Depends(get_current_user)):
    """Пользователь из текущего токена"""
    return current_user
