from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.security import OAuth2PasswordRequestForm
from src.config.config import get_env
from src.schemas import TokenInfo, UserOut
from src.services import AuthService
from src.utils.dependencies import get_current_user, get_service

router = APIRouter(prefix="/auth", tags=["auth"])
AuthServiceDep = Depends(get_service(AuthService))


def _set_refresh_cookie(response: Response, refresh_token: str) -> None:
    days = int(get_env("REFRESH_TOKEN_EXPIRE_DAYS", 7))
    # keep the refresh token out of reach of JS
    response.set_cookie(
        key="refresh_token",
        value=refresh_token,
        httponly=True,
        secure=get_env("COOKIE_SECURE", "false").lower() == "true",
        samesite="lax",
        max_age=60 * 60 * 24 * days,
        path="/",
    )


@router.post("/login/")
def login(
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthService = AuthServiceDep,
):
    tokens = service.login(form_data)
    if not tokens:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    _set_refresh_cookie(response, tokens["refresh_token"])
    return {
        "access_token": tokens["access_token"],
        "token_type": "bearer",
        "user": tokens["user"],
    }


@router.post("/refresh/")
def refresh(
    request: Request,
    response: Response,
    service: AuthService = AuthServiceDep,
):
    refresh_token = request.cookies.get("refresh_token")
    if not refresh_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No refresh token")

    tokens = service.refresh_access_token(refresh_token)

    # rotate on every refresh
    _set_refresh_cookie(response, tokens["refresh_token"])
    return {
        "access_token": tokens["access_token"],
        "token_type": "bearer",
        "user": tokens["user"],
    }


@router.post("/logout/")
def logout(
    response: Response,
    service: AuthService = AuthServiceDep,
):
    service.logout()
    response.delete_cookie(key="refresh_token", path="/")
    return {"detail": "Logged out"}


@router.get("/me/", response_model=UserOut)
def read_me(
    service: AuthService = AuthServiceDep,
    token: TokenInfo = Depends(get_current_user),
):
    user = service.get_user(token.id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
