"""Login, logout and current-user endpoints backed by cookie sessions."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from backend.app.core.security import verify_password
from backend.app.core.settings import get_settings
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user, get_session_store, get_session_token
from backend.app.models.user import User
from backend.app.schemas.common import SuccessResponse
from backend.app.schemas.login import LoginRequest, LoginResponse
from backend.app.schemas.user import UserRead
from backend.app.services.session_store import SessionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    current_token: Optional[str] = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
):
    user = db.query(User).filter(User.username == credentials.username.strip()).first()
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.info("Failed login for username=%s", credentials.username)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False, "message": INVALID_CREDENTIALS_MESSAGE},
        )

    settings = get_settings()
    # A new login replaces whatever session the browser already held.
    store.revoke(current_token)
    token = store.create(user)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    logger.info("User %s logged in as %s", user.username, user.role)
    return LoginResponse(success=True, user=UserRead.model_validate(user))


@router.post("/logout", response_model=SuccessResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    store: SessionStore = Depends(get_session_store),
):
    store.revoke(token)
    response.delete_cookie(get_settings().session_cookie_name)
    return SuccessResponse()


@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    return current_user
