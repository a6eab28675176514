"""Login request schema for user authentication."""

from pydantic import BaseModel

from backend.app.schemas.user import UserRead


class LoginRequest(BaseModel):
    """Payload for login attempts."""

    username: str
    password: str


class LoginResponse(BaseModel):
    success: bool
    user: UserRead
