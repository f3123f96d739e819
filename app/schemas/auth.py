"""Request/response schemas for registration, login and logout."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN


class RegisterRequest(BaseModel):
    """Credentials for a new account. Unknown or missing role falls back to 'user'."""

    username: str | None = Field(default=None, max_length=USERNAME_MAX_LEN, description="Username")
    password: str | None = Field(default=None, max_length=PASSWORD_MAX_LEN, description="Password")
    role: str | None = Field(default=None, description="'user' (default) or 'admin'")


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str | None = Field(default=None, max_length=USERNAME_MAX_LEN, description="Username")
    password: str | None = Field(default=None, max_length=PASSWORD_MAX_LEN, description="Password")


class AuthResponse(BaseModel):
    """Body returned after a session is established."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    role: str
    user_id: int = Field(..., alias="userId")


class MessageResponse(BaseModel):
    """Plain {message} body used for confirmations and errors."""

    message: str
