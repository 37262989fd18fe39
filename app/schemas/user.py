# user.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.common import CamelModel


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserRead(CamelModel):
    id: str
    name: str
    email: str
    avatar: str
    is_admin: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserSummary(CamelModel):
    id: str
    name: str
    avatar: str


class UserResponse(BaseModel):
    msg: str
    user: UserRead


class TokenResponse(BaseModel):
    msg: str
    token: str


class Identity(BaseModel):
    """Caller identity resolved from a verified token."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    name: Optional[str] = None
