# __init__.py
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.post import Comment, CommentCreate, Like, PostCreate, PostListResponse, PostRead, PostResponse
from app.schemas.profile import (
	Education,
	EducationCreate,
	Experience,
	ExperienceCreate,
	ProfileCreate,
	ProfileListResponse,
	ProfileRead,
	ProfileResponse,
	ProfileUpdate,
)
from app.schemas.user import Identity, LoginRequest, RegisterRequest, TokenResponse, UserRead, UserResponse, UserSummary

__all__ = [
	"ErrorResponse",
	"MessageResponse",
	"Comment",
	"CommentCreate",
	"Like",
	"PostCreate",
	"PostListResponse",
	"PostRead",
	"PostResponse",
	"Education",
	"EducationCreate",
	"Experience",
	"ExperienceCreate",
	"ProfileCreate",
	"ProfileListResponse",
	"ProfileRead",
	"ProfileResponse",
	"ProfileUpdate",
	"Identity",
	"LoginRequest",
	"RegisterRequest",
	"TokenResponse",
	"UserRead",
	"UserResponse",
	"UserSummary",
]
