from app.models.post import Post
from app.models.profile import ProfileModel
from app.models.user import User

__all__ = [
	"Post",
	"ProfileModel",
	"User",
]
