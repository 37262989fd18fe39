# user_service.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.config import is_admin_email
from app.errors import Forbidden, InvalidCredentials, NotFound, UserAlreadyExists, ValidationFailed
from app.models.post import Post
from app.models.profile import ProfileModel
from app.models.user import User
from app.schemas.user import Identity, LoginRequest, RegisterRequest
from app.utils.avatar import gravatar_url
from app.utils.jwt_handler import create_access_token
from app.utils.password_hash import hash_password, verify_password
from app.utils.validation import require_fields


logger = logging.getLogger(__name__)

REGISTER_REQUIRED = {
    "name": "Name is Required",
    "email": "Email is Required",
    "password": "Password is Required",
}
LOGIN_REQUIRED = {
    "email": "Email is Required",
    "password": "Password is Required",
}


def _normalize_email(value: str) -> str:
    return (value or "").strip().lower()


def _validate_email_like(value: str) -> None:
    if "@" not in value:
        raise ValidationFailed("Email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValidationFailed("Email must have text before and after '@'")


def find_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, payload: RegisterRequest) -> User:
    require_fields(payload, REGISTER_REQUIRED)
    email = _normalize_email(payload.email)
    _validate_email_like(email)

    if find_user_by_email(db, email):
        raise UserAlreadyExists("User is Already Exists!!")

    user = User(
        name=payload.name.strip(),
        email=email,
        password=hash_password(payload.password),
        avatar=gravatar_url(email),
        is_admin=is_admin_email(email),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent registration for the same email.
        db.rollback()
        raise UserAlreadyExists("User is Already Exists!!") from exc
    db.refresh(user)
    logger.info("user.registered id=%s is_admin=%s", user.id, user.is_admin)
    return user


def login_user(db: Session, payload: LoginRequest) -> str:
    """Check credentials and return a signed token for the account."""
    require_fields(payload, LOGIN_REQUIRED)
    email = _normalize_email(payload.email)
    user = find_user_by_email(db, email)
    if not user or not verify_password(payload.password, user.password):
        logger.warning("user.login_rejected email=%s", email)
        raise InvalidCredentials()
    logger.info("user.login id=%s", user.id)
    return create_access_token(Identity(user_id=user.id, name=user.name))


def get_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User Not Found")
    return user


def _ensure_may_delete(db: Session, identity: Identity, target_user_id: str) -> None:
    if identity.user_id == target_user_id:
        return
    caller = db.get(User, identity.user_id)
    if caller is None or not caller.is_admin:
        raise Forbidden("User is not authorized to delete this account")


def delete_account(db: Session, identity: Identity, target_user_id: str) -> None:
    """Delete a user with their profile, posts, likes and comments.

    Only the account owner or an admin may do this.
    """
    _ensure_may_delete(db, identity, target_user_id)
    user = get_user(db, target_user_id)

    profile = db.query(ProfileModel).filter(ProfileModel.user_id == user.id).first()
    if profile is not None:
        db.delete(profile)

    own_posts = db.query(Post).filter(Post.user_id == user.id).all()
    for post in own_posts:
        db.delete(post)
    removed_posts = len(own_posts)

    for post in db.query(Post).filter(Post.user_id != user.id).all():
        likes = [like for like in (post.likes or []) if like.get("user") != user.id]
        comments = [comment for comment in (post.comments or []) if comment.get("user") != user.id]
        if len(likes) != len(post.likes or []):
            post.likes = likes
        if len(comments) != len(post.comments or []):
            post.comments = comments

    # Dependents first; posts carry no ORM relationship to order them.
    db.flush()
    db.delete(user)
    db.commit()
    logger.info(
        "user.deleted id=%s by=%s profile=%s posts=%s",
        target_user_id,
        identity.user_id,
        profile is not None,
        removed_posts,
    )
