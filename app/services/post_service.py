# post_service.py
import logging
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from app.errors import AlreadyLiked, Forbidden, NotFound, NotLiked
from app.models.post import Post
from app.models.user import User, new_id
from app.schemas.post import CommentCreate, PostCreate
from app.schemas.user import Identity
from app.utils.validation import require_fields


logger = logging.getLogger(__name__)

POST_REQUIRED = {
    "image": "Image Url is Required",
    "text": "Text is Required",
}
COMMENT_REQUIRED = {
    "text": "Text is Required",
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def has_liked(likes: list[dict] | None, user_id: str) -> bool:
    return any(like.get("user") == user_id for like in (likes or []))


def add_like(likes: list[dict] | None, user_id: str) -> list[dict]:
    if has_liked(likes, user_id):
        raise AlreadyLiked()
    return [{"id": new_id(), "user": user_id}, *(likes or [])]


def remove_like(likes: list[dict] | None, user_id: str) -> list[dict]:
    if not has_liked(likes, user_id):
        raise NotLiked()
    return [like for like in likes if like.get("user") != user_id]


def remove_comment(comments: list[dict] | None, comment_id: str, user_id: str) -> list[dict]:
    """Drop the comment ``comment_id``; only its author may do so."""
    comment = next((c for c in (comments or []) if c.get("id") == comment_id), None)
    if comment is None:
        raise NotFound("Comment not exists")
    if comment.get("user") != user_id:
        raise Forbidden("User is not authorized")
    return [c for c in comments if c.get("id") != comment_id]


def _get_author(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User Not Found")
    return user


def get_post(db: Session, post_id: str) -> Post:
    post = db.get(Post, post_id)
    if not post:
        raise NotFound("No Posts Found for the Post ID")
    return post


def list_posts(db: Session) -> list[Post]:
    return db.query(Post).order_by(Post.created_at.desc()).all()


def create_post(db: Session, identity: Identity, payload: PostCreate) -> Post:
    require_fields(payload, POST_REQUIRED)
    author = _get_author(db, identity.user_id)
    post = Post(
        user_id=author.id,
        text=payload.text,
        image=payload.image,
        name=author.name,
        avatar=author.avatar,
        likes=[],
        comments=[],
        created_at=_utc_now(),
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("post.created id=%s user=%s", post.id, author.id)
    return post


def delete_post(db: Session, identity: Identity, post_id: str) -> Post:
    post = get_post(db, post_id)
    if post.user_id != identity.user_id:
        caller = db.get(User, identity.user_id)
        if caller is None or not caller.is_admin:
            raise Forbidden("User is not authorized")
    db.delete(post)
    db.commit()
    logger.info("post.deleted id=%s by=%s", post_id, identity.user_id)
    return post


def like_post(db: Session, identity: Identity, post_id: str) -> Post:
    user = _get_author(db, identity.user_id)
    post = get_post(db, post_id)
    post.likes = add_like(post.likes, user.id)
    db.commit()
    db.refresh(post)
    return post


def unlike_post(db: Session, identity: Identity, post_id: str) -> Post:
    user = _get_author(db, identity.user_id)
    post = get_post(db, post_id)
    post.likes = remove_like(post.likes, user.id)
    db.commit()
    db.refresh(post)
    return post


def add_comment(db: Session, identity: Identity, post_id: str, payload: CommentCreate) -> Post:
    require_fields(payload, COMMENT_REQUIRED)
    author = _get_author(db, identity.user_id)
    post = get_post(db, post_id)
    comment = {
        "id": new_id(),
        "user": author.id,
        "text": payload.text,
        "name": author.name,
        "avatar": author.avatar,
        "date": _utc_now().date().isoformat(),
    }
    post.comments = [comment, *(post.comments or [])]
    db.commit()
    db.refresh(post)
    return post


def delete_comment(db: Session, identity: Identity, post_id: str, comment_id: str) -> Post:
    post = get_post(db, post_id)
    post.comments = remove_comment(post.comments, comment_id, identity.user_id)
    db.commit()
    db.refresh(post)
    return post
