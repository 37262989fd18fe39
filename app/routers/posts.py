# posts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.dependencies import get_identity
from app.schemas.common import ERROR_RESPONSES
from app.schemas.post import CommentCreate, PostCreate, PostListResponse, PostRead, PostResponse
from app.schemas.user import Identity
from app.services import post_service


router = APIRouter(responses=ERROR_RESPONSES)


def _respond(msg: str, post) -> PostResponse:
    return PostResponse(msg=msg, post=PostRead.model_validate(post))


@router.post("/", response_model=PostResponse)
def create_post(
    payload: PostCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> PostResponse:
    return _respond("Post is Created Successfully", post_service.create_post(db, identity, payload))


@router.get("/", response_model=PostListResponse)
def list_posts(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> PostListResponse:
    posts = [PostRead.model_validate(p) for p in post_service.list_posts(db)]
    return PostListResponse(msg="Found Posts", posts=posts)


@router.put("/like/{post_id}", response_model=PostResponse)
def like_post(post_id: str, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> PostResponse:
    return _respond("Post is Liked", post_service.like_post(db, identity, post_id))


@router.put("/unlike/{post_id}", response_model=PostResponse)
def unlike_post(post_id: str, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> PostResponse:
    return _respond("Post is Unliked", post_service.unlike_post(db, identity, post_id))


@router.post("/comment/{post_id}", response_model=PostResponse)
def add_comment(
    post_id: str,
    payload: CommentCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> PostResponse:
    post = post_service.add_comment(db, identity, post_id, payload)
    return _respond("Comment is Created Successfully", post)


@router.delete("/comment/{post_id}/{comment_id}", response_model=PostResponse)
def delete_comment(
    post_id: str,
    comment_id: str,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> PostResponse:
    post = post_service.delete_comment(db, identity, post_id, comment_id)
    return _respond("Comment is Deleted", post)


@router.get("/{post_id}", response_model=PostResponse)
def read_post(post_id: str, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> PostResponse:
    return _respond("Found Post", post_service.get_post(db, post_id))


@router.delete("/{post_id}", response_model=PostResponse)
def delete_post(post_id: str, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> PostResponse:
    return _respond("Post Deleted Successfully", post_service.delete_post(db, identity, post_id))
