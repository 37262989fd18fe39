# post.py
from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from app.schemas.common import CamelModel


class PostCreate(BaseModel):
    image: str | None = None
    text: str | None = None


class CommentCreate(BaseModel):
    text: str | None = None


class Like(CamelModel):
    id: str
    user: str


class Comment(CamelModel):
    id: str
    user: str
    text: str
    name: str
    avatar: str
    date: str


class PostRead(CamelModel):
    id: str
    user: str = Field(validation_alias=AliasChoices("user_id", "user"))
    text: str
    image: str
    name: str
    avatar: str
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PostResponse(BaseModel):
    msg: str
    post: PostRead


class PostListResponse(BaseModel):
    msg: str
    posts: list[PostRead]
