# post.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text, func
from app.database import Base
from app.models.user import new_id


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    image = Column(String(1024), nullable=False)

    # Author snapshot taken when the post is created.
    name = Column(String(255), nullable=False)
    avatar = Column(String(512), nullable=False)

    # Embedded documents, newest first.
    # likes: list[{id, user}]
    # comments: list[{id, user, text, name, avatar, date}]
    likes = Column(JSON, nullable=False, default=list)
    comments = Column(JSON, nullable=False, default=list)

    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __mapper_args__ = {"version_id_col": version}
