# profile.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Text, func
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.user import new_id


class ProfileModel(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True)
    company = Column(String(255), nullable=False)
    website = Column(String(512), nullable=False)
    location = Column(String(255), nullable=False)
    designation = Column(String(255), nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=False)
    github_username = Column(String(255), nullable=False)

    # Embedded documents, newest first: list[{id, title|school, ...}]
    experience = Column(JSON, nullable=False, default=list)
    education = Column(JSON, nullable=False, default=list)
    # {youtube, twitter, facebook, linkedin, instagram}, keys may be absent
    social = Column(JSON, nullable=False, default=dict)

    version = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    user = relationship("User", lazy="joined")

    __mapper_args__ = {"version_id_col": version}
