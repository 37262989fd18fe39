# profile.py
from __future__ import annotations

from datetime import datetime
from typing import Union

from pydantic import BaseModel, Field

from app.schemas.common import CamelModel
from app.schemas.user import UserSummary


SOCIAL_FIELDS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


class ProfileCreate(CamelModel):
    company: str | None = None
    website: str | None = None
    location: str | None = None
    designation: str | None = None
    # Comma separated ("python, sql") or already a list.
    skills: Union[str, list[str], None] = None
    bio: str | None = None
    github_username: str | None = None
    youtube: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ProfileUpdate(ProfileCreate):
    pass


class ExperienceCreate(CamelModel):
    title: str | None = None
    company: str | None = None
    location: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    current: bool | None = None
    description: str | None = None


class EducationCreate(CamelModel):
    school: str | None = None
    degree: str | None = None
    field_of_study: str | None = None
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    current: bool | None = None
    description: str | None = None


class Experience(CamelModel):
    id: str
    title: str
    company: str
    location: str
    from_: str = Field(alias="from")
    to: str = " "
    current: bool = False
    description: str


class Education(CamelModel):
    id: str
    school: str
    degree: str
    field_of_study: str
    from_: str = Field(alias="from")
    to: str = " "
    current: bool = False
    description: str


class ProfileRead(CamelModel):
    id: str
    user: UserSummary
    company: str
    website: str
    location: str
    designation: str
    skills: list[str] = Field(default_factory=list)
    bio: str
    github_username: str
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    # Only the links that were supplied are present.
    social: dict[str, str] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProfileResponse(BaseModel):
    msg: str
    profile: ProfileRead


class ProfileListResponse(BaseModel):
    msg: str
    profiles: list[ProfileRead]
