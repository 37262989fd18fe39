# profile_service.py
import logging
from typing import Any

from sqlalchemy.orm import Session

from app.errors import NotFound, ProfileAlreadyExists
from app.models.profile import ProfileModel
from app.models.user import User, new_id
from app.schemas.profile import (
    SOCIAL_FIELDS,
    EducationCreate,
    ExperienceCreate,
    ProfileCreate,
)
from app.schemas.user import Identity
from app.utils.validation import require_fields, split_skills


logger = logging.getLogger(__name__)

PROFILE_REQUIRED = {
    "company": "Company is Required",
    "website": "Website is Required",
    "location": "Location is Required",
    "designation": "Designation is Required",
    "skills": "Skills is Required",
    "bio": "Bio is Required",
    "github_username": "GithubUsername is Required",
    "youtube": "YouTube is Required",
    "facebook": "Facebook is Required",
    "twitter": "Twitter is Required",
    "linkedin": "Linkedin is Required",
    "instagram": "Instagram is Required",
}
EXPERIENCE_REQUIRED = {
    "title": "Title is Required",
    "company": "Company is Required",
    "location": "Location is Required",
    "from_": "From Date is Required",
    "description": "Description is Required",
}
EDUCATION_REQUIRED = {
    "school": "School is Required",
    "degree": "Degree is Required",
    "field_of_study": "FieldOfStudy is Required",
    "from_": "From Date is Required",
    "description": "Description is Required",
}

# Placeholder stored when an entry has no end date.
OPEN_END = " "


def _profile_fields(payload: ProfileCreate) -> dict[str, Any]:
    return {
        "company": payload.company,
        "website": payload.website,
        "location": payload.location,
        "designation": payload.designation,
        "skills": split_skills(payload.skills),
        "bio": payload.bio,
        "github_username": payload.github_username,
    }


def build_social(payload: ProfileCreate, *, keep_blank: bool) -> dict[str, str]:
    social: dict[str, str] = {}
    for field in SOCIAL_FIELDS:
        value = getattr(payload, field)
        if value or keep_blank:
            social[field] = value or ""
    return social


def prepend_entry(entries: list[dict] | None, entry: dict) -> list[dict]:
    return [entry, *(entries or [])]


def remove_entry(entries: list[dict] | None, entry_id: str, label: str) -> list[dict]:
    """Return ``entries`` without the entry whose id is ``entry_id``."""
    remaining = [entry for entry in (entries or []) if entry.get("id") != entry_id]
    if len(remaining) == len(entries or []):
        raise NotFound(f"{label} not found")
    return remaining


def _require_user(db: Session, user_id: str) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFound("User Not Found")
    return user


def _find_profile(db: Session, user_id: str) -> ProfileModel | None:
    return db.query(ProfileModel).filter(ProfileModel.user_id == user_id).first()


def get_profile_by_user(db: Session, user_id: str) -> ProfileModel:
    profile = _find_profile(db, user_id)
    if not profile:
        raise NotFound("No Profile Found for the User")
    return profile


def get_profile_by_id(db: Session, profile_id: str) -> ProfileModel:
    profile = db.get(ProfileModel, profile_id)
    if not profile:
        raise NotFound("No Profile Found")
    return profile


def list_profiles(db: Session) -> list[ProfileModel]:
    return db.query(ProfileModel).order_by(ProfileModel.created_at.desc()).all()


def create_profile(db: Session, identity: Identity, payload: ProfileCreate) -> ProfileModel:
    require_fields(payload, PROFILE_REQUIRED)
    _require_user(db, identity.user_id)
    if _find_profile(db, identity.user_id):
        raise ProfileAlreadyExists()

    profile = ProfileModel(
        user_id=identity.user_id,
        experience=[],
        education=[],
        social=build_social(payload, keep_blank=False),
        **_profile_fields(payload),
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    logger.info("profile.created id=%s user=%s", profile.id, identity.user_id)
    return profile


def update_profile(db: Session, identity: Identity, payload: ProfileCreate) -> ProfileModel:
    """Replace the top-level profile fields, creating the profile when absent.

    All five social links are written, blanks included. Experience and
    education entries are kept.
    """
    require_fields(payload, PROFILE_REQUIRED)
    _require_user(db, identity.user_id)
    profile = _find_profile(db, identity.user_id)
    if profile is None:
        profile = ProfileModel(user_id=identity.user_id, experience=[], education=[])
        db.add(profile)

    for field, value in _profile_fields(payload).items():
        setattr(profile, field, value)
    profile.social = build_social(payload, keep_blank=True)

    db.commit()
    db.refresh(profile)
    logger.info("profile.updated id=%s user=%s", profile.id, identity.user_id)
    return profile


def add_experience(db: Session, identity: Identity, payload: ExperienceCreate) -> ProfileModel:
    require_fields(payload, EXPERIENCE_REQUIRED)
    profile = get_profile_by_user(db, identity.user_id)
    entry = {
        "id": new_id(),
        "title": payload.title,
        "company": payload.company,
        "location": payload.location,
        "from": payload.from_,
        "to": payload.to or OPEN_END,
        "current": bool(payload.current),
        "description": payload.description,
    }
    profile.experience = prepend_entry(profile.experience, entry)
    db.commit()
    db.refresh(profile)
    return profile


def remove_experience(db: Session, identity: Identity, experience_id: str) -> ProfileModel:
    profile = get_profile_by_user(db, identity.user_id)
    profile.experience = remove_entry(profile.experience, experience_id, "Experience")
    db.commit()
    db.refresh(profile)
    return profile


def add_education(db: Session, identity: Identity, payload: EducationCreate) -> ProfileModel:
    require_fields(payload, EDUCATION_REQUIRED)
    profile = get_profile_by_user(db, identity.user_id)
    entry = {
        "id": new_id(),
        "school": payload.school,
        "degree": payload.degree,
        "fieldOfStudy": payload.field_of_study,
        "from": payload.from_,
        "to": payload.to or OPEN_END,
        "current": bool(payload.current),
        "description": payload.description,
    }
    profile.education = prepend_entry(profile.education, entry)
    db.commit()
    db.refresh(profile)
    return profile


def remove_education(db: Session, identity: Identity, education_id: str) -> ProfileModel:
    profile = get_profile_by_user(db, identity.user_id)
    profile.education = remove_entry(profile.education, education_id, "Education")
    db.commit()
    db.refresh(profile)
    return profile
