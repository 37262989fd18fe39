# profiles.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.dependencies import get_identity
from app.schemas.common import ERROR_RESPONSES, MessageResponse
from app.schemas.profile import (
    EducationCreate,
    ExperienceCreate,
    ProfileCreate,
    ProfileListResponse,
    ProfileRead,
    ProfileResponse,
    ProfileUpdate,
)
from app.schemas.user import Identity
from app.services import profile_service
from app.services.user_service import delete_account


router = APIRouter(responses=ERROR_RESPONSES)


def _respond(msg: str, profile) -> ProfileResponse:
    return ProfileResponse(msg=msg, profile=ProfileRead.model_validate(profile))


@router.post("/", response_model=ProfileResponse)
def create_profile(
    payload: ProfileCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    profile = profile_service.create_profile(db, identity, payload)
    return _respond("Profile is Created Successfully", profile)


@router.get("/me", response_model=ProfileResponse)
def read_my_profile(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> ProfileResponse:
    return _respond("Found Profile", profile_service.get_profile_by_user(db, identity.user_id))


@router.put("/", response_model=ProfileResponse)
def update_profile(
    payload: ProfileUpdate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    profile = profile_service.update_profile(db, identity, payload)
    return _respond("Profile is Updated Successfully", profile)


@router.get("/users/{user_id}", response_model=ProfileResponse)
def read_user_profile(user_id: str, db: Session = Depends(get_db)) -> ProfileResponse:
    return _respond("Found Profile", profile_service.get_profile_by_user(db, user_id))


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user_account(
    user_id: str,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> MessageResponse:
    delete_account(db, identity, user_id)
    return MessageResponse(msg="Account is Deleted")


@router.put("/experience", response_model=ProfileResponse)
def add_experience(
    payload: ExperienceCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    profile = profile_service.add_experience(db, identity, payload)
    return _respond("Experience is Added Successfully", profile)


@router.delete("/experience/{experience_id}", response_model=ProfileResponse)
def delete_experience(
    experience_id: str,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    profile = profile_service.remove_experience(db, identity, experience_id)
    return _respond("Experience is Deleted Successfully", profile)


@router.put("/education", response_model=ProfileResponse)
def add_education(
    payload: EducationCreate,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    profile = profile_service.add_education(db, identity, payload)
    return _respond("Education is Added Successfully", profile)


@router.delete("/education/{education_id}", response_model=ProfileResponse)
def delete_education(
    education_id: str,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    profile = profile_service.remove_education(db, identity, education_id)
    return _respond("Education is Deleted Successfully", profile)


@router.get("/all", response_model=ProfileListResponse)
def list_profiles(db: Session = Depends(get_db)) -> ProfileListResponse:
    profiles = [ProfileRead.model_validate(p) for p in profile_service.list_profiles(db)]
    return ProfileListResponse(msg="Found Profiles", profiles=profiles)


# Declared last so the static paths above win.
@router.get("/{profile_id}", response_model=ProfileResponse)
def read_profile(profile_id: str, db: Session = Depends(get_db)) -> ProfileResponse:
    return _respond("Found Profile", profile_service.get_profile_by_id(db, profile_id))
