# users.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.routers.dependencies import get_identity
from app.schemas.common import ERROR_RESPONSES, MessageResponse
from app.schemas.user import Identity, LoginRequest, RegisterRequest, TokenResponse, UserRead, UserResponse
from app.services.user_service import get_user, login_user, register_user


router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/register", response_model=MessageResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> MessageResponse:
    register_user(db, payload)
    return MessageResponse(msg="Registration is Success")


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> TokenResponse:
    token = login_user(db, payload)
    return TokenResponse(msg="Login is Success", token=token)


@router.get("/me", response_model=UserResponse)
def read_current_user(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)) -> UserResponse:
    user = get_user(db, identity.user_id)
    return UserResponse(msg="Found User Info", user=UserRead.model_validate(user))
