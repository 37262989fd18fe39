# jwt_handler.py
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError
from app.config import settings
from app.errors import InvalidToken
from app.schemas.user import Identity


def create_access_token(identity: Identity, expires_delta: timedelta | None = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": identity.user_id,
        "name": identity.name,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Identity:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise InvalidToken("Token expired, Authentication Denied") from exc
    except JWTError as exc:
        raise InvalidToken() from exc
    user_id = payload.get("sub")
    if not user_id:
        raise InvalidToken("Invalid token payload")
    return Identity(user_id=str(user_id), name=payload.get("name"))
