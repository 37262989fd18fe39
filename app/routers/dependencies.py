# dependencies.py
import logging

from fastapi import Depends
from fastapi.security import APIKeyHeader

from app.errors import InvalidToken, Unauthenticated
from app.schemas.user import Identity
from app.utils.jwt_handler import decode_access_token


AUTH_HEADER = "x-auth-token"

token_header = APIKeyHeader(name=AUTH_HEADER, auto_error=False)

logger = logging.getLogger(__name__)


def get_identity(token: str | None = Depends(token_header)) -> Identity:
    if not token:
        raise Unauthenticated()
    try:
        return decode_access_token(token)
    except InvalidToken as exc:
        logger.warning("auth.rejected reason=%s", exc)
        raise
