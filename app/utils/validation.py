# validation.py
from typing import Any, Mapping

from pydantic import BaseModel

from app.errors import ValidationFailed


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def require_fields(payload: BaseModel, required: Mapping[str, str]) -> None:
    """Raise ValidationFailed listing every required field that is blank.

    ``required`` maps attribute names to the message reported when missing.
    """
    messages = [msg for field, msg in required.items() if is_blank(getattr(payload, field, None))]
    if messages:
        raise ValidationFailed(*messages)


def split_skills(raw: Any) -> list[str]:
    if raw is None:
        return []
    if isinstance(raw, (list, tuple)):
        raw = ",".join(str(item) for item in raw)
    parts = str(raw).split(",")
    return [part.strip() for part in parts if part and part.strip()]
