from __future__ import annotations

from typing import Optional

from ..core.exceptions import ConfigurationError


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def require_non_empty(value: Optional[str], message: str) -> str:
    value = blank_to_none(value)
    if value is None:
        raise ConfigurationError(message)
    return value
