"""
Local checks run before an identifier or name is put on the wire.
"""

import re
from typing import Any, Optional, Pattern, Tuple

from .errors import InvalidIdentifierError, OptionsValidationError

# Typical Scalr string IDs ("acc-svrcncgh453bi8g", "env-v0o1...").
STRING_ID = re.compile(r"^[a-zA-Z0-9\-\._]+$")
# Stricter "<prefix>-<suffix>" shape for resource families that need it.
PREFIXED_ID = re.compile(r"^[a-z]+-[A-Za-z0-9]+$")


def is_valid_identifier(value: Any, pattern: Pattern[str] = STRING_ID) -> bool:
    return isinstance(value, str) and bool(value) and bool(pattern.fullmatch(value))


def is_valid_name(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def require_identifier(
    value: Any, *, kind: str, pattern: Pattern[str] = STRING_ID
) -> str:
    if not is_valid_identifier(value, pattern):
        raise InvalidIdentifierError(kind=kind, value=value)
    return value


def require_name(value: Optional[str], *, field: str = "name") -> str:
    if value is None:
        raise OptionsValidationError(f"{field} is required")
    if not is_valid_name(value):
        raise OptionsValidationError(f"invalid value for {field}: {value!r}")
    return value


def require_one_of(**candidates: Any) -> Tuple[str, Any]:
    """
    Return the first (field, value) pair that is set.
    Raises OptionsValidationError naming every acceptable field when none is.
    """
    for field, value in candidates.items():
        if value is not None:
            return field, value
    raise OptionsValidationError(
        f"one of: {','.join(candidates)} must be provided"
    )


def require_ref(ref: Any, *, field: str, required: bool = True) -> None:
    """
    Check a relation reference carried in a payload.
    A missing required ref is an OptionsValidationError; a malformed id is an
    InvalidIdentifierError, same as a bad path identifier.
    """
    if ref is None:
        if required:
            raise OptionsValidationError(f"{field} is required")
        return
    require_identifier(getattr(ref, "id", None), kind=field)


__all__ = [
    "STRING_ID",
    "PREFIXED_ID",
    "is_valid_identifier",
    "is_valid_name",
    "require_identifier",
    "require_name",
    "require_one_of",
    "require_ref",
]
