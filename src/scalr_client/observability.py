from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .errors import ScalrHTTPError

# Attributes every LogRecord already carries; extras must not shadow them.
RESERVED_LOG_KEYS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


def error_fields(error: ScalrHTTPError) -> Dict[str, Any]:
    """Log fields describing a normalized API error."""
    fields: Dict[str, Any] = {
        "method": error.method,
        "status": error.status_code,
        "error_kind": type(error).__name__,
    }
    codes = [p.code for p in error.problems if p.code]
    if codes:
        fields["problem_codes"] = ",".join(codes)
    return fields


def log_event(
    event: str,
    logger: Optional[logging.Logger] = None,
    *,
    level: int = logging.INFO,
    error: Optional[ScalrHTTPError] = None,
    **fields: Any,
) -> None:
    """
    Emit one structured event on the scalr_client.observability logger.
    Fields from `error` come first; explicit fields override them.
    Reserved LogRecord keys and None values are dropped.
    """
    log = logger or logging.getLogger("scalr_client.observability")
    merged = error_fields(error) if error is not None else {}
    merged.update(fields)
    extra = {
        k: v
        for k, v in merged.items()
        if k not in RESERVED_LOG_KEYS and v is not None
    }
    extra["event"] = event
    log.log(level, event, extra=extra)


__all__ = ["RESERVED_LOG_KEYS", "error_fields", "log_event"]
