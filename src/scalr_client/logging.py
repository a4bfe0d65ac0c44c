import logging
from datetime import datetime, timezone
from typing import IO, Any, Optional, Union

# Extras emitted by ScalrClient.execute and log_event, in output order.
LOG_EXTRA_FIELDS = (
    "method",
    "path",
    "status",
    "duration_ms",
    "error_kind",
    "problem_codes",
)


class LogfmtFormatter(logging.Formatter):
    """
    logfmt lines for scalr_client records:
    ts=... level=warning logger=scalr_client.observability event=scalr.api_error status=404 ...
    Missing extras are skipped.
    """

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        kv = [
            f"ts={ts.isoformat(timespec='milliseconds')}",
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
            f"event={self._fmt_val(getattr(record, 'event', None) or record.getMessage())}",
        ]

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            kv.append(f"exc_type={type(exc).__name__}")
            kv.append(f"exc={self._fmt_val(str(exc))}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, bool):
            return "true" if val else "false"
        if isinstance(val, (int, float)):
            return str(val)
        s = str(val).replace("\\", "\\\\").replace("\n", "\\n")
        if not s or any(c in s for c in ' ="'):
            s = '"' + s.replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: Union[str, int] = "INFO",
    *,
    logger_name: str = "scalr_client",
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach one logfmt handler to the library logger; the root logger is untouched."""
    log = logging.getLogger(logger_name)
    for h in list(log.handlers):
        log.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(LogfmtFormatter())
    log.addHandler(handler)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    log.setLevel(level)
    return log


__all__ = ["setup_logging", "LogfmtFormatter", "LOG_EXTRA_FIELDS"]
