from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Problem(BaseModel):
    """A single JSON:API error object."""

    status: Optional[str] = None
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(extra="ignore")

    @property
    def message(self) -> str:
        if self.title and self.detail:
            return f"{self.title}\n\n{self.detail}"
        return self.detail or self.title or ""


class ScalrClientError(Exception):
    """Base error for client failures."""


class InvalidIdentifierError(ScalrClientError, ValueError):
    def __init__(self, *, kind: str, value: Any):
        super().__init__(f"invalid value for {kind} ID: {value!r}")
        self.kind = kind
        self.value = value


class OptionsValidationError(ScalrClientError, ValueError):
    """Options rejected locally; no request was sent."""


class RequestEncodingError(ScalrClientError):
    pass


class DecodingError(ScalrClientError):
    pass


class ScalrHTTPError(ScalrClientError):
    def __init__(
        self,
        *,
        status_code: Optional[int],
        method: str,
        url: str,
        message: str,
        problems: Optional[List[Problem]] = None,
        response_text: Optional[str] = None,
    ):
        prefix = f"{status_code} " if status_code is not None else ""
        super().__init__(f"{prefix}{method} {url}: {message}")
        self.status_code = status_code
        self.method = method
        self.url = url
        self.message = message
        self.problems = problems or []
        self.response_text = response_text


class ResourceNotFoundError(ScalrHTTPError):
    """The entity does not exist or the caller may not see it."""


class ServerValidationError(ScalrHTTPError):
    """The server rejected the content of the payload."""


class UnexpectedResponseError(ScalrHTTPError):
    """Any other non-2xx status, or a transport failure (status_code is None)."""


class UnauthorizedError(UnexpectedResponseError):
    pass


__all__ = [
    "Problem",
    "ScalrClientError",
    "InvalidIdentifierError",
    "OptionsValidationError",
    "RequestEncodingError",
    "DecodingError",
    "ScalrHTTPError",
    "ResourceNotFoundError",
    "ServerValidationError",
    "UnexpectedResponseError",
    "UnauthorizedError",
]
