from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .errors import (
    DecodingError,
    Problem,
    ResourceNotFoundError,
    ScalrHTTPError,
    ServerValidationError,
    UnauthorizedError,
    UnexpectedResponseError,
)
from .jsonapi import flatten_resource, index_included
from .pagination import Page, paginate

T = TypeVar("T", bound=BaseModel)

SERVER_VALIDATION_STATUSES = frozenset({400, 409, 422})


def _safe_json(resp: httpx.Response) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError as exc:
        snippet = (resp.text or "")[:500]
        raise DecodingError(
            f"Expected JSON from {resp.request.method} "
            f"{resp.request.url}, got non-JSON body snippet: "
            f"{snippet!r}"
        ) from exc

    if not isinstance(data, dict):
        raise DecodingError(
            f"Expected top-level JSON object from "
            f"{resp.request.method} {resp.request.url}, "
            f"got {type(data).__name__}"
        )
    return data


def _parse_problems(resp: httpx.Response) -> List[Problem]:
    """Problems from a JSON:API error body; [] when absent or unparseable."""
    if not resp.content:
        return []
    try:
        parsed = resp.json()
    except ValueError:
        return []
    errors = parsed.get("errors") if isinstance(parsed, dict) else None
    if not isinstance(errors, list):
        return []
    problems = []
    for item in errors:
        if not isinstance(item, dict):
            continue
        try:
            problems.append(Problem.model_validate(item))
        except ValidationError:
            continue
    return problems


def to_http_error(resp: httpx.Response) -> ScalrHTTPError:
    """
    Normalize a non-2xx response.
    - 401 -> UnauthorizedError
    - no parseable problems -> ResourceNotFoundError (404) or UnexpectedResponseError
    - 404 -> ResourceNotFoundError with the server's message
    - 400/409/422 -> ServerValidationError with the server's detail verbatim
    - anything else -> UnexpectedResponseError
    """
    status = resp.status_code
    common = {
        "status_code": status,
        "method": resp.request.method,
        "url": str(resp.request.url),
    }
    problems = _parse_problems(resp)
    raw_text = None if problems else (resp.text or "")[:500] or None

    if status == 401:
        return UnauthorizedError(
            message="unauthorized", problems=problems, response_text=raw_text, **common
        )

    if not problems:
        if status == 404:
            return ResourceNotFoundError(
                message="resource not found", response_text=raw_text, **common
            )
        return UnexpectedResponseError(
            message=resp.reason_phrase or "request failed",
            response_text=raw_text,
            **common,
        )

    message = "\n".join(p.message for p in problems if p.message) or "request failed"

    if status == 404:
        error_cls: Type[ScalrHTTPError] = ResourceNotFoundError
    elif status in SERVER_VALIDATION_STATUSES:
        error_cls = ServerValidationError
    else:
        error_cls = UnexpectedResponseError
    return error_cls(message=message, problems=problems, **common)


def check_response(resp: httpx.Response) -> None:
    if 200 <= resp.status_code <= 299:
        return
    raise to_http_error(resp)


def _document(resp: httpx.Response) -> Dict[str, Any]:
    if not resp.content:
        raise DecodingError(
            f"Expected a JSON:API document from {resp.request.method} "
            f"{resp.request.url}, got an empty body"
        )
    document = _safe_json(resp)
    if "data" not in document:
        raise DecodingError(
            f"Response from {resp.request.method} {resp.request.url} has no 'data'"
        )
    return document


def _validate(model: Type[T], flat: Dict[str, Any]) -> T:
    try:
        return model.model_validate(flat)
    except ValidationError as exc:
        raise DecodingError(
            f"Response did not match model {model.__name__}: {exc}"
        ) from exc


def decode_document(document: Dict[str, Any], model: Type[T]) -> T:
    data = document.get("data")
    if not isinstance(data, dict):
        raise DecodingError(
            f"Expected a single resource for {model.__name__}, "
            f"got {type(data).__name__}"
        )
    return _validate(model, flatten_resource(data, index_included(document)))


def decode_collection(
    document: Dict[str, Any], model: Type[T]
) -> Tuple[List[T], Optional[Dict[str, Any]]]:
    data = document.get("data")
    if not isinstance(data, list):
        raise DecodingError(
            f"Expected a list of resources for {model.__name__}, "
            f"got {type(data).__name__}"
        )
    included = index_included(document)
    items = [
        _validate(model, flatten_resource(obj, included))
        for obj in data
        if isinstance(obj, dict)
    ]
    meta = document.get("meta")
    return items, meta if isinstance(meta, dict) else None


def decode_one(resp: httpx.Response, model: Type[T]) -> T:
    return decode_document(_document(resp), model)


def decode_many(
    resp: httpx.Response, model: Type[T], requested_page: Optional[int] = None
) -> Page[T]:
    items, meta = decode_collection(_document(resp), model)
    return paginate(items, meta, requested_page)


__all__ = [
    "SERVER_VALIDATION_STATUSES",
    "to_http_error",
    "check_response",
    "decode_document",
    "decode_collection",
    "decode_one",
    "decode_many",
]
