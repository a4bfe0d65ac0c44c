"""
Builds transport-agnostic request descriptions.

GET/DELETE payloads become query parameters; POST/PATCH payloads become
JSON:API documents. Nothing here touches the network.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel

from .errors import RequestEncodingError
from .jsonapi import resource_identifier
from .models import Resource, ResourceOptions, to_kebab

READ_METHODS = frozenset({"GET", "DELETE"})
WRITE_METHODS = frozenset({"POST", "PATCH"})

Body = Union[Dict[str, Any], List[Any]]


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    json: Optional[Body] = None


def resource_path(*segments: str) -> str:
    """Join path segments, escaping each one ("a/b" -> "a%2Fb")."""
    return "/".join(quote(str(s), safe="") for s in segments)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(v) for v in value)
    if isinstance(value, (str, int, float)):
        return str(value)
    raise RequestEncodingError(
        f"cannot encode {type(value).__name__} as a query parameter"
    )


def encode_query(payload: Union[BaseModel, Mapping[str, Any]]) -> Dict[str, str]:
    """
    Encode list/read options as query parameters keyed by wire alias
    (page[number], include, filter[account], ...). None values are omitted.
    """
    try:
        if isinstance(payload, BaseModel):
            raw = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        elif isinstance(payload, Mapping):
            raw = {k: v for k, v in payload.items() if v is not None}
        else:
            raise RequestEncodingError(
                f"cannot encode {type(payload).__name__} as query parameters"
            )
        return {str(key): _query_value(value) for key, value in raw.items()}
    except (ValueError, TypeError) as exc:
        raise RequestEncodingError(f"failed to encode query: {exc}") from exc


def _relation_target(annotation: Any) -> Optional[type]:
    """Find the Resource subclass inside an annotation like Optional[List[Role]]."""
    if typing.get_origin(annotation) is None:
        if isinstance(annotation, type) and issubclass(annotation, Resource):
            return annotation
        return None
    for arg in typing.get_args(annotation):
        found = _relation_target(arg)
        if found is not None:
            return found
    return None


def _ref(value: Any, target: type) -> Dict[str, str]:
    if not isinstance(value, Resource):
        raise RequestEncodingError(
            f"relation to {target.__name__} needs a resource, got {type(value).__name__}"
        )
    return resource_identifier(type(value).resource_type or target.resource_type, value.id)


def encode_refs(refs: Iterable[Resource]) -> Dict[str, Any]:
    """Relationship linkage body: {"data": [{"type", "id"}, ...]}."""
    return {"data": [_ref(r, type(r)) for r in refs]}


def encode_document(options: ResourceOptions) -> Dict[str, Any]:
    """
    Encode options as {"data": {"type", "id"?, "attributes", "relationships"}}.
    Only fields present in options.model_fields_set are included.
    """
    cls = type(options)
    attributes: Dict[str, Any] = {}
    relationships: Dict[str, Any] = {}

    try:
        for name, info in cls.model_fields.items():
            if name == "id" or name not in options.model_fields_set:
                continue
            wire = info.alias or to_kebab(name)
            value = getattr(options, name)
            target = _relation_target(info.annotation)

            if target is None:
                dumped = options.model_dump(
                    mode="json", include={name}, exclude_unset=True
                )
                attributes[wire] = dumped[name]
            elif value is None:
                relationships[wire] = {"data": None}
            elif isinstance(value, (list, tuple)):
                relationships[wire] = {"data": [_ref(v, target) for v in value]}
            else:
                relationships[wire] = {"data": _ref(value, target)}
    except (ValueError, TypeError) as exc:
        raise RequestEncodingError(
            f"failed to encode {cls.__name__}: {exc}"
        ) from exc

    data: Dict[str, Any] = {"type": cls.resource_type}
    if options.id is not None:
        data["id"] = options.id
    if attributes:
        data["attributes"] = attributes
    if relationships:
        data["relationships"] = relationships
    return {"data": data}


def build_request(
    method: str,
    path: str,
    payload: Optional[Union[BaseModel, Mapping[str, Any], Body]] = None,
) -> RequestDescriptor:
    method = method.upper()

    if method in READ_METHODS:
        params = encode_query(payload) if payload is not None else {}
        return RequestDescriptor(method=method, path=path, params=params)

    if method in WRITE_METHODS:
        body: Optional[Body]
        if payload is None:
            body = None
        elif isinstance(payload, ResourceOptions):
            body = encode_document(payload)
        elif isinstance(payload, (dict, list)):
            body = payload
        else:
            raise RequestEncodingError(
                f"cannot encode {type(payload).__name__} as a request body"
            )
        return RequestDescriptor(method=method, path=path, json=body)

    raise RequestEncodingError(f"unsupported method: {method}")


__all__ = [
    "READ_METHODS",
    "WRITE_METHODS",
    "RequestDescriptor",
    "resource_path",
    "encode_query",
    "encode_refs",
    "encode_document",
    "build_request",
]
