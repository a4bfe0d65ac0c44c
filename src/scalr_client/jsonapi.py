from typing import Any, Dict, Optional, Tuple

IncludedIndex = Dict[Tuple[str, str], Dict[str, Any]]


def index_included(document: Dict[str, Any]) -> IncludedIndex:
    """Map (type, id) -> resource object for everything in 'included'."""
    included = document.get("included") if isinstance(document, dict) else None
    if not isinstance(included, list):
        return {}
    return {
        (str(obj.get("type")), str(obj.get("id"))): obj
        for obj in included
        if isinstance(obj, dict) and "id" in obj
    }


def _resolve_ref(
    ref: Any, included: IncludedIndex, expand: bool
) -> Optional[Dict[str, Any]]:
    if not isinstance(ref, dict) or "id" not in ref:
        return None
    key = (str(ref.get("type")), str(ref["id"]))
    if expand and key in included:
        return flatten_resource(included[key], included, expand=False)
    return {"id": str(ref["id"])}


def flatten_resource(
    obj: Dict[str, Any], included: IncludedIndex, *, expand: bool = True
) -> Dict[str, Any]:
    """
    Turn a resource object into model input: {"id", **attributes, **relations}.
    Relations resolve against 'included' one level deep; anything not
    included (or nested deeper) is an id-only reference.
    """
    flat: Dict[str, Any] = {}
    attributes = obj.get("attributes")
    if isinstance(attributes, dict):
        flat.update(attributes)

    relationships = obj.get("relationships")
    if isinstance(relationships, dict):
        for name, rel in relationships.items():
            if not isinstance(rel, dict) or "data" not in rel:
                continue
            data = rel["data"]
            if isinstance(data, list):
                flat[name] = [
                    r
                    for r in (_resolve_ref(ref, included, expand) for ref in data)
                    if r is not None
                ]
            else:
                flat[name] = _resolve_ref(data, included, expand)

    flat["id"] = str(obj["id"]) if obj.get("id") is not None else None
    return flat


def resource_identifier(resource_type: str, resource_id: str) -> Dict[str, str]:
    return {"type": resource_type, "id": resource_id}


__all__ = [
    "IncludedIndex",
    "index_included",
    "flatten_resource",
    "resource_identifier",
]
