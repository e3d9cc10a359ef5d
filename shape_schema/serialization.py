"""
serialization.py - JSON-compatible tagged form of schemas.

Type-name atoms stay plain strings; every other node becomes
``{"type": <tag>, "schema": <payload>}``:

===========  ==========================================
tag          payload
===========  ==========================================
predicate    predicate name (resolved through a registry)
array        list of nested nodes
union        list of nested nodes
regexp       pattern source
obj          mapping of property name to nested node
===========  ==========================================

Plain JSON lists are accepted as array schemas when decoding.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

from .schemas import BUILTIN_PREDICATES
from .types import SchemaSet
from .validator import SchemaDefinitionError

__all__ = [
    "to_json_compat",
    "from_json_compat",
    "dump_schema",
]

PREDICATE = "predicate"
ARRAY = "array"
UNION = "union"
REGEXP = "regexp"
OBJ = "obj"

_TAGS = (PREDICATE, ARRAY, UNION, REGEXP, OBJ)


# --------------------------------------------------------------------------- #
# Encoding                                                                    #
# --------------------------------------------------------------------------- #

def to_json_compat(schema: Any) -> Any:
    """Return the tagged, JSON-serialisable form of *schema*."""
    if isinstance(schema, str):
        return schema
    if callable(schema):
        return {"type": PREDICATE, "schema": getattr(schema, "__name__", "")}
    if isinstance(schema, (list, tuple)):
        return {"type": ARRAY, "schema": [to_json_compat(s) for s in schema]}
    if isinstance(schema, (SchemaSet, set, frozenset)):
        return {"type": UNION, "schema": [to_json_compat(s) for s in schema]}
    if isinstance(schema, re.Pattern):
        return {"type": REGEXP, "schema": schema.pattern}
    if isinstance(schema, Mapping):
        return {"type": OBJ, "schema": {str(k): to_json_compat(v) for k, v in schema.items()}}
    raise SchemaDefinitionError(f"Cannot serialise schema node of type {type(schema).__name__}")


# --------------------------------------------------------------------------- #
# Decoding                                                                    #
# --------------------------------------------------------------------------- #

def _decode(node: Any, registry: Mapping[str, Callable[..., Any]], where: str) -> Any:
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        return [_decode(n, registry, f"{where}[{i}]") for i, n in enumerate(node)]
    if not isinstance(node, Mapping) or set(node) != {"type", "schema"}:
        raise SchemaDefinitionError(f"{where}: expected a type name, list or tagged node, got {node!r}")

    tag, payload = node["type"], node["schema"]
    if tag not in _TAGS:
        raise SchemaDefinitionError(f"{where}: unknown schema tag {tag!r}")

    if tag == PREDICATE:
        try:
            return registry[payload]
        except (KeyError, TypeError):
            raise SchemaDefinitionError(f"{where}: unknown predicate {payload!r}") from None
    if tag == REGEXP:
        if not isinstance(payload, str):
            raise SchemaDefinitionError(f"{where}: regexp source must be a string")
        try:
            return re.compile(payload)
        except re.error as exc:
            raise SchemaDefinitionError(f"{where}: invalid regexp {payload!r}: {exc}") from exc
    if tag == OBJ:
        if not isinstance(payload, Mapping):
            raise SchemaDefinitionError(f"{where}: obj payload must be a mapping")
        return {k: _decode(v, registry, f"{where}.{k}") for k, v in payload.items()}

    if not isinstance(payload, list):
        raise SchemaDefinitionError(f"{where}: {tag} payload must be a list")
    members = [_decode(n, registry, f"{where}[{i}]") for i, n in enumerate(payload)]
    return members if tag == ARRAY else SchemaSet(members)


def from_json_compat(
    data: Any,
    predicates: Mapping[str, Callable[..., Any]] | None = None,
) -> Any:
    """Rebuild a schema from its tagged form.

    Predicate names are looked up in the built-in predicates, extended (and
    overridden) by *predicates*.
    """
    registry: Dict[str, Callable[..., Any]] = dict(BUILTIN_PREDICATES)
    if predicates:
        registry.update(predicates)
    return _decode(data, registry, "root")


def dump_schema(schema: Any, path: str | Path, *, indent: int = 2) -> None:
    """Write the tagged form of *schema* to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(to_json_compat(schema), indent=indent), encoding="utf-8")
