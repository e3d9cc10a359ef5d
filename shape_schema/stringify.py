r"""
stringify.py - compact, human-readable rendering of schemas for diagnostics.

    'number'                          -> number
    union('undefined', 'number')      -> undefined | number
    re.compile(r'\d+')                -> /\d+/
    is_positive_int                   -> <is_positive_int>
    ['string']                        -> [string]
    {'id': 'number'}                  -> {
                                             "id": number
                                         }
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

from .types import SchemaSet

__all__ = ["stringify_schema"]

_INDENT = " " * 4


def _predicate_name(predicate: Any) -> str:
    name = getattr(predicate, "__name__", None)
    if not name:
        return "<anonymous>"
    # lambdas already carry their own brackets
    return name if name.startswith("<") else f"<{name}>"


def _render(schema: Any, depth: int) -> str:
    if isinstance(schema, str):
        return schema
    if callable(schema):
        return _predicate_name(schema)
    if isinstance(schema, re.Pattern):
        return f"/{schema.pattern}/"
    if isinstance(schema, (list, tuple)):
        return "[" + ", ".join(_render(s, depth) for s in schema) + "]"
    if isinstance(schema, (SchemaSet, set, frozenset)):
        return " | ".join(_render(s, depth) for s in schema)
    if isinstance(schema, Mapping):
        if not schema:
            return "{}"
        inner = _INDENT * (depth + 1)
        lines = [
            f"{inner}{json.dumps(str(key))}: {_render(child, depth + 1)}"
            for key, child in schema.items()
        ]
        return "{\n" + ",\n".join(lines) + "\n" + _INDENT * depth + "}"
    return repr(schema)


def stringify_schema(schema: Any) -> str:
    """Return the diagnostic text form of *schema*."""
    return _render(schema, 0)
