"""
utils.py – low-level helpers for the shape-schema engine.

This module consolidates common helpers for:
- Run-time type tags (the ``typeof`` domain used by type-name atoms)
- Value classification (arrays, object-capable values)
- Property access on mappings, DataFrames and plain objects
- JSON rendering of offending values for error messages
"""

from __future__ import annotations

import enum
import json
import math
import numbers
from typing import Any, List, Mapping

import pandas as pd

from .types import UNDEFINED

# --------------------------------------------------------------------------- #
# Type tags                                                                   #
# --------------------------------------------------------------------------- #

TYPE_NAMES = frozenset({
    "number",
    "string",
    "boolean",
    "bigint",
    "undefined",
    "object",
    "function",
    "symbol",
})

# Largest integer an IEEE-754 double represents exactly.
MAX_SAFE_INTEGER = 2**53 - 1


def typeof(value: Any) -> str:
    """Return the run-time type tag of *value* (one of :data:`TYPE_NAMES`)."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Integral):
        return "number" if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER else "bigint"
    if isinstance(value, numbers.Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, enum.Enum):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_plain_object(value: Any) -> bool:
    """Return True iff *value* is not None/UNDEFINED and its tag is object or function."""
    return value is not None and value is not UNDEFINED and typeof(value) in ("object", "function")


# --------------------------------------------------------------------------- #
# Property access                                                             #
# --------------------------------------------------------------------------- #

def own_property_names(value: Any) -> List[Any]:
    """Names of the properties *value* owns (keys, columns or instance attributes)."""
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, pd.DataFrame):
        return list(value.columns)
    try:
        names = list(vars(value))
    except TypeError:  # no __dict__
        names = []
    return names + [n for n in _set_slot_names(value) if n not in names]


def _set_slot_names(value: Any) -> List[str]:
    """Names declared in ``__slots__`` along the MRO that are set on *value*."""
    names: List[str] = []
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name in ("__dict__", "__weakref__") or name in names:
                continue
            if hasattr(value, name):
                names.append(name)
    return names


def get_property(value: Any, name: Any) -> Any:
    """Read property *name* of *value*, yielding UNDEFINED when absent."""
    if isinstance(value, Mapping):
        return value.get(name, UNDEFINED)
    if isinstance(value, pd.DataFrame):
        return value[name] if name in value.columns else UNDEFINED
    if not isinstance(name, str):
        return UNDEFINED
    return getattr(value, name, UNDEFINED)


# --------------------------------------------------------------------------- #
# JSON rendering                                                              #
# --------------------------------------------------------------------------- #

def _json_safe(x: Any, _seen: "set[int] | None" = None) -> Any:
    """Recursively prepare *x* for ``json.dumps``.

    UNDEFINED entries are dropped from mappings and become ``None`` inside
    sequences; NaN and infinities become ``None`` as well. Containers seen
    twice on the current branch raise ValueError.
    """
    if isinstance(x, float) and not math.isfinite(x):
        return None
    if isinstance(x, (pd.DataFrame, pd.Series)):
        return json.loads(x.to_json(orient="split", date_unit="ns"))
    if not isinstance(x, (dict, list, tuple)):
        return x

    seen = set() if _seen is None else _seen
    if id(x) in seen:
        raise ValueError("Circular reference detected")
    seen.add(id(x))
    try:
        if isinstance(x, dict):
            return {k: _json_safe(v, seen) for k, v in x.items() if v is not UNDEFINED}
        return [None if v is UNDEFINED else _json_safe(v, seen) for v in x]
    finally:
        seen.discard(id(x))


def to_json(value: Any) -> "str | None":
    """Serialize *value* to compact JSON, or return None when it has no JSON form."""
    if value is UNDEFINED:
        return None
    try:
        return json.dumps(_json_safe(value), separators=(",", ":"))
    except (TypeError, ValueError):
        return None


# --------------------------------------------------------------------------- #
# Path helpers                                                                #
# --------------------------------------------------------------------------- #

def format_number(step: Any) -> str:
    """Render a numeric path step the way a JavaScript engine prints numbers."""
    if isinstance(step, float):
        if math.isnan(step):
            return "NaN"
        if math.isinf(step):
            return "Infinity" if step > 0 else "-Infinity"
        if step.is_integer():
            return str(int(step))
    return str(step)
