"""
schemas.py – schema composition helpers and ready-made predicate schemas.

    user = schema({
        "id":    is_positive_int,
        "name":  re.compile(r"^[A-Za-z]{6,32}$"),
        "email": optional("string"),
        "boss":  nullable({"id": is_positive_int}),
    })

Nested unions are legal and behave exactly like a flattened one:
``union('number', 'string')`` matches the same values as
``union(union('number'), union('string'))``.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import pandas as pd

from . import utils
from .types import SchemaSet

__all__ = [
    "schema",
    "union",
    "schema_set",
    "optional",
    "nullable",
    "optional_nullable",
    "is_null",
    "is_int",
    "is_positive_int",
    "is_plain_object",
    "is_dataframe",
    "BUILTIN_PREDICATES",
]

# --------------------------------------------------------------------------- #
# Composition                                                                 #
# --------------------------------------------------------------------------- #

def schema(definition: Any) -> Any:
    """Return *definition* unchanged; marks a value as a schema for readers."""
    return definition


def union(*schemas: Any) -> SchemaSet:
    """Build a union schema; the value must match at least one of *schemas*."""
    return SchemaSet(schemas)


schema_set = union


def optional(optional_schema: Any) -> SchemaSet:
    """``UNDEFINED`` or *optional_schema*.

    Inside an object schema this means the property may be absent.
    """
    return union("undefined", optional_schema)


def nullable(nullable_schema: Any) -> SchemaSet:
    """``None`` or *nullable_schema*."""
    return union(is_null, nullable_schema)


def optional_nullable(schema_: Any) -> SchemaSet:
    """Same as ``optional(nullable(schema_))``, flattened."""
    return union(is_null, "undefined", schema_)


# --------------------------------------------------------------------------- #
# Predicates                                                                  #
# --------------------------------------------------------------------------- #

def is_null(value: Any) -> bool:
    return value is None


def is_int(value: Any) -> bool:
    """Integral numbers, including floats with no fractional part."""
    if utils.typeof(value) != "number":
        return False
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()


def is_positive_int(value: Any) -> bool:
    return is_int(value) and value > 0


def is_plain_object(value: Any) -> bool:
    return utils.is_plain_object(value)


def is_dataframe(value: Any) -> bool:
    return isinstance(value, pd.DataFrame)


BUILTIN_PREDICATES = {
    fn.__name__: fn
    for fn in (is_null, is_int, is_positive_int, is_plain_object, is_dataframe)
}
