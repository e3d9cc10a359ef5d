"""
shape_schema – runtime shape validation for untrusted values.
"""
__version__ = "1.0.0"

from .types import UNDEFINED, SchemaSet, ValidationOptions
from .mismatch import TypeMismatch, TypeMismatchError
from .stringify import stringify_schema
from .strategies import (
    EXCESS_PROPS_ALLOWED,
    NO_EXCESS_PROPS,
    ObjectValidationStrategy,
    select_strategy,
)
from .validator import SchemaDefinitionError, Validator, test, validate, validate_or_throw
from .schemas import (
    schema,
    union,
    schema_set,
    optional,
    nullable,
    optional_nullable,
    is_null,
    is_int,
    is_positive_int,
    is_plain_object,
    is_dataframe,
)
from .serialization import to_json_compat, from_json_compat, dump_schema
from .loader import load_schema, load_options

__all__ = [
    "UNDEFINED",
    "SchemaSet",
    "ValidationOptions",
    "TypeMismatch",
    "TypeMismatchError",
    "stringify_schema",
    "EXCESS_PROPS_ALLOWED",
    "NO_EXCESS_PROPS",
    "ObjectValidationStrategy",
    "select_strategy",
    "SchemaDefinitionError",
    "Validator",
    "test",
    "validate",
    "validate_or_throw",
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
    "to_json_compat",
    "from_json_compat",
    "dump_schema",
    "load_schema",
    "load_options",
]
