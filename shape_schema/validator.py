"""
validator.py - recursive shape matching engine
==============================================

A *schema* is one of:

* a type-name atom (``'number'``, ``'string'``, ``'boolean'``, ``'bigint'``,
  ``'undefined'``, ``'object'``, ``'function'``, ``'symbol'``) compared with
  :func:`shape_schema.utils.typeof`;
* a predicate - any callable returning a truthy value on success;
* a compiled ``re.Pattern`` - matches strings the pattern ``search``es;
* a ``list``/``tuple`` - ``[]`` any array, ``[S]`` array of ``S``,
  ``[S0, S1, ...]`` fixed-length tuple;
* a :class:`~shape_schema.types.SchemaSet` (or ``set``/``frozenset``) - any-of;
* a ``Mapping`` - object shape, matched by the active object strategy.

Public API
----------
SchemaDefinitionError
    Raised for schema nodes that are none of the above.

Validator
    Stateful matcher; one instance per top-level call.

test(schema, value, options=None) -> bool
validate(schema, value, options=None) -> TypeMismatch | None
validate_or_throw(schema, value, options=None) -> None
"""

from __future__ import annotations

import contextlib
import inspect
import logging
import re
from typing import Any, Iterator, List, Mapping, Sequence

from . import utils
from .mismatch import TypeMismatch, TypeMismatchError
from .strategies import select_strategy
from .types import PathStep, SchemaSet, ValidationOptions

__all__ = [
    "SchemaDefinitionError",
    "Validator",
    "test",
    "validate",
    "validate_or_throw",
]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Exceptions                                                                  #
# --------------------------------------------------------------------------- #

class SchemaDefinitionError(TypeError):
    """Raised when a schema node is not one of the supported kinds."""


# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _call_predicate(predicate: Any, value: Any, options: ValidationOptions) -> bool:
    """Call *predicate* with ``(value, options)`` if it accepts both, else ``(value)``."""
    try:
        inspect.signature(predicate).bind(value, options)
    except (TypeError, ValueError):
        return bool(predicate(value))
    return bool(predicate(value, options))


# --------------------------------------------------------------------------- #
# Core recursive validator                                                    #
# --------------------------------------------------------------------------- #

class Validator:
    """Matches values against schemas, tracking the path to the current sub-value.

    The path stack is instance state, so one instance must not run two
    overlapping ``validate`` calls. Cyclic values matched against cyclic
    schemas recurse until ``RecursionError``.
    """

    def __init__(self, options: ValidationOptions | Mapping[str, Any] | None = None):
        self.options = ValidationOptions.resolve(options)
        self._strategy = select_strategy(self.options)
        self._path: List[PathStep] = []
        log.debug("validator created with %s", type(self._strategy).__name__)

    # -- services used by object strategies ---------------------------------

    def create_type_mismatch(self, value: Any, schema: Any) -> TypeMismatch:
        return TypeMismatch(path=tuple(self._path), actual_value=value, expected_schema=schema)

    def validate_property(self, name: Any, schema: Any, value: Any) -> TypeMismatch | None:
        with self._descend(name):
            return self.validate(schema, value)

    # -- recursion ---------------------------------------------------------

    @contextlib.contextmanager
    def _descend(self, step: PathStep) -> Iterator[None]:
        self._path.append(step)
        try:
            yield
        finally:
            self._path.pop()

    def _validate_items(self, value: Sequence[Any], schemas: Sequence[Any]) -> TypeMismatch | None:
        for index, item in enumerate(value):
            with self._descend(index):
                mismatch = self.validate(schemas[0] if len(schemas) == 1 else schemas[index], item)
            if mismatch is not None:
                return mismatch
        return None

    def _validate_union(self, value: Any, schema: Any) -> TypeMismatch | None:
        for member in schema:
            if self.validate(member, value) is None:
                return None
        return self.create_type_mismatch(value, schema)

    def validate(self, schema: Any, value: Any) -> TypeMismatch | None:
        """Return ``None`` if *value* matches *schema*, else the first mismatch."""
        # 1) type-name atom -------------------------------------------------
        if isinstance(schema, str):
            return None if utils.typeof(value) == schema else self.create_type_mismatch(value, schema)

        # 2) predicate --------------------------------------------------------
        if callable(schema):
            if _call_predicate(schema, value, self.options):
                return None
            return self.create_type_mismatch(value, schema)

        # 3) pattern ----------------------------------------------------------
        if isinstance(schema, re.Pattern):
            if isinstance(value, str) and schema.search(value):
                return None
            return self.create_type_mismatch(value, schema)

        # 4) array / tuple ----------------------------------------------------
        if isinstance(schema, (list, tuple)):
            if not utils.is_array(value):
                return self.create_type_mismatch(value, schema)
            if not schema:
                return None
            if len(schema) > 1 and len(schema) != len(value):
                return self.create_type_mismatch(value, schema)
            return self._validate_items(value, schema)

        # 5) union ------------------------------------------------------------
        if isinstance(schema, (SchemaSet, set, frozenset)):
            return self._validate_union(value, schema)

        # 6) object -----------------------------------------------------------
        if isinstance(schema, Mapping):
            if not utils.is_plain_object(value) or utils.is_array(value):
                return self.create_type_mismatch(value, schema)
            return self._strategy.validate_object(self, value, schema)

        raise SchemaDefinitionError(f"Unsupported schema node of type {type(schema).__name__}: {schema!r}")


# --------------------------------------------------------------------------- #
# Entry points                                                                #
# --------------------------------------------------------------------------- #

def validate(
    schema: Any,
    value: Any,
    options: ValidationOptions | Mapping[str, Any] | None = None,
) -> TypeMismatch | None:
    """Return ``None`` if *value* matches *schema*, otherwise a :class:`TypeMismatch`.

    A fresh :class:`Validator` is built per call (permissive object matching
    unless ``options`` says otherwise).

    >>> m = validate({'num': 'number'}, {})
    >>> m.path, m.actual_value, m.expected_schema
    (('num',), UNDEFINED, 'number')
    """
    mismatch = Validator(options).validate(schema, value)
    if mismatch is not None:
        log.debug("mismatch at %s", mismatch.path_string())
    return mismatch


def test(
    schema: Any,
    value: Any,
    options: ValidationOptions | Mapping[str, Any] | None = None,
) -> bool:
    """True iff *value* matches *schema*."""
    return validate(schema, value, options) is None


# keeps pytest from collecting it where it is imported
test.__test__ = False  # type: ignore[attr-defined]


def validate_or_throw(
    schema: Any,
    value: Any,
    options: ValidationOptions | Mapping[str, Any] | None = None,
) -> None:
    """Raise :class:`TypeMismatchError` if *value* does not match *schema*."""
    mismatch = validate(schema, value, options)
    if mismatch is not None:
        raise TypeMismatchError(mismatch)
