"""
strategies.py - object validation strategies.

An object schema is matched by one of two policies, chosen once when a
:class:`~shape_schema.validator.Validator` is built:

* :data:`EXCESS_PROPS_ALLOWED` - properties the schema does not declare are
  never inspected.
* :data:`NO_EXCESS_PROPS` - the value may own **only** properties declared by
  the schema (absent optional ones are fine).

Strategies never touch the path stack themselves; they go through the
validator's ``validate_property()`` / ``create_type_mismatch()`` services.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Protocol

from . import utils
from .types import ValidationOptions

if TYPE_CHECKING:
    from .mismatch import TypeMismatch

__all__ = [
    "PropertyValidator",
    "ObjectValidationStrategy",
    "ExcessPropsAllowed",
    "NoExcessProps",
    "EXCESS_PROPS_ALLOWED",
    "NO_EXCESS_PROPS",
    "select_strategy",
]


class PropertyValidator(Protocol):
    """Services a strategy may use from the validator that invokes it."""

    def validate_property(self, name: Any, schema: Any, value: Any) -> "TypeMismatch | None":
        ...

    def create_type_mismatch(self, value: Any, schema: Any) -> "TypeMismatch":
        ...


class ObjectValidationStrategy(ABC):
    """Abstract object matching policy."""

    @abstractmethod
    def validate_object(
        self,
        validator: PropertyValidator,
        value: Any,
        schema: Mapping[Any, Any],
    ) -> "TypeMismatch | None":
        """Match the object-capable *value* against the object *schema*."""

    def _validate_declared(self, validator: PropertyValidator, value: Any, schema: Mapping[Any, Any]):
        for name, child_schema in schema.items():
            mismatch = validator.validate_property(name, child_schema, utils.get_property(value, name))
            if mismatch is not None:
                return mismatch
        return None


class ExcessPropsAllowed(ObjectValidationStrategy):
    def validate_object(self, validator, value, schema):
        return self._validate_declared(validator, value, schema)


class NoExcessProps(ObjectValidationStrategy):
    """Validates an object to have **only** the properties present in its schema."""

    def validate_object(self, validator, value, schema):
        value_props = utils.own_property_names(value)

        # optional schema entries may be absent, so no equality check here
        if len(schema) < len(value_props):
            return validator.create_type_mismatch(value, schema)

        mismatch = self._validate_declared(validator, value, schema)
        if mismatch is not None:
            return mismatch

        if any(name not in schema for name in value_props):
            return validator.create_type_mismatch(value, schema)
        return None


EXCESS_PROPS_ALLOWED = ExcessPropsAllowed()
NO_EXCESS_PROPS = NoExcessProps()


def select_strategy(options: ValidationOptions) -> ObjectValidationStrategy:
    return NO_EXCESS_PROPS if options.no_excess_props else EXCESS_PROPS_ALLOWED
