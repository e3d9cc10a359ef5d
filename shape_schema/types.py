"""
types.py - core data types shared by every part of the engine.

Public API
----------
UNDEFINED
    Sentinel for "absent" values (missing mapping keys / attributes).

SchemaSet
    Ordered, immutable union ("any-of") of nested schemas.

ValidationOptions
    Configuration value handed to a :class:`~shape_schema.validator.Validator`.

Schema, PathStep, PathArray
    Plain ``typing`` aliases documenting what the engine accepts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterator, Mapping, Sequence, Tuple, Union

__all__ = [
    "UNDEFINED",
    "SchemaSet",
    "ValidationOptions",
    "Schema",
    "PathStep",
    "PathArray",
]


# --------------------------------------------------------------------------- #
# Sentinel                                                                    #
# --------------------------------------------------------------------------- #

class _Undefined:
    """Singleton type of :data:`UNDEFINED`."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


# --------------------------------------------------------------------------- #
# Schema union                                                                #
# --------------------------------------------------------------------------- #

class SchemaSet:
    """A union of schemas; a value matches if it matches **any** member.

    Unlike a builtin ``set`` it keeps definition order and accepts
    unhashable members (object and array schemas).
    """

    __slots__ = ("_members",)

    def __init__(self, members: Sequence["Schema"] = ()):
        self._members = tuple(members)

    @property
    def members(self) -> Tuple["Schema", ...]:
        return self._members

    def __iter__(self) -> Iterator["Schema"]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaSet):
            return NotImplemented
        return self._members == other._members

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SchemaSet({list(self._members)!r})"


# --------------------------------------------------------------------------- #
# Options                                                                     #
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class ValidationOptions:
    """Validation configuration data.

    no_excess_props
        When true, objects owning properties that the object schema does
        not declare fail the match.
    """

    no_excess_props: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ValidationOptions":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown validation option(s): {sorted(unknown)}")
        not_bool = sorted(k for k, v in data.items() if not isinstance(v, bool))
        if not_bool:
            raise ValueError(f"Validation option(s) must be true or false: {not_bool}")
        return cls(**data)

    @classmethod
    def resolve(cls, options: "ValidationOptions | Mapping[str, Any] | None") -> "ValidationOptions":
        """Accept ``None``, an instance, or a mapping of option names."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls.from_mapping(options)
        raise TypeError(f"Unsupported options type: {type(options).__name__}")


# --------------------------------------------------------------------------- #
# Aliases                                                                     #
# --------------------------------------------------------------------------- #

PathStep = Union[str, int, float]
PathArray = Tuple[PathStep, ...]

Schema = Union[
    str,                                  # type-name atom
    Callable[..., Any],                   # predicate
    "re.Pattern[str]",                    # pattern
    Sequence[Any],                        # array schema (list / tuple)
    SchemaSet,                            # union
    "set[Any]",
    "frozenset[Any]",
    Mapping[Any, Any],                    # object schema
]
