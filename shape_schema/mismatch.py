"""
mismatch.py - the record produced when a value fails to match its schema.

Public API
----------
TypeMismatch
    Immutable ``(path, actual_value, expected_schema)`` record with
    ``path_string()`` and ``to_error_string()`` renderers.

TypeMismatchError
    Exception wrapping a :class:`TypeMismatch`; raised only by
    :func:`shape_schema.validate_or_throw`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from . import utils
from .stringify import stringify_schema
from .types import PathArray

__all__ = [
    "TypeMismatch",
    "TypeMismatchError",
]

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


@dataclass(frozen=True)
class TypeMismatch:
    """Describes why and where a value failed to match a schema.

    path
        Property names and array indices leading from the root value to
        ``actual_value``. E.g. if ``value['foo']['bar'][3][5]`` failed to
        match, ``path`` is ``('foo', 'bar', 3, 5)``.
    actual_value
        The offending sub-value (by reference).
    expected_schema
        The schema node that rejected ``actual_value``.
    """

    path: PathArray
    actual_value: Any
    expected_schema: Any

    def path_string(self) -> str:
        """Return ``path`` in property access notation, starting at ``root``.

        >>> TypeMismatch(('foo', 'bar', 'twenty two', 1, 'prop'), -23, 'string').path_string()
        "root.foo.bar['twenty two'][1].prop"
        """
        parts = ["root"]
        for step in self.path:
            if isinstance(step, str):
                parts.append(f".{step}" if _IDENTIFIER_RE.fullmatch(step) else f"['{step}']")
            else:
                parts.append(f"[{utils.format_number(step)}]")
        return "".join(parts)

    def to_error_string(self) -> str:
        """Return a human readable message of the form

        ``value (<json>) at '<path>' failed to match to the given schema (<schema>)``

        The ``(<json>)`` segment is left out when ``actual_value`` has no
        JSON representation.
        """
        value_repr = utils.to_json(self.actual_value)
        value_part = "value" if value_repr is None else f"value ({value_repr})"
        return (
            f"{value_part} at '{self.path_string()}' failed to match to the "
            f"given schema ({stringify_schema(self.expected_schema)})"
        )

    def __str__(self) -> str:
        return self.to_error_string()


class TypeMismatchError(ValueError):
    """Raised when a value violates the supplied schema.

    The originating :class:`TypeMismatch` is kept on ``type_mismatch``.
    """

    def __init__(self, type_mismatch: TypeMismatch):
        super().__init__(type_mismatch.to_error_string())
        self.type_mismatch = type_mismatch
