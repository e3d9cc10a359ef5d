"""
loader.py - read schemas and validation options from JSON files.

Public API
----------
load_schema(path, predicates=None) : decode a tagged schema document
load_options(path)                  : read a ValidationOptions document
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from .serialization import from_json_compat
from .types import ValidationOptions

__all__ = ["load_schema", "load_options"]

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _read(path: Path, what: str) -> Any:
    """Read & parse a JSON document, raising crisp errors on failure."""
    try:
        with path.open(encoding="utf-8") as fd:
            return json.load(fd)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"{what} not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def load_schema(
    path: str | Path,
    predicates: Mapping[str, Callable[..., Any]] | None = None,
) -> Any:
    p = Path(path)
    schema = from_json_compat(_read(p, "Schema"), predicates)
    log.debug("loaded schema from %s", p)
    return schema


def load_options(path: str | Path) -> ValidationOptions:
    p = Path(path)
    data = _read(p, "Options file")
    if not isinstance(data, Mapping):
        raise ValueError(f"Options file {p} must contain a JSON object")
    return ValidationOptions.from_mapping(data)
