"""
parser.py - command-line front end
==================================

    shape-schema --schema user.schema.json --value payload.json
    shape-schema --schema user.schema.json --value '{"id": 3}' --no-excess-props

Public API
----------
`build_arg_parser() -> argparse.ArgumentParser`
    Construct the ``argparse`` instance for the ``shape-schema`` command.

`parse_value(source) -> Any`
    Load the value to check from a JSON file path or a JSON literal.

`main(argv=None) -> int`
    Run one check; ``0`` on match, ``1`` on mismatch, ``2`` on usage or
    loading errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Sequence

from . import __version__
from .loader import load_options, load_schema
from .types import ValidationOptions
from .validator import SchemaDefinitionError, validate

log = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Parser builder                                                              #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shape-schema",
        description="Check a JSON value against a shape schema.",
        fromfile_prefix_chars="@",
    )
    p.add_argument("--version", action="version", version=f"shape-schema : {__version__}")
    p.add_argument("--schema", required=True, metavar="FILE", help="JSON schema document (tagged form).")
    p.add_argument("--value", required=True, help="JSON file or JSON literal to check.")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="JSON file with validation options; explicit flags override it.",
    )
    p.add_argument(
        "--no-excess-props",
        dest="no_excess_props",
        action="store_true",
        default=None,
        help="Reject objects owning properties their schema does not declare.",
    )
    p.add_argument(
        "--verbosity",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level.",
    )
    return p

# --------------------------------------------------------------------------- #
# Input parsing utility                                                       #
# --------------------------------------------------------------------------- #

def parse_value(source: str | Path) -> Any:
    """Return the JSON value in file *source*, or *source* parsed as JSON."""
    if os.path.isfile(source):
        return json.loads(Path(source).read_text(encoding="utf-8"))
    return json.loads(str(source))


def _resolve_options(ns: argparse.Namespace) -> ValidationOptions:
    options = load_options(ns.config) if ns.config else ValidationOptions()
    if ns.no_excess_props is not None:
        options = ValidationOptions(no_excess_props=ns.no_excess_props)
    return options


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    ns = parser.parse_args(argv)

    logging.basicConfig(
        level=ns.verbosity,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        schema = load_schema(ns.schema)
        value = parse_value(ns.value)
        options = _resolve_options(ns)
    except (OSError, ValueError, SchemaDefinitionError) as exc:
        log.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    log.info("validating %s against %s", ns.value, ns.schema)
    mismatch = validate(schema, value, options)
    if mismatch is None:
        print("OK")
        return 0
    print(mismatch.to_error_string(), file=sys.stderr)
    return 1
