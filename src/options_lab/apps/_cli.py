"""Shared argparse and output helpers for app entrypoints."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any


def add_print_config_arg(parser) -> None:
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print merged config (JSON) and exit.",
    )


def add_dry_run_arg(parser) -> None:
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate config and log the plan without running the analysis.",
    )


def collect_logging_overrides(args) -> dict[str, Any]:
    """Logging values explicitly given on the command line."""
    overrides: dict[str, Any] = {}
    if getattr(args, "log_level", None):
        overrides["level"] = args.log_level
    if getattr(args, "log_file", None):
        overrides["file"] = args.log_file
    if getattr(args, "log_format", None):
        overrides["format"] = args.log_format
    if getattr(args, "log_color", None) is not None:
        overrides["color"] = args.log_color
    return overrides


def to_jsonable(obj: Any) -> Any:
    """Convert paths, mappings and sequences into JSON-serializable values."""
    if isinstance(obj, Path):
        return str(obj)
    if isinstance(obj, Mapping):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [to_jsonable(v) for v in obj]
    return obj


def dumps_json(obj: Any) -> str:
    return json.dumps(to_jsonable(obj), indent=2, sort_keys=True)


def print_config(config: Mapping[str, Any]) -> None:
    print(dumps_json(config))


def log_dry_run(logger, plan: Mapping[str, Any]) -> None:
    logger.info("DRY RUN: no analysis was executed.")
    logger.info("DRY RUN plan:\n%s", dumps_json(plan))
