"""Loader for q-value results saved to disk.

Reads a JSON or YAML document holding the fields of a q-value result and
converts it to a ``QValueResult``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from fdrtidy.core.results import REQUIRED_FIELDS, MissingFieldError, QValueResult, get_field

logger = logging.getLogger(__name__)

__all__ = ["ResultLoadError", "load_result", "result_from_mapping"]

_SUFFIXES = (".json", ".yaml", ".yml")


class ResultLoadError(Exception):
    """Raised when a result file cannot be read or parsed."""

    pass


def result_from_mapping(mapping: Mapping[str, Any]) -> QValueResult:
    """Convert a mapping of result fields to a QValueResult.

    Args:
        mapping: Field values keyed by underscore or dotted names

    Returns:
        Validated result

    Raises:
        MissingFieldError: If a required field is absent
        ResultLoadError: If a field has the wrong type

    """
    for field in REQUIRED_FIELDS:
        get_field(mapping, field)

    try:
        return QValueResult.model_validate(dict(mapping))
    except ValidationError as e:
        raise ResultLoadError(f"Invalid result: {e}")


def load_result(path: str | Path) -> QValueResult:
    """Load a q-value result from a JSON or YAML file.

    Args:
        path: Path to a .json, .yaml or .yml file

    Returns:
        Validated result

    Raises:
        MissingFieldError: If a required field is absent
        ResultLoadError: If the file cannot be read, parsed or validated

    """
    path = Path(path)
    if path.suffix.lower() not in _SUFFIXES:
        raise ResultLoadError(
            f"Unsupported result file type '{path.suffix}' (expected {', '.join(_SUFFIXES)})"
        )

    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                content = json.load(f)
            else:
                content = yaml.safe_load(f)
    except FileNotFoundError:
        raise ResultLoadError(f"Result file not found: {path}")
    except UnicodeDecodeError as e:
        raise ResultLoadError(f"Cannot decode {path}: {e}")
    except json.JSONDecodeError as e:
        raise ResultLoadError(f"Invalid JSON in {path}: {e}")
    except yaml.YAMLError as e:
        raise ResultLoadError(f"Invalid YAML in {path}: {e}")
    except PermissionError:
        raise ResultLoadError(f"Permission denied reading: {path}")

    if not isinstance(content, Mapping):
        raise ResultLoadError(f"Expected a mapping of result fields in {path}")

    try:
        result = result_from_mapping(content)
    except MissingFieldError:
        logger.error("Result file %s is missing a required field", path)
        raise

    logger.debug(
        "Loaded %s: %d p-values, %d lambda values, smoothed=%s",
        path,
        len(result.pvalues),
        len(result.lambda_),
        result.smoothed,
    )
    return result
