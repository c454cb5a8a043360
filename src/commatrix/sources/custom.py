"""
Loaders for user-supplied flow records.

Custom entries are a JSON array of flow-record objects. Matrix files
exported as JSON or YAML can be loaded back for diffing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from ..errors import MalformedInputError
from ..matrix.models import FlowRecord
from ..matrix.store import ComMatrix

logger = logging.getLogger(__name__)


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedInputError(path, f"cannot read file: {e}") from e


def _records(items, path: Path) -> list[FlowRecord]:
    if not isinstance(items, list):
        raise MalformedInputError(path, "expected a list of flow records")
    return [FlowRecord.from_dict(item, str(path)) for item in items]


def load_custom_entries(path: str | Path) -> list[FlowRecord]:
    path = Path(path)
    try:
        items = json.loads(_read(path))
    except json.JSONDecodeError as e:
        raise MalformedInputError(path, f"invalid JSON: {e}") from e

    records = _records(items, path)
    logger.debug("loaded %d custom entries from %s", len(records), path)
    return records


def load_matrix_file(path: str | Path) -> ComMatrix:
    """Load a matrix exported as JSON or YAML (chosen by file extension)."""
    path = Path(path)
    if path.suffix not in (".yaml", ".yml"):
        return ComMatrix(load_custom_entries(path))

    try:
        data = yaml.safe_load(_read(path))
    except yaml.YAMLError as e:
        raise MalformedInputError(path, f"invalid YAML: {e}") from e

    if not isinstance(data, dict) or "matrix" not in data:
        raise MalformedInputError(path, "expected a mapping with a 'matrix' key")
    return ComMatrix(_records(data["matrix"], path))
