"""
Dataset loading.

The dataset is a static JSON array of waste records, read once per command.
"""

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from .errors import DatasetError, DatasetFormatError, DatasetNotFoundError
from .types import WasteRecord

logger = logging.getLogger(__name__)


def parse_records(payload: Any, path: Path | None = None) -> List[WasteRecord]:
    """
    Validate an already-decoded JSON payload into waste records.

    Raises:
        DatasetFormatError: If the payload is not a list, or a record is invalid.
    """
    if not isinstance(payload, list):
        raise DatasetFormatError(
            f"Expected a JSON array of records, got {type(payload).__name__}", path
        )

    records = []
    for i, item in enumerate(payload):
        try:
            records.append(WasteRecord.model_validate(item))
        except ValidationError as e:
            raise DatasetFormatError(f"Invalid record at index {i}: {e}", path) from e
    return records


def load_records(path: str | Path) -> List[WasteRecord]:
    """
    Load the waste dataset from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        List[WasteRecord]: Records in file order.

    Raises:
        DatasetNotFoundError: The file does not exist.
        DatasetFormatError: The file is not valid UTF-8 JSON or holds invalid records.
        DatasetError: The file could not be read.
    """
    data_path = Path(path)
    if not data_path.is_file():
        raise DatasetNotFoundError(f"Dataset not found: {data_path}", data_path)

    try:
        payload = json.loads(data_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetFormatError(f"Dataset is not valid JSON: {e}", data_path) from e
    except OSError as e:
        raise DatasetError(f"Failed to read dataset {data_path}: {e}", data_path) from e

    records = parse_records(payload, data_path)
    logger.debug(f"Loaded {len(records)} records from {data_path}")
    return records


def available_years(records: Iterable[WasteRecord]) -> List[int]:
    """Sorted distinct years present in the dataset."""
    return sorted({r.year for r in records})


def records_per_year(records: Iterable[WasteRecord]) -> Dict[int, int]:
    counts = Counter(r.year for r in records)
    return {year: counts[year] for year in sorted(counts)}
