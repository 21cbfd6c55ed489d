"""
Dataset loading.
The dataset is a JSON array of activity entries read once at start-up; any
problem reading or parsing it is fatal.
"""
import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError

from insights_engine.analytics.dedup import deduplicate
from insights_engine.core.logging_config import get_logger
from insights_engine.models.activity import ActivityRecord
from insights_engine.models.store import RecordStore

logger = get_logger(__name__)


class DatasetLoadError(Exception):
    """Raised when the activity dataset cannot be read or parsed."""


def parse_records(entries: Iterable[Mapping[str, Any]]) -> List[ActivityRecord]:
    records = []
    for index, entry in enumerate(entries):
        try:
            records.append(ActivityRecord.model_validate(entry))
        except ValidationError as e:
            raise DatasetLoadError(f"Invalid activity entry at index {index}: {e}") from e
    return records


def read_dataset(path: Union[str, Path]) -> List[ActivityRecord]:
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise DatasetLoadError(f"Cannot read dataset {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetLoadError(f"Dataset {path} is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise DatasetLoadError(f"Dataset {path} must contain a JSON array, got {type(payload).__name__}")
    return parse_records(payload)


def build_store(raw_records: Iterable[ActivityRecord]) -> RecordStore:
    records, removed = deduplicate(raw_records)
    return RecordStore(records=tuple(records), duplicates_removed=removed)


def load_store(path: Union[str, Path]) -> RecordStore:
    """Read, validate and deduplicate the dataset at ``path``."""
    store = build_store(read_dataset(path))
    logger.info(
        f"Loaded {store.raw_count} raw records -> {len(store)} unique "
        f"({store.duplicates_removed} duplicates removed) from {path}"
    )
    return store
