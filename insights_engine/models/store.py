from dataclasses import dataclass
from typing import Tuple

from insights_engine.models.activity import ActivityRecord


@dataclass(frozen=True)
class RecordStore:
    """Deduplicated activity records, fixed for the lifetime of the process."""
    records: Tuple[ActivityRecord, ...]
    duplicates_removed: int = 0

    @property
    def raw_count(self) -> int:
        return len(self.records) + self.duplicates_removed

    def __len__(self) -> int:
        return len(self.records)
