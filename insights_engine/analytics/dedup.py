from typing import Iterable, List, Set, Tuple

from insights_engine.models.activity import ActivityRecord, RecordKey


def deduplicate(records: Iterable[ActivityRecord]) -> Tuple[List[ActivityRecord], int]:
    """Drop repeated records by composite key, keeping first occurrences in order.

    Returns the kept records and how many were removed.
    """
    seen: Set[RecordKey] = set()
    kept = []
    raw_count = 0
    for record in records:
        raw_count += 1
        key = record.key
        if key in seen:
            continue
        seen.add(key)
        kept.append(record)
    return kept, raw_count - len(kept)
