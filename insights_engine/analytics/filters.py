from typing import List, Optional, Sequence

from pydantic import BaseModel

from insights_engine.models.activity import ActivityRecord


class ActivityFilter(BaseModel):
    """Optional equality filters; empty values impose no constraint."""
    teacher_id: Optional[str] = None
    grade: Optional[str] = None
    subject: Optional[str] = None
    activity_type: Optional[str] = None


def apply_filters(records: Sequence[ActivityRecord], query: ActivityFilter) -> List[ActivityRecord]:
    result = list(records)
    if query.teacher_id:
        result = [r for r in result if r.teacher_id == query.teacher_id]
    if query.grade:
        # Textual match, so "8" finds grade 8 and "eight" finds nothing
        result = [r for r in result if str(r.grade) == query.grade]
    if query.subject:
        result = [r for r in result if r.subject == query.subject]
    if query.activity_type:
        result = [r for r in result if r.activity_type == query.activity_type]
    return result
