from typing import List, Optional

from fastapi import Depends, HTTPException, Query, Request, status

from insights_engine.analytics.filters import ActivityFilter, apply_filters
from insights_engine.models.activity import ActivityRecord
from insights_engine.models.store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Record store loaded at start-up and shared by every request."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Activity dataset not loaded"
        )
    return store


def get_activity_filter(
    teacher_id: Optional[str] = Query(None, description="Exact teacher id"),
    grade: Optional[str] = Query(None, description="Grade level, e.g. 8"),
    subject: Optional[str] = Query(None, description="Exact subject name"),
    activity_type: Optional[str] = Query(None, description="Lesson Plan, Quiz or Question Paper"),
) -> ActivityFilter:
    return ActivityFilter(
        teacher_id=teacher_id,
        grade=grade,
        subject=subject,
        activity_type=activity_type,
    )


def get_filtered_records(
    store: RecordStore = Depends(get_store),
    query: ActivityFilter = Depends(get_activity_filter),
) -> List[ActivityRecord]:
    return apply_filters(store.records, query)
