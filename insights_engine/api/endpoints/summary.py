from typing import List

from fastapi import APIRouter, Depends

from insights_engine.analytics.aggregations import daily_trend, grade_breakdown, summarize
from insights_engine.api.dependencies import get_filtered_records, get_store
from insights_engine.models.activity import ActivityRecord
from insights_engine.models.store import RecordStore

router = APIRouter()


@router.get("/summary")
async def get_summary(
    records: List[ActivityRecord] = Depends(get_filtered_records),
    store: RecordStore = Depends(get_store),
):
    """Overall counts, daily trend by activity type, and activity per grade."""
    return {
        "summary": summarize(records, duplicates_removed=store.duplicates_removed).model_dump(),
        "trend": [bucket.model_dump(by_alias=True) for bucket in daily_trend(records)],
        "gradeBreakdown": grade_breakdown(records),
    }
