from typing import List

from fastapi import APIRouter, Depends

from insights_engine.analytics.aggregations import teacher_rollup
from insights_engine.api.dependencies import get_filtered_records
from insights_engine.models.activity import ActivityRecord

router = APIRouter()


@router.get("/teachers")
async def list_teachers(records: List[ActivityRecord] = Depends(get_filtered_records)):
    """Teachers with per-type activity counts and the subjects and grades they covered."""
    teachers = teacher_rollup(records)
    return {"total": len(teachers), "data": [t.model_dump() for t in teachers]}
