from typing import List

from fastapi import APIRouter, Depends

from insights_engine.api.dependencies import get_filtered_records
from insights_engine.models.activity import ActivityRecord

router = APIRouter()


@router.get("/activities")
async def list_activities(records: List[ActivityRecord] = Depends(get_filtered_records)):
    """Raw activity records, optionally filtered by teacher_id, grade, subject, activity_type."""
    return {"total": len(records), "data": [r.model_dump() for r in records]}
