from typing import List

from fastapi import APIRouter, Depends

from insights_engine.analytics.aggregations import teacher_rollup
from insights_engine.analytics.insights import generate_insights
from insights_engine.api.dependencies import get_filtered_records
from insights_engine.core.logging_config import get_logger
from insights_engine.models.activity import ActivityRecord

logger = get_logger(__name__)
router = APIRouter()


@router.get("/insights")
async def get_insights(records: List[ActivityRecord] = Depends(get_filtered_records)):
    """Natural-language observations about the filtered activity."""
    insights = generate_insights(teacher_rollup(records))
    logger.debug(f"Generated {len(insights)} insights from {len(records)} records")
    return {"insights": [i.model_dump() for i in insights]}
