from fastapi import APIRouter, Depends

from insights_engine.analytics.aggregations import filter_options
from insights_engine.api.dependencies import get_store
from insights_engine.models.store import RecordStore

router = APIRouter()


@router.get("/filters")
async def get_filter_options(store: RecordStore = Depends(get_store)):
    """Distinct values for filter dropdowns, always over the full dataset."""
    return filter_options(store.records).model_dump()
