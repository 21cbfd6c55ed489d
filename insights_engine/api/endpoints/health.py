from fastapi import APIRouter, Depends

from insights_engine.api.dependencies import get_store
from insights_engine.core.logging_config import get_logger
from insights_engine.models.store import RecordStore

logger = get_logger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check(store: RecordStore = Depends(get_store)):
    """Health check for deployment monitoring."""
    logger.debug("Health check endpoint accessed")
    return {"status": "ok", "records": len(store), "duplicatesRemoved": store.duplicates_removed}
