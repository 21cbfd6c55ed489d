from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse, Response

from insights_engine.api import api_router
from insights_engine.core.config import settings
from insights_engine.core.dataset import load_store

# Import logging components (Loguru-based, auto-initializes on import)
from insights_engine.core.logging_config import get_logger
from insights_engine.core.logging_middleware import LoggingMiddleware

logger = get_logger(__name__)

CORS_METHODS = "GET, OPTIONS, HEAD"


app = FastAPI(
    title="Savra Insights API",
    description="Teacher activity data with filtering, deduplication and aggregations",
    version="1.0.0"
)

# Custom CORS middleware that handles preflight properly
@app.middleware("http")
async def cors_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(
            status_code=200,
            headers={
                "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
                "Access-Control-Allow-Methods": CORS_METHODS,
                "Access-Control-Allow-Headers": "*",
                "Access-Control-Max-Age": "600",
            }
        )

    response = await call_next(request)

    response.headers["Access-Control-Allow-Origin"] = settings.CORS_ALLOW_ORIGIN
    response.headers["Access-Control-Allow-Methods"] = CORS_METHODS
    response.headers["Access-Control-Allow-Headers"] = "*"

    return response

# Gzip Compression Middleware - compress responses > 1KB
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(LoggingMiddleware)

app.include_router(api_router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    """Load and deduplicate the dataset; a bad dataset stops the server from starting."""
    logger.info("=" * 60)
    logger.info("Application starting up...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Log Level: {settings.LOG_LEVEL}")
    app.state.store = load_store(settings.DATA_FILE)
    logger.info(f"API running on http://{settings.API_HOST}:{settings.API_PORT}")
    logger.info("   API endpoints: /api/health | /api/activities | /api/teachers | /api/summary | /api/insights | /api/filters")
    logger.info("=" * 60)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("=" * 60)
    logger.info("Application shutting down...")
    logger.info("=" * 60)


@app.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    """Serve static front-end assets, falling back to the single-page app entry point."""
    static_root = Path(settings.STATIC_DIR).resolve()
    candidate = (static_root / full_path).resolve()
    if full_path and candidate.is_file() and candidate.is_relative_to(static_root):
        return FileResponse(candidate)

    index = static_root / "index.html"
    if not index.is_file():
        logger.warning(f"Front-end entry point missing: {index}")
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(index)
