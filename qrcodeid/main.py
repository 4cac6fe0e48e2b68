from qrcodeid.db.Connection import database
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import signal, sys

from qrcodeid.core.config import settings
from qrcodeid.db.Models import models
from qrcodeid.api import codes, qr
from qrcodeid.core.logging_config import configure_logging

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")

models.Base.metadata.create_all(bind=database.engine)
logger.info("Lookup store tables initialized/checked.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="UUID to short code and QR code service"
)

app.include_router(codes.router, prefix="/api/v1")
app.include_router(qr.router, prefix="/api/v1")
app.include_router(qr.scan_router, prefix="")

@app.get("/health", tags=["health"])
def health_check():
    db_ok = database.verify_database_connection()
    if not settings.REDIS_ENABLED:
        cache = "disabled"
    else:
        cache = "ok" if database.verify_redis_connection() else "unavailable"

    # the cache fails open, only the lookup store degrades the service
    return {
        "status": "healthy" if db_ok else "degraded",
        "service": "qrcodeid",
        "database": "ok" if db_ok else "error",
        "cache": cache,
    }

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

def _shutdown(signum, frame):
    logger.info("Shutting down gracefully...")
    try:
        database.engine.dispose()
    except Exception:
        logger.debug("Error disposing DB engine")
    try:
        database.redis_client.close()
    except Exception:
        logger.debug("Error closing Redis client")
    sys.exit(0)

signal.signal(signal.SIGTERM, _shutdown)
signal.signal(signal.SIGINT, _shutdown)
