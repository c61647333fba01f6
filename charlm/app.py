"""
CharLM Microservice
Main application entry point

Serves a character window language model: train from a corpus,
then generate text that continues a seed.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from charlm.config import settings
from charlm.utils.logger import setup_logger

# Setup logging on the package logger; module loggers propagate to it
setup_logger("charlm")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for service initialization"""
    from charlm.api.routers.charlm_router import MODEL_CACHE
    from charlm.services.corpus import train_from_file

    logger.info("[BOOT] Starting CharLM service...")

    try:
        if settings.CORPUS_PATH:
            logger.info(f"[BOOT] Training default model from {settings.CORPUS_PATH}")
            MODEL_CACHE["default"] = train_from_file(
                settings.CORPUS_PATH,
                settings.DEFAULT_WINDOW_LENGTH,
                seed=settings.RANDOM_SEED,
                encoding=settings.CORPUS_ENCODING,
            )

        logger.info("[BOOT] CharLM service ready!")
        yield

    except Exception as e:
        logger.error(f"[ERR] Failed to initialize: {e}", exc_info=True)
        raise
    finally:
        logger.info("[SHUTDOWN] CharLM service stopped")


# Create FastAPI app
app = FastAPI(
    title="CharLM Service",
    description="Character-level sliding window language model",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"[ERR] Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "ok": False,
            "error": {
                "code": "CHARLM_SERVICE_ERROR",
                "message": "Internal server error occurred",
                "details": {"type": type(exc).__name__},
            },
        },
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    from charlm.api.routers.charlm_router import MODEL_CACHE

    return {
        "ok": True,
        "data": {
            "status": "healthy",
            "models": sorted(MODEL_CACHE.keys()),
        },
    }


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "endpoints": {
            "health": "/health",
            "docs": "/docs",
            "charlm": "/charlm/*",
        },
    }


from charlm.api.routers import charlm_router

app.include_router(charlm_router.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "charlm.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
