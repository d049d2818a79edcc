"""
FastAPI application entry point for Review Analyzer.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from review_analyzer.api.dependencies import get_app_state, get_inference_client
from review_analyzer.api.error_handlers import EXCEPTION_HANDLERS
from review_analyzer.api.middleware import RequestTracingMiddleware
from review_analyzer.api.routes import router
from review_analyzer.config import settings
from review_analyzer.logging_config import configure_logging
from review_analyzer.session.handlers import load_reviews_action

# Configure structured logging before the app and its routers log anything
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title="Review Analyzer",
    description="Random product review sentiment and noun-density classification",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (must be first for request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router)


@app.on_event("startup")
async def startup():
    """Load the reviews file; a failure is shown in the session error region."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        inference_base_url=settings.HF_API_BASE_URL,
        sentiment_models=settings.SENTIMENT_MODELS,
        generation_models=settings.GENERATION_MODELS,
    )

    state = get_app_state()
    await load_reviews_action(state, settings.REVIEWS_SOURCE)
    if state.error:
        logger.error("Reviews not loaded at startup", source=settings.REVIEWS_SOURCE, error=state.error)

    logger.info("Application startup complete", reviews_loaded=state.reviews_loaded)


@app.on_event("shutdown")
async def shutdown():
    """Close the pooled inference connection."""
    logger.info("Application shutdown")
    await get_inference_client().close()
    logger.info("Application shutdown complete")


if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "state": "/state",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "review_analyzer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
