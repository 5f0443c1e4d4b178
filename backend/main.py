"""
Sagelytics competitor API - Main FastAPI Application
"""

import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
import uvicorn

from app.core.config import settings
from app.core.exceptions import setup_exception_handlers
from app.api.v1.api import api_router
from app.domains.competitors import CompetitorFacade


def configure_logging() -> None:
    """Route loguru output to stderr at the configured level"""
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


configure_logging()

# Create FastAPI app
app = FastAPI(
    title="Sagelytics Competitor API",
    description="Competitor discovery and comparative pricing for e-commerce sellers",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENVIRONMENT != "production" else None,
    redoc_url="/redoc" if settings.ENVIRONMENT != "production" else None,
    openapi_url="/openapi.json" if settings.ENVIRONMENT != "production" else None,
)

# Setup CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Setup exception handlers
setup_exception_handlers(app)

# Include API routers
app.include_router(api_router)


@app.on_event("startup")
async def startup_event():
    """Build the competitor services once for the whole process"""
    logger.info("Starting Sagelytics Competitor API...")
    if getattr(app.state, "competitor_facade", None) is None:
        app.state.competitor_facade = CompetitorFacade.from_settings()
    logger.info("Application startup complete!")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Sagelytics Competitor API...")
    facade = getattr(app.state, "competitor_facade", None)
    if facade is not None:
        await facade.close()
        app.state.competitor_facade = None


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "service": "sagelytics-api",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT
        }
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return JSONResponse(
        status_code=200,
        content={
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.VERSION,
            "docs": "/docs" if settings.ENVIRONMENT != "production" else "Not available in production",
            "health": "/health"
        }
    )


if __name__ == "__main__":
    import os

    port_str = os.environ.get("PORT") or "8000"
    try:
        port = int(port_str)
    except ValueError:
        logger.warning(f"Invalid PORT value '{port_str}'. Using default port 8000.")
        port = 8000

    logger.info(f"Starting server on port {port} ({settings.ENVIRONMENT})")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=port,
        reload=settings.DEBUG and settings.ENVIRONMENT == "development",
    )
