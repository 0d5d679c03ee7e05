"""
Mill Certification Scoring Service - FastAPI Application Entry Point
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from millcert.config import settings
from millcert.api.v1.endpoints import health, scoring
from millcert.logger import logger
from millcert.services.scoring.weights import SCORING_VERSION

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Compliance audit scoring for mill certification and food fortification",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(scoring.router, prefix="/api/v1/scoring")

logger.info(f"{settings.APP_NAME} ready (scoring version {SCORING_VERSION})")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "scoring_version": SCORING_VERSION,
        "docs": "/docs"
    }
