"""
Health check endpoint.
"""

from dataclasses import asdict

from fastapi import APIRouter

from millcert.services.scoring.weights import SCORING_VERSION, default_scoring_rules

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok"}


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check with the scoring defaults in effect."""
    return {
        "status": "ok",
        "scoring_version": SCORING_VERSION,
        "default_rules": asdict(default_scoring_rules())
    }
