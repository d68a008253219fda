"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime

from fastapi import APIRouter

from api.models import HealthResponse
from core import get_default_word_source


router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "CraftMyPass API"}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Detailed health check, including the loaded word list size."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now().isoformat(),
        wordlist_size=len(get_default_word_source())
    )
