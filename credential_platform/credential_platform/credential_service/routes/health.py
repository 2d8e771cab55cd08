"""
Health check endpoint for the Credential Service
"""
from fastapi import APIRouter, Request, status
from datetime import datetime, timezone
from typing import Dict, Any

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(request: Request) -> Dict[str, Any]:
    """
    Liveness check reporting which user store the app was built with.

    The store itself is not pinged; a failed startup ping is only logged.
    """
    store = "mongodb" if request.app.state.mongo_client is not None else "inmemory"
    return {
        "status": "healthy",
        "store": store,
        "checked_at": datetime.now(timezone.utc).isoformat()
    }
