"""Health check endpoint, unauthenticated and mounted at root (no /api/v1 prefix)."""

import importlib.metadata

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: returns 200 with the installed package version."""
    version = importlib.metadata.version("cloudsql-tiercalc")
    return {"status": "ok", "version": version}
