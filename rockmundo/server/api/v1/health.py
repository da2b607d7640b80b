"""
Health Check Endpoints.

Basic status endpoints (health, version) used for monitoring and
deployment verification.
"""

from fastapi import APIRouter

from rockmundo import __version__

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object.",
)
async def health_check():
    """Returns a simple status indicator to confirm the server is running and reachable."""
    return {"status": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
    response_description="Version object.",
)
async def version():
    return {"version": __version__, "schema_version": "v1"}
