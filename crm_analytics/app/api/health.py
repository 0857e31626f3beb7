"""Health endpoint for the CRM analytics service."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    """Return a lightweight health status."""

    return {"status": "ok", "service": "crm_analytics"}


__all__ = ["router"]
