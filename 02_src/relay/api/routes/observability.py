"""Observability API routes."""

from pydantic import BaseModel
from fastapi import APIRouter

from ...app import IApplication


class StatusResponse(BaseModel):
    """Response model for service status."""

    status: str
    active_conversations: int


def create_observability_router(app: IApplication) -> APIRouter:
    """Create observability router."""
    router = APIRouter(prefix="/api", tags=["observability"])

    @router.get("/status", response_model=StatusResponse)
    async def get_status() -> dict:
        """Report liveness and number of users with stored context."""
        return {
            "status": "ok",
            "active_conversations": len(app.context_store),
        }

    return router
