"""Transcript, timeline and history API routes."""

from fastapi import APIRouter, HTTPException

from ...app import Application
from ...config import EFFORT_PRESETS, MODEL_OPTIONS
from ..schemas import ActivityModel, MessagesResponse, TimelineResponse


def create_timeline_router(app: Application) -> APIRouter:
    """Create timeline router."""
    router = APIRouter(prefix="/api", tags=["timeline"])

    @router.get("/messages", response_model=MessagesResponse)
    async def get_messages() -> dict:
        session = app.session
        return {
            "messages": [
                {"id": msg.id, "role": msg.role, "content": msg.content}
                for msg in session.messages
            ],
            "loading": session.loading,
        }

    @router.get("/timeline", response_model=TimelineResponse)
    async def get_timeline() -> dict:
        """Live activities of the run in flight."""
        session = app.session
        return {
            "phase": session.phase.value,
            "terminal": session.terminal,
            "activities": [activity.to_dict() for activity in session.live_timeline],
        }

    @router.get("/history", response_model=dict[str, list[ActivityModel]])
    async def get_history() -> dict:
        """Archived timelines keyed by agent message id."""
        return app.session.history_dict()

    @router.get("/history/{message_id}", response_model=list[ActivityModel])
    async def get_message_history(message_id: str) -> list[dict]:
        activities = app.session.history.get(message_id)
        if activities is None:
            raise HTTPException(status_code=404, detail="No timeline for message")
        return [activity.to_dict() for activity in activities]

    @router.get("/config")
    async def get_config() -> dict:
        """Model choices and effort presets for the input form."""
        return {"models": MODEL_OPTIONS, "effort_presets": EFFORT_PRESETS}

    return router
