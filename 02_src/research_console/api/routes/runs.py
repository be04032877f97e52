"""Run control API routes."""

from fastapi import APIRouter, HTTPException

from ...app import Application
from ..schemas import StatusResponse, SubmitRequest


def create_runs_router(app: Application) -> APIRouter:
    """Create runs router."""
    router = APIRouter(prefix="/api", tags=["runs"])

    @router.post("/runs", response_model=StatusResponse, status_code=202)
    async def submit_run(request: SubmitRequest) -> dict:
        """Submit a new turn; progress shows up on the live timeline."""
        if not request.text.strip():
            raise HTTPException(status_code=400, detail="Empty input")
        try:
            app.session.submit(request.text, request.config.to_configuration())
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/runs/cancel", response_model=StatusResponse)
    async def cancel_run() -> dict:
        """Stop the run in flight and reset the client."""
        try:
            app.session.cancel()
            return {"status": "ok"}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
