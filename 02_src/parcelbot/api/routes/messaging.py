"""Conversation API routes."""

from datetime import datetime

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Query

from ...app import IApplication
from ...models import Turn


class TurnRequest(BaseModel):
    """Request model for submitting an utterance."""

    text: str


class TurnModel(BaseModel):
    """One transcript entry."""

    speaker: str
    text: str
    timestamp: datetime


class TurnResponse(BaseModel):
    """Bot turns produced by a submission and the step reached."""

    step: str
    turns: list[TurnModel]


class SessionResponse(BaseModel):
    """Response model for the session state."""

    step: str
    error_count: int


def _to_model(turn: Turn) -> dict:
    return {"speaker": turn.speaker, "text": turn.text, "timestamp": turn.timestamp}


def create_messaging_router(app: IApplication) -> APIRouter:
    """Create conversation router."""
    router = APIRouter(prefix="/api", tags=["messaging"])

    @router.post("/turns", response_model=TurnResponse)
    async def submit_turn(request: TurnRequest) -> dict:
        """Submit a user utterance to the dialogue agent."""
        try:
            turns = await app.dialogue_agent.submit_turn(request.text)
            return {
                "step": app.dialogue_agent.state.step.value,
                "turns": [_to_model(t) for t in turns],
            }
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/transcript", response_model=list[TurnModel])
    async def get_transcript(
        after: int = Query(0, ge=0, description="Skip the first N turns"),
    ) -> list[dict]:
        """Get the transcript, including reminders and follow-ups."""
        try:
            return [_to_model(t) for t in app.transcript.get_turns(after=after)]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @router.get("/session", response_model=SessionResponse)
    async def get_session() -> dict:
        """Get the current dialogue step."""
        try:
            state = app.dialogue_agent.state
            return {"step": state.step.value, "error_count": state.error_count}
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
