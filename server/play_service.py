"""REST service to play Klondike from a browser front end."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import asdict
from typing import Callable, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from klondike.game import KlondikeGame
from klondike.moves import InvalidSelection
from klondike.piles import InvalidPile
from klondike.rules_schema import GameConfig, load_config
from klondike.service import GameService, GameView

logger = logging.getLogger(__name__)


class StartRequest(BaseModel):
    seed: Optional[int] = None
    history_limit: Optional[int] = Field(None, ge=1)


class MoveRequest(BaseModel):
    source: str
    destination: str
    index: Optional[int] = None


class AutoMoveRequest(BaseModel):
    source: str
    index: Optional[int] = None


class FlipRequest(BaseModel):
    column: int


class Session:
    def __init__(self, service: GameService) -> None:
        self.service = service
        self.lock = threading.Lock()


sessions: Dict[str, Session] = {}


app = FastAPI(title="Klondike Play Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def serialize_view(view: GameView) -> Dict[str, object]:
    return asdict(view)


def ensure_session(session_id: str) -> Session:
    session = sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def run_action(session: Session, action: Callable[[GameService], GameView]) -> Dict[str, object]:
    # Sync endpoints run in a threadpool; one intent per session at a time.
    with session.lock:
        try:
            view = action(session.service)
        except (InvalidPile, InvalidSelection) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {"state": serialize_view(view)}


@app.post("/session/start")
def start_session(request: StartRequest) -> Dict[str, object]:
    config: GameConfig = load_config()
    updates = {key: value for key, value in (("seed", request.seed), ("history_limit", request.history_limit)) if value is not None}
    if updates:
        config = GameConfig.model_validate({**config.model_dump(), **updates})
    session = Session(GameService(KlondikeGame(config=config)))
    session_id = uuid.uuid4().hex
    sessions[session_id] = session
    logger.info("Started session %s", session_id)
    return {"session_id": session_id, "state": serialize_view(session.service.get_view())}


@app.get("/session/{session_id}")
def get_state(session_id: str) -> Dict[str, object]:
    return run_action(ensure_session(session_id), lambda service: service.get_view())


@app.post("/session/{session_id}/draw")
def draw(session_id: str) -> Dict[str, object]:
    return run_action(ensure_session(session_id), lambda service: service.draw())


@app.post("/session/{session_id}/move")
def move(session_id: str, request: MoveRequest) -> Dict[str, object]:
    session = ensure_session(session_id)
    return run_action(session, lambda service: service.move(request.source, request.destination, request.index))


@app.post("/session/{session_id}/auto")
def auto_move(session_id: str, request: AutoMoveRequest) -> Dict[str, object]:
    session = ensure_session(session_id)
    return run_action(session, lambda service: service.auto_move(request.source, request.index))


@app.post("/session/{session_id}/flip")
def flip(session_id: str, request: FlipRequest) -> Dict[str, object]:
    session = ensure_session(session_id)
    return run_action(session, lambda service: service.flip(request.column))


@app.post("/session/{session_id}/undo")
def undo(session_id: str) -> Dict[str, object]:
    return run_action(ensure_session(session_id), lambda service: service.undo())


@app.post("/session/{session_id}/restart")
def restart(session_id: str) -> Dict[str, object]:
    return run_action(ensure_session(session_id), lambda service: service.new_game())


@app.get("/session/{session_id}/hint")
def hint(session_id: str) -> Dict[str, object]:
    session = ensure_session(session_id)
    with session.lock:
        return {"hint": asdict(session.service.hint())}


@app.delete("/session/{session_id}")
def end_session(session_id: str) -> Dict[str, object]:
    ensure_session(session_id)
    del sessions[session_id]
    return {"ended": session_id}
