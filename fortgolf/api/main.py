"""
FastAPI backend for Fort Golf.
Provides REST API endpoints for the host UI: configure a contest, stage hole inputs,
apply holes, and read state, winners and history.
Live games are held in memory; the database only keeps an archive of results.
"""

import json
import logging
import os
import threading
import traceback
import uuid
from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from .database import get_db, init_db
from .models import GameRecord

from fortgolf import __version__
from fortgolf.config import (
    DEFAULT_MAX_HEALTH,
    DEFAULT_MODE,
    DEFAULT_NUM_PLAYERS,
    DEFAULT_TOTAL_HOLES,
)
from fortgolf.engine.actions import (
    Action,
    apply_hole,
    configure_game,
    record_input,
    rename_player,
    reset_game,
    set_player_count,
)
from fortgolf.engine.definitions import get_contest_options
from fortgolf.engine.events import GameEvent
from fortgolf.engine.queries import (
    get_game_summary,
    get_history,
    get_winner,
    is_game_over,
    validate_action,
)
from fortgolf.engine.reducer import apply_action
from fortgolf.engine.state import GameState
from fortgolf.engine.utils import initialize_game_state

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Fort Golf API",
    description="Backend API for Fort Golf - defend your fort one hole at a time",
    version=__version__,
)

# CORS configuration for frontend
CORS_ORIGINS = [
    o.strip()
    for o in os.environ.get(
        "FORTGOLF_CORS_ORIGINS",
        "http://localhost:5173,http://localhost:5174,http://localhost:3000",
    ).split(",")
    if o.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)


@app.middleware("http")
async def log_requests(request, call_next):
    """Log method and path so 500s can be traced to the failing endpoint."""
    method = getattr(request, "method", "?")
    url = getattr(request, "url", None)
    path = url.path if url else "?"
    try:
        response = await call_next(request)
        if response.status_code >= 500:
            logger.error("[500] %s %s", method, path)
        return response
    except Exception:
        logger.exception("[500] %s %s (exception)", method, path)
        raise


# Tracebacks go back to the client only when FORTGOLF_DEBUG is set
DEBUG = os.environ.get("FORTGOLF_DEBUG", "").lower() in ("1", "true", "yes")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request, exc):
    """Log the failure and return a JSON 500 with CORS headers so the frontend can read it."""
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error("Unhandled error: %s\n%s", exc, tb)
    content = {"detail": str(exc) if DEBUG else "Internal server error"}
    if DEBUG:
        content["traceback"] = tb
    origin = request.headers.get("origin")
    allow_origin = origin if origin in CORS_ORIGINS else CORS_ORIGINS[0]
    return JSONResponse(
        status_code=500,
        content=content,
        headers={
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Credentials": "true",
        },
    )


# In-memory registry of live games
games: dict[str, GameState] = {}

# Sync endpoints run in a threadpool; each game's read-apply-store runs under its own lock
_game_locks: dict = {}
_registry_lock = threading.Lock()


def game_lock(game_id: str):
    """The re-entrant lock guarding one live game; 404 if the game is unknown."""
    with _registry_lock:
        lock = _game_locks.get(game_id)
    if lock is None:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
    return lock


# ===== Pydantic Models =====

class ConfigureRequest(BaseModel):
    mode: str = DEFAULT_MODE
    num_players: int = DEFAULT_NUM_PLAYERS
    max_health: int = DEFAULT_MAX_HEALTH
    total_holes: int = DEFAULT_TOTAL_HOLES
    names: list[str] | None = None


class PlayerCountRequest(BaseModel):
    num_players: int


class RenameRequest(BaseModel):
    name: str


class InputRequest(BaseModel):
    player_id: int
    field: str  # "fairway" | "gir" | "score"
    value: bool | str  # bool for fairway/gir, "birdie" | "par" | "bogey+" for score


# ===== Helper Functions =====

def get_game(game_id: str) -> GameState:
    """Get a live game; raise 404 if not found."""
    state = games.get(game_id)
    if state is None:
        raise HTTPException(status_code=404, detail=f"Game {game_id} not found")
    return state


def archive_game(game_id: str, state: GameState, db: Session) -> None:
    """Upsert the archive row for this game."""
    row = db.query(GameRecord).filter(GameRecord.id == game_id).first()
    if row is None:
        row = GameRecord(id=game_id)
        db.add(row)
    row.mode = state.config.mode.value
    row.num_players = state.config.num_players
    row.max_health = state.config.max_health
    row.total_holes = state.config.total_holes
    row.players = json.dumps([p.to_dict() for p in state.players])
    row.history = json.dumps(state.history.to_list())
    if is_game_over(state):
        standings = get_winner(state)
        row.status = "finished"
        row.winners = json.dumps([p.name for p in standings.winners] if standings else [])
    else:
        row.status = "active"
        row.winners = None
    db.commit()


def run_action(game_id: str, action: Action, db: Session) -> tuple[GameState, list[GameEvent]]:
    """Validate and apply an action to a live game, then archive it."""
    with game_lock(game_id):
        state = get_game(game_id)
        validation = validate_action(state, action)
        if not validation.valid:
            raise HTTPException(status_code=400, detail=validation.error)
        new_state, events = apply_action(state, action)
        games[game_id] = new_state
        if events:
            archive_game(game_id, new_state, db)
        return new_state, events


def action_response(state: GameState, events: list[GameEvent]) -> dict[str, Any]:
    return {
        "state": get_game_summary(state),
        "events": [e.to_dict() for e in events],
    }


def record_to_dict(row: GameRecord) -> dict[str, Any]:
    return {
        "id": row.id,
        "created_at": row.created_at.isoformat() if row.created_at else None,
        "updated_at": row.updated_at.isoformat() if row.updated_at else None,
        "mode": row.mode,
        "num_players": row.num_players,
        "max_health": row.max_health,
        "total_holes": row.total_holes,
        "status": row.status,
        "players": json.loads(row.players),
        "history": json.loads(row.history),
        "winners": json.loads(row.winners) if row.winners else None,
    }


@app.on_event("startup")
def on_startup():
    init_db()


# ===== API Endpoints =====

@app.get("/")
def root():
    return {"message": "Fort Golf API", "version": __version__}


@app.get("/options")
def get_options():
    """Modes, fort capacities and bounds the host can offer when configuring."""
    return get_contest_options()


# ----- Games -----

@app.post("/games")
def create_game(request: ConfigureRequest, db: Session = Depends(get_db)):
    """Create and configure a new contest. Returns game_id and the initial state."""
    action = configure_game(
        request.mode, request.num_players, request.max_health, request.total_holes, request.names
    )
    seed = initialize_game_state()
    validation = validate_action(seed, action)
    if not validation.valid:
        raise HTTPException(status_code=400, detail=validation.error)
    state, events = apply_action(seed, action)
    game_id = str(uuid.uuid4())
    with _registry_lock:
        _game_locks[game_id] = threading.RLock()
    games[game_id] = state
    archive_game(game_id, state, db)
    return {"game_id": game_id, **action_response(state, events)}


@app.get("/games/{game_id}")
def get_game_state(game_id: str):
    """Current hole, defender, player snapshots and the game over flag."""
    return get_game_summary(get_game(game_id))


@app.post("/games/{game_id}/configure")
def do_configure(game_id: str, request: ConfigureRequest, db: Session = Depends(get_db)):
    """Replace the config. Starts the contest over."""
    action = configure_game(
        request.mode, request.num_players, request.max_health, request.total_holes, request.names
    )
    state, events = run_action(game_id, action, db)
    return action_response(state, events)


@app.post("/games/{game_id}/reset")
def do_reset(game_id: str, db: Session = Depends(get_db)):
    state, events = run_action(game_id, reset_game(), db)
    return action_response(state, events)


@app.post("/games/{game_id}/players/count")
def do_set_player_count(game_id: str, request: PlayerCountRequest, db: Session = Depends(get_db)):
    state, events = run_action(game_id, set_player_count(request.num_players), db)
    return action_response(state, events)


@app.post("/games/{game_id}/players/{player_id}/name")
def do_rename(game_id: str, player_id: int, request: RenameRequest, db: Session = Depends(get_db)):
    state, events = run_action(game_id, rename_player(player_id, request.name), db)
    return action_response(state, events)


@app.post("/games/{game_id}/inputs")
def do_record_input(game_id: str, request: InputRequest, db: Session = Depends(get_db)):
    """Stage one field of a player's input for the current hole."""
    state, events = run_action(
        game_id, record_input(request.player_id, request.field, request.value), db
    )
    return action_response(state, events)


@app.post("/games/{game_id}/apply-hole")
def do_apply_hole(game_id: str, db: Session = Depends(get_db)):
    """
    Resolve the current hole. After game over this does nothing and
    returns applied=False with no summary.
    """
    with game_lock(game_id):
        previous_holes = len(get_game(game_id).history)
        state, events = run_action(game_id, apply_hole(), db)
    summary = state.history.latest if len(state.history) > previous_holes else None
    return {
        "applied": bool(events),
        "summary": summary.to_dict() if summary else None,
        **action_response(state, events),
    }


@app.get("/games/{game_id}/winner")
def get_game_winner(game_id: str):
    """Final standings. 409 while the contest is still in progress."""
    state = get_game(game_id)
    if not is_game_over(state):
        raise HTTPException(status_code=409, detail="Game is still in progress")
    standings = get_winner(state)
    if standings is None:
        return {"winner": None, "winners": [], "is_tie": False, "ranked": []}
    return standings.to_dict(state.mode)


@app.get("/games/{game_id}/history")
def get_game_history(game_id: str):
    return {"history": [s.to_dict() for s in get_history(get_game(game_id))]}


@app.delete("/games/{game_id}")
def delete_game(game_id: str):
    """Drop a live game. Its archive record is kept."""
    with game_lock(game_id):
        get_game(game_id)
        del games[game_id]
    with _registry_lock:
        _game_locks.pop(game_id, None)
    return {"deleted": game_id}


# ----- Archive -----

@app.get("/archive")
def list_archive(status: str | None = None, db: Session = Depends(get_db)):
    """Archived contests, newest first. Filter with ?status=active|finished."""
    query = db.query(GameRecord)
    if status:
        query = query.filter(GameRecord.status == status)
    rows = query.order_by(GameRecord.created_at.desc()).all()
    return {"games": [record_to_dict(r) for r in rows]}


@app.delete("/archive/{game_id}")
def delete_archive_record(game_id: str, db: Session = Depends(get_db)):
    row = db.query(GameRecord).filter(GameRecord.id == game_id).first()
    if not row:
        raise HTTPException(status_code=404, detail=f"Archive record {game_id} not found")
    db.delete(row)
    db.commit()
    return {"deleted": game_id}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
