from __future__ import annotations

import os
import threading
from typing import Any, Dict, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    DEFAULT_LEVEL,
    Coord,
    GameSession,
    InitializeWithSeed,
    Level,
    RestartGame,
    SelectCoordinate,
    TriggerCollectionPass,
    TriggerGravityPass,
    TriggerSpawnAttempt,
    dispatch,
    floor_label,
    initial_seed,
    is_game_over,
    is_stable,
    new_session,
    renderable_grid,
    seed_debug,
    seed_from_time,
    thing_label,
)

app = Flask(__name__)

LEVEL: Level = DEFAULT_LEVEL

# One in-process game; the lock serializes events into a single ordered stream.
_lock = threading.Lock()
_session: GameSession = new_session()


def _env_seed() -> Optional[int]:
    raw = os.getenv("BUNFALL_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        app.logger.warning("ignoring non-integer BUNFALL_SEED=%r", raw)
        return None


def reset_session(seed: Optional[int] = None) -> GameSession:
    """Start over from an empty board with the given (or configured) seed."""
    global _session
    with _lock:
        _session = new_session(initial_seed(seed) if seed is not None else None)
        return _session


def current_session() -> GameSession:
    return _session


# ---------- JSON projection ----------

def coord_to_json(c: Optional[Coord]) -> Optional[list]:
    return None if c is None else [int(c[0]), int(c[1])]


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def coord_from_json(obj: Any) -> Coord:
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        raise ValueError("coord must be [x, y]")
    x, y = obj
    if not (_is_int(x) and _is_int(y)):
        raise ValueError("coord must be integers")
    return x, y


def session_to_json(s: GameSession, level: Level = LEVEL) -> Dict[str, Any]:
    tiles = []
    for (x, y), tile in renderable_grid(level, s).to_list():
        tiles.append({
            "x": x,
            "y": y,
            "content": thing_label(tile.content) if tile.content is not None else None,
            "highlight": tile.highlight,
            "floor": floor_label(tile.floor),
        })
    return {
        "tiles": tiles,
        "selected": coord_to_json(s.selected),
        "moves": int(s.moves),
        "collected": int(s.collected),
        "gameOver": is_game_over(level.layout, s.things),
        "stable": is_stable(level.layout, s.things),
        "seed": seed_debug(s),
    }


def _apply(event) -> Tuple[GameSession, bool]:
    global _session
    with _lock:
        _session, changed = dispatch(LEVEL, _session, event)
        app.logger.debug("%s changed=%s", type(event).__name__, changed)
        return _session, changed


def _reply(s: GameSession, changed: bool) -> Any:
    return jsonify({"ok": True, "changed": changed, "state": session_to_json(s)})


def _json_body() -> Optional[Dict[str, Any]]:
    """Request body as a dict; None when it is valid JSON but not an object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _not_an_object() -> Any:
    return jsonify({"ok": False, "error": "body must be a JSON object"}), 400


# ---------- API ----------

@app.get("/api/state")
def api_state() -> Any:
    return _reply(current_session(), False)


@app.post("/api/select")
def api_select() -> Any:
    body = _json_body()
    if body is None:
        return _not_an_object()
    try:
        coord = coord_from_json(body.get("coord"))
    except (TypeError, ValueError) as e:
        return jsonify({"ok": False, "error": f"bad coord: {e}"}), 400
    return _reply(*_apply(SelectCoordinate(coord)))


@app.post("/api/fall")
def api_fall() -> Any:
    return _reply(*_apply(TriggerGravityPass()))


@app.post("/api/spawn")
def api_spawn() -> Any:
    return _reply(*_apply(TriggerSpawnAttempt()))


@app.post("/api/collect")
def api_collect() -> Any:
    return _reply(*_apply(TriggerCollectionPass()))


@app.post("/api/restart")
def api_restart() -> Any:
    return _reply(*_apply(RestartGame()))


@app.post("/api/seed")
def api_seed() -> Any:
    body = _json_body()
    if body is None:
        return _not_an_object()
    raw = body.get("seed", None)
    if raw is None:
        value = seed_from_time().state
    elif _is_int(raw):
        value = raw
    else:
        return jsonify({"ok": False, "error": "seed must be an integer"}), 400
    return _reply(*_apply(InitializeWithSeed(value)))


_start_seed = _env_seed()
if _start_seed is not None:
    reset_session(_start_seed)


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=debug)
