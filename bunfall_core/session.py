from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from . import engine
from .grid import Coord, Grid
from .layout import Level
from .rng import Seed, initial_seed, seed_debug_repr

logger = logging.getLogger(__name__)

DEBUG = os.getenv('BUNFALL_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')
if DEBUG:
    logger.setLevel(logging.DEBUG)

START_SEED = 0


@dataclass(frozen=True)
class GameSession:
    """Everything that changes while a game is played; the level itself stays fixed."""
    things: Grid
    seed: Seed
    selected: Optional[Coord] = None
    moves: int = 0
    collected: int = 0


def new_session(seed: Optional[Seed] = None) -> GameSession:
    """Empty board with a fixed seed, as at process start."""
    return GameSession(things=Grid(), seed=seed if seed is not None else initial_seed(START_SEED))


# ---------- events ----------

@dataclass(frozen=True)
class SelectCoordinate:
    coord: Coord


@dataclass(frozen=True)
class TriggerGravityPass:
    pass


@dataclass(frozen=True)
class TriggerSpawnAttempt:
    pass


@dataclass(frozen=True)
class TriggerCollectionPass:
    pass


@dataclass(frozen=True)
class InitializeWithSeed:
    value: int


@dataclass(frozen=True)
class RestartGame:
    pass


Event = Union[
    SelectCoordinate,
    TriggerGravityPass,
    TriggerSpawnAttempt,
    TriggerCollectionPass,
    InitializeWithSeed,
    RestartGame,
]


# ---------- transitions ----------

def select(level: Level, session: GameSession, coord: Coord) -> GameSession:
    """First click stores a selection; the second one attempts the move and counts it."""
    if engine.is_game_over(level.layout, session.things):
        return session
    if session.selected is None:
        return replace(session, selected=coord)
    things = engine.try_move(level.layout, session.selected, coord, session.things)
    return replace(session, things=things, selected=None, moves=session.moves + 1)


def fall(level: Level, session: GameSession) -> GameSession:
    things = engine.apply_gravity(level.layout, session.things)
    if things is session.things:
        return session
    return replace(session, things=things)


def spawn(level: Level, session: GameSession) -> GameSession:
    things, seed = engine.spawn_thing(level.layout, session.things, session.seed)
    return replace(session, things=things, seed=seed)


def collect(level: Level, session: GameSession) -> GameSession:
    count = engine.count_collectable(level.layout, session.things)
    if count == 0:
        return session
    things = engine.collect_things(level.layout, session.things)
    return replace(session, things=things, collected=session.collected + count)


def restart(level: Level, session: GameSession) -> GameSession:
    """Refill the board; the seed carries on from where it was."""
    things, seed = engine.fill_board(level, session.seed)
    return GameSession(things=things, seed=seed)


def initialize_with_seed(session: GameSession, value: int) -> GameSession:
    return replace(session, seed=initial_seed(value))


def dispatch(level: Level, session: GameSession, event: Event) -> Tuple[GameSession, bool]:
    """Apply one external event. Returns the new session and whether anything changed."""
    if isinstance(event, SelectCoordinate):
        nxt = select(level, session, event.coord)
    elif isinstance(event, TriggerGravityPass):
        nxt = fall(level, session)
    elif isinstance(event, TriggerSpawnAttempt):
        nxt = spawn(level, session)
    elif isinstance(event, TriggerCollectionPass):
        nxt = collect(level, session)
    elif isinstance(event, InitializeWithSeed):
        nxt = initialize_with_seed(session, event.value)
    elif isinstance(event, RestartGame):
        nxt = restart(level, session)
    else:
        return session, False
    changed = nxt != session
    logger.debug("event=%s changed=%s moves=%d %s", type(event).__name__, changed, nxt.moves, seed_debug(nxt))
    return nxt, changed


# ---------- queries ----------

def is_game_over(level: Level, session: GameSession) -> bool:
    return engine.is_game_over(level.layout, session.things)


def is_stable(level: Level, session: GameSession) -> bool:
    return engine.is_stable(level.layout, session.things)


def move_count(session: GameSession) -> int:
    return session.moves


def selected_coordinate(session: GameSession) -> Optional[Coord]:
    return session.selected


def seed_debug(session: GameSession) -> str:
    return seed_debug_repr(session.seed)
