from __future__ import annotations

import argparse
import logging
from typing import Optional, Tuple

from .grid import Coord
from .layout import DEFAULT_LEVEL, Level
from .rng import initial_seed, seed_from_time
from .session import (
    DEBUG,
    GameSession,
    InitializeWithSeed,
    RestartGame,
    SelectCoordinate,
    TriggerCollectionPass,
    TriggerGravityPass,
    TriggerSpawnAttempt,
    dispatch,
    is_game_over,
    new_session,
)
from .view import pretty


def settle(level: Level, session: GameSession, limit: int = 64) -> Tuple[GameSession, int]:
    """Alternate gravity and collection until a gravity pass changes nothing.

    Returns the settled session and the number of gravity passes that moved something.
    """
    passes = 0
    while passes < limit:
        session, fell = dispatch(level, session, TriggerGravityPass())
        session, _ = dispatch(level, session, TriggerCollectionPass())
        if not fell:
            break
        passes += 1
    return session, passes


def after_move(level: Level, session: GameSession, changed: bool, limit: int = 64) -> GameSession:
    """Follow-ups for a committed move: one spawn when the board changed, then settle."""
    if changed:
        session, _ = dispatch(level, session, TriggerSpawnAttempt())
    session, _ = settle(level, session, limit)
    return session


def parse_coord(text: str) -> Optional[Coord]:
    sep = ',' if ',' in text else ' '
    try:
        x_s, y_s = [t for t in text.split(sep) if t != '']
        return int(x_s), int(y_s)
    except ValueError:
        return None


def _status(session: GameSession) -> str:
    return f"moves={session.moves} buns={session.collected}"


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description='Bunfall: falling-block baking puzzle')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed (defaults to the clock)')
    parser.add_argument('--play', action='store_true', help='Play interactively in the terminal')
    parser.add_argument('--settle-limit', type=int, default=64, help='Max gravity passes per settle')
    args = parser.parse_args(argv)
    if DEBUG:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    level = DEFAULT_LEVEL
    seed_value = args.seed if args.seed is not None else seed_from_time().state
    session = new_session(initial_seed(0))
    session, _ = dispatch(level, session, InitializeWithSeed(seed_value))
    session, _ = dispatch(level, session, RestartGame())
    session, _ = settle(level, session, args.settle_limit)

    print('Initial board:')
    print(pretty(level, session))
    if not args.play:
        return

    print("Select a tile as x,y then a neighbour to move it. 'r' restarts, 'q' quits.")
    while True:
        if is_game_over(level, session):
            print(f"Game over! {_status(session)}")
            break
        text = input('> ').strip().lower()
        if text in ('q', 'quit'):
            break
        if text in ('r', 'restart'):
            session, _ = dispatch(level, session, RestartGame())
            session, _ = settle(level, session, args.settle_limit)
            print(pretty(level, session))
            continue
        coord = parse_coord(text)
        if coord is None:
            print('Could not parse. Try again.')
            continue
        had_selection = session.selected is not None
        before = session.things
        session, _ = dispatch(level, session, SelectCoordinate(coord))
        if had_selection:
            session = after_move(level, session, session.things != before, args.settle_limit)
        print(pretty(level, session))
        print(_status(session))
