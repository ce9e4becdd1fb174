from __future__ import annotations

from typing import List, Set, Tuple

from .grid import Coord, Grid
from .layout import Collector, Level, Wall, spawner_coords, wall_coords
from .rng import Seed, pick_random
from .things import Bun, Obstacle, Thing, is_faller, mix_ingredients


def is_adjacent(a: Coord, b: Coord) -> bool:
    """True when ``b`` is one of the 8 neighbours of ``a`` or the same cell."""
    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def is_wall(layout: Grid, coord: Coord) -> bool:
    return isinstance(layout.get(coord), Wall)


def move_thing(src: Coord, dest: Coord, things: Grid) -> Grid:
    """Relocate the occupant of ``src`` onto ``dest``, mixing with whatever is there.

    Returns ``things`` unchanged when ``src`` is empty or the pair does not react.
    """
    mover = things.get(src)
    if mover is None or src == dest:
        return things
    target = things.get(dest)
    if target is None:
        return things.remove(src).put(dest, mover)
    mixed = mix_ingredients(mover, target)
    if mixed is None:
        return things
    return things.remove(src).put(dest, mixed)


def try_move(layout: Grid, src: Coord, dest: Coord, things: Grid) -> Grid:
    """Player move: adjacent, not into a wall; unreactive pairs trade places."""
    if not is_adjacent(src, dest) or is_wall(layout, dest):
        return things
    if src not in things:
        return things
    moved = move_thing(src, dest, things)
    if moved == things and src != dest:
        return things.swap(src, dest)
    return moved


def _fall_order(coord: Coord) -> Tuple[int, int]:
    return coord[1], coord[0]


def apply_gravity(layout: Grid, things: Grid) -> Grid:
    """One gravity tick: every faller drops at most one row.

    Fallers are visited bottom row first so a column of things comes down
    together.
    """
    blocked: Set[Coord] = set(wall_coords(layout))
    blocked.update(c for c, t in things.items() if isinstance(t, Obstacle))
    fallers: List[Coord] = sorted((c for c, t in things.items() if is_faller(t)), key=_fall_order)
    current = things
    for coord in fallers:
        below = (coord[0], coord[1] - 1)
        if below in blocked:
            continue
        current = move_thing(coord, below, current)
    return current


def is_stable(layout: Grid, things: Grid) -> bool:
    return apply_gravity(layout, things) == things


def spawn_thing(layout: Grid, things: Grid, seed: Seed) -> Tuple[Grid, Seed]:
    """Drop one random thing on a random free spawner."""
    free = [(c, contents) for c, contents in spawner_coords(layout) if c not in things]
    picked, seed = pick_random(seed, free)
    if picked is None:
        return things, seed
    coord, contents = picked
    thing, seed = pick_random(seed, contents)
    if thing is None:
        return things, seed
    return things.put(coord, thing), seed


def _is_collectable(layout: Grid, coord: Coord, thing: Thing) -> bool:
    return isinstance(thing, Bun) and isinstance(layout.get(coord), Collector)


def count_collectable(layout: Grid, things: Grid) -> int:
    return sum(1 for c, t in things.items() if _is_collectable(layout, c, t))


def collect_things(layout: Grid, things: Grid) -> Grid:
    """Remove every bun that rests on a collector tile."""
    if count_collectable(layout, things) == 0:
        return things
    return things.filter(lambda c, t: not _is_collectable(layout, c, t))


def is_game_over(layout: Grid, things: Grid) -> bool:
    """No spawner left free."""
    return all(c in things for c, _ in spawner_coords(layout))


def fill_board(level: Level, seed: Seed) -> Tuple[Grid, Seed]:
    """Fresh random board over the level's fill area; empty picks become obstacles."""
    cells = {}
    for coord in sorted(level.fill_area, key=_fall_order):
        thing, seed = pick_random(seed, level.fill_weights)
        cells[coord] = thing if thing is not None else Obstacle()
    return Grid(cells), seed
