from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .grid import Coord, Grid, draw_box, line_rect
from .things import Flavour, Flavouring, Flour, Thing, Water


@dataclass(frozen=True)
class Plain:
    pass


@dataclass(frozen=True)
class Spawner:
    contents: Tuple[Thing, ...] = ()


@dataclass(frozen=True)
class Collector:
    pass


@dataclass(frozen=True)
class Wall:
    pass


FloorTile = Union[Plain, Spawner, Collector, Wall]

PLAIN = Plain()
COLLECTOR = Collector()
WALL = Wall()

# Plain water and flour are each twice as likely as any single flavouring.
SPAWN_WEIGHTS: Tuple[Thing, ...] = (
    Water(),
    Water(),
    Flour(),
    Flour(),
    Flavouring(Flavour.SUGAR),
    Flavouring(Flavour.CHOCOLATE),
    Flavouring(Flavour.CHILLI),
)

FIELD_WIDTH = 6
FIELD_HEIGHT = 6


@dataclass(frozen=True)
class Level:
    """Static description of one level: floor tiles plus how a fresh board is filled."""
    layout: Grid
    fill_area: Tuple[Coord, ...]
    fill_weights: Tuple[Thing, ...]
    viewport: Optional[Tuple[Coord, Coord]] = None

    def view_bounds(self) -> Optional[Tuple[Coord, Coord]]:
        return self.viewport if self.viewport is not None else self.layout.bounds()


def build_layout(width: int, height: int, spawn_contents: Tuple[Thing, ...]) -> Grid:
    """Floor tiles for a ``width`` x ``height`` field.

    Row 0 holds collectors, rows 1..height-1 are plain, row ``height`` is the
    spawner row, and a wall ring encloses all of it.
    """
    walls = line_rect(WALL, (width + 2, height + 3)).translate((-1, -1))
    field_tiles = draw_box(PLAIN, (width, height))
    collectors = draw_box(COLLECTOR, (width, 1))
    spawners = draw_box(Spawner(tuple(spawn_contents)), (width, 1)).translate((0, height))
    return walls.overlay(field_tiles).overlay(collectors).overlay(spawners)


def build_level(
    width: int = FIELD_WIDTH,
    height: int = FIELD_HEIGHT,
    weights: Tuple[Thing, ...] = SPAWN_WEIGHTS,
) -> Level:
    layout = build_layout(width, height, weights)
    fill = tuple(c for c in layout.coords() if isinstance(layout.get(c), Plain))
    return Level(layout=layout, fill_area=fill, fill_weights=tuple(weights))


def wall_coords(layout: Grid) -> List[Coord]:
    return [c for c in layout.coords() if isinstance(layout.get(c), Wall)]


def collector_coords(layout: Grid) -> List[Coord]:
    return [c for c in layout.coords() if isinstance(layout.get(c), Collector)]


def spawner_coords(layout: Grid) -> List[Tuple[Coord, Tuple[Thing, ...]]]:
    """Spawner positions with their configured contents, in row-then-column order."""
    out: List[Tuple[Coord, Tuple[Thing, ...]]] = []
    for c in layout.coords():
        tile = layout.get(c)
        if isinstance(tile, Spawner):
            out.append((c, tile.contents))
    return out


DEFAULT_LEVEL = build_level()
