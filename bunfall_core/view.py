from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .grid import Grid
from .layout import Collector, FloorTile, Level, Plain, Spawner, Wall
from .things import Bun, Flavouring, Flour, Obstacle, Thing, Water
from .session import GameSession


@dataclass(frozen=True)
class RenderableTile:
    content: Optional[Thing]
    highlight: bool
    floor: FloorTile


def renderable_grid(level: Level, session: GameSession) -> Grid:
    """Overlay the session's things and selection on the level's floor, clipped to the viewport."""
    bounds = level.view_bounds()
    if bounds is None:
        return Grid()
    (x0, y0), (x1, y1) = bounds
    cells: Dict = {}
    for coord, floor in level.layout.items():
        x, y = coord
        if not (x0 <= x <= x1 and y0 <= y <= y1):
            continue
        cells[coord] = RenderableTile(
            content=session.things.get(coord),
            highlight=session.selected == coord,
            floor=floor,
        )
    return Grid(cells)


_KIND_NAMES = {Bun: 'bun', Flour: 'flour', Water: 'water', Flavouring: 'flavouring'}


def thing_label(thing: Thing) -> str:
    """Stable name such as ``water``, ``bun:sugar`` or ``obstacle``."""
    if isinstance(thing, Obstacle):
        return f"obstacle:{thing.label}" if thing.label else 'obstacle'
    name = _KIND_NAMES[type(thing)]
    if thing.flavour is None:
        return name
    return f"{name}:{thing.flavour.value}"


def floor_label(floor: FloorTile) -> str:
    if isinstance(floor, Spawner):
        return 'spawner'
    if isinstance(floor, Collector):
        return 'collector'
    if isinstance(floor, Wall):
        return 'wall'
    return 'plain'


_GLYPHS = {Bun: 'B', Flour: 'F', Water: 'W', Flavouring: '*'}
_FLOOR_GLYPHS = {Plain: '.', Spawner: '^', Collector: '_', Wall: '#'}


def _glyph(tile: RenderableTile) -> str:
    thing = tile.content
    if thing is None:
        return _FLOOR_GLYPHS[type(tile.floor)]
    if isinstance(thing, Obstacle):
        return 'O'
    glyph = _GLYPHS[type(thing)]
    if thing.flavour is not None and not isinstance(thing, Flavouring):
        glyph = glyph.lower()
    return glyph


def pretty(level: Level, session: GameSession) -> str:
    """Text rendering, top row first. Flavoured ingredients are lower-case; the selection is bracketed."""
    tiles = renderable_grid(level, session)
    bounds = tiles.bounds()
    if bounds is None:
        return ''
    (x0, y0), (x1, y1) = bounds
    lines: List[str] = []
    for y in range(y1, y0 - 1, -1):
        row: List[str] = []
        for x in range(x0, x1 + 1):
            tile = tiles.get((x, y))
            if tile is None:
                row.append('   ')
            elif tile.highlight:
                row.append(f"[{_glyph(tile)}]")
            else:
                row.append(f" {_glyph(tile)} ")
        lines.append(''.join(row).rstrip())
    return '\n'.join(lines)
