from __future__ import annotations

from typing import Callable, Dict, Generic, Iterable, Iterator, List, Mapping, Optional, Tuple, TypeVar

Coord = Tuple[int, int]  # (column, row); row grows upward
Size = Tuple[int, int]   # (width, height)

T = TypeVar('T')
U = TypeVar('U')


class Grid(Generic[T]):
    """Sparse, immutable mapping from (column, row) to a value.

    A missing key means the cell is empty. Every operation returns a new grid
    and leaves the receiver untouched.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[Mapping[Coord, T]] = None) -> None:
        self._cells: Dict[Coord, T] = dict(cells) if cells else {}

    @classmethod
    def from_list(cls, entries: Iterable[Tuple[Coord, T]]) -> 'Grid[T]':
        return cls({(int(c[0]), int(c[1])): v for c, v in entries})

    def to_list(self) -> List[Tuple[Coord, T]]:
        """Entries sorted by row, then column."""
        return sorted(self._cells.items(), key=lambda kv: (kv[0][1], kv[0][0]))

    # ---------- point access ----------

    def get(self, coord: Coord) -> Optional[T]:
        return self._cells.get(coord)

    def put(self, coord: Coord, value: T) -> 'Grid[T]':
        cells = dict(self._cells)
        cells[coord] = value
        return Grid(cells)

    def remove(self, coord: Coord) -> 'Grid[T]':
        if coord not in self._cells:
            return self
        cells = dict(self._cells)
        del cells[coord]
        return Grid(cells)

    def swap(self, a: Coord, b: Coord) -> 'Grid[T]':
        """Exchange the contents of two cells, including emptiness."""
        if a == b:
            return self
        cells = dict(self._cells)
        cells.pop(a, None)
        cells.pop(b, None)
        if b in self._cells:
            cells[a] = self._cells[b]
        if a in self._cells:
            cells[b] = self._cells[a]
        return Grid(cells)

    # ---------- whole-grid transforms ----------

    def translate(self, offset: Coord) -> 'Grid[T]':
        dx, dy = offset
        return Grid({(x + dx, y + dy): v for (x, y), v in self._cells.items()})

    def rot_cv(self) -> 'Grid[T]':
        """Rotate 90 degrees clockwise about the origin: (x, y) -> (y, -x)."""
        return Grid({(y, -x): v for (x, y), v in self._cells.items()})

    def rot_ccv(self) -> 'Grid[T]':
        """Rotate 90 degrees counter-clockwise about the origin: (x, y) -> (-y, x)."""
        return Grid({(-y, x): v for (x, y), v in self._cells.items()})

    def overlay(self, other: 'Grid[T]') -> 'Grid[T]':
        """Union of both grids; ``other`` wins where keys collide."""
        cells = dict(self._cells)
        cells.update(other._cells)
        return Grid(cells)

    def filter(self, keep: Callable[[Coord, T], bool]) -> 'Grid[T]':
        return Grid({c: v for c, v in self._cells.items() if keep(c, v)})

    def map_values(self, fn: Callable[[T], U]) -> 'Grid[U]':
        return Grid({c: fn(v) for c, v in self._cells.items()})

    # ---------- queries ----------

    def coords(self) -> List[Coord]:
        return sorted(self._cells, key=lambda c: (c[1], c[0]))

    def items(self) -> Iterator[Tuple[Coord, T]]:
        return iter(self._cells.items())

    def bounds(self) -> Optional[Tuple[Coord, Coord]]:
        """((min_x, min_y), (max_x, max_y)) over occupied keys, or None when empty."""
        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return (min(xs), min(ys)), (max(xs), max(ys))

    def num_rows(self) -> int:
        b = self.bounds()
        if b is None:
            return 0
        return b[1][1] - b[0][1] + 1

    def num_cols(self) -> int:
        b = self.bounds()
        if b is None:
            return 0
        return b[1][0] - b[0][0] + 1

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.coords())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(frozenset(self._cells.items()))

    def __repr__(self) -> str:
        return f"Grid({dict(self.to_list())!r})"


def draw_box(value: T, size: Size) -> Grid[T]:
    """Filled rectangle covering columns 0..w-1 and rows 0..h-1."""
    width, height = size
    return Grid({(x, y): value for x in range(width) for y in range(height)})


def line_rect(value: T, size: Size) -> Grid[T]:
    """Outline of the same footprint as ``draw_box``; the interior stays empty."""
    width, height = size
    return draw_box(value, size).filter(
        lambda c, _v: c[0] in (0, width - 1) or c[1] in (0, height - 1)
    )
