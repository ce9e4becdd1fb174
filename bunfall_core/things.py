from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Flavour(Enum):
    SUGAR = 'sugar'
    CHOCOLATE = 'chocolate'
    CHILLI = 'chilli'


@dataclass(frozen=True)
class Bun:
    flavour: Optional[Flavour] = None


@dataclass(frozen=True)
class Flour:
    flavour: Optional[Flavour] = None


@dataclass(frozen=True)
class Water:
    flavour: Optional[Flavour] = None


@dataclass(frozen=True)
class Flavouring:
    flavour: Flavour


@dataclass(frozen=True)
class Obstacle:
    """Inert block: never falls and never mixes. The label is cosmetic."""
    label: str = ''


Thing = Union[Bun, Flour, Water, Flavouring, Obstacle]


def is_faller(thing: Thing) -> bool:
    """Everything except obstacles is pulled down by gravity."""
    return not isinstance(thing, Obstacle)


def mix_bun(flour: Flour, water: Water) -> Optional[Thing]:
    """Combine flour and water into a bun, unless their flavours clash."""
    f1, f2 = flour.flavour, water.flavour
    if f1 is None:
        return Bun(f2)
    if f2 is None or f1 == f2:
        return Bun(f1)
    return None


def _mix_ordered(a: Thing, b: Thing) -> Optional[Thing]:
    if isinstance(a, Water) and isinstance(b, Flour):
        return mix_bun(b, a)
    if isinstance(b, Flavouring):
        if isinstance(a, Water) and a.flavour is None:
            return Water(b.flavour)
        if isinstance(a, Flour) and a.flavour is None:
            return Flour(b.flavour)
    return None


def mix_ingredients(a: Thing, b: Thing) -> Optional[Thing]:
    """Result of ``a`` colliding with ``b``, or None when they do not react.

    Symmetric: both argument orders are tried.
    """
    result = _mix_ordered(a, b)
    if result is None:
        result = _mix_ordered(b, a)
    return result
