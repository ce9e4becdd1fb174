from __future__ import annotations

# Facade module that re-exports Bunfall core functionality.
# The Flask app and tests import from here; single-responsibility modules
# live under bunfall_core/*.

from bunfall_core.grid import Coord, Grid, Size, draw_box, line_rect  # noqa: F401
from bunfall_core.things import (  # noqa: F401
    Bun,
    Flavour,
    Flavouring,
    Flour,
    Obstacle,
    Thing,
    Water,
    is_faller,
    mix_bun,
    mix_ingredients,
)
from bunfall_core.layout import (  # noqa: F401
    COLLECTOR,
    DEFAULT_LEVEL,
    PLAIN,
    SPAWN_WEIGHTS,
    WALL,
    Collector,
    Level,
    Plain,
    Spawner,
    Wall,
    build_layout,
    build_level,
    collector_coords,
    spawner_coords,
    wall_coords,
)
from bunfall_core.rng import Seed, initial_seed, pick_random, seed_debug_repr, seed_from_time, step_int  # noqa: F401
from bunfall_core.engine import (  # noqa: F401
    apply_gravity,
    collect_things,
    count_collectable,
    fill_board,
    is_adjacent,
    is_game_over,
    is_stable,
    is_wall,
    move_thing,
    spawn_thing,
    try_move,
)
from bunfall_core.session import (  # noqa: F401
    GameSession,
    InitializeWithSeed,
    RestartGame,
    SelectCoordinate,
    TriggerCollectionPass,
    TriggerGravityPass,
    TriggerSpawnAttempt,
    dispatch,
    move_count,
    new_session,
    seed_debug,
    selected_coordinate,
)
from bunfall_core.view import RenderableTile, floor_label, pretty, renderable_grid, thing_label  # noqa: F401


def main() -> None:
    # CLI driver delegated to bunfall_core.cli
    from bunfall_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
