"""
Bunfall core Python package.

Pure game logic for the falling-block baking puzzle, kept free of any
rendering or timing so it can be driven by the CLI, the Flask app or tests.
Modules:
- grid.py: sparse coordinate Grid and geometry helpers
- things.py: Thing/Flavour types and mixing rules
- layout.py: floor tiles and level construction
- rng.py: seed-threading random sampler
- engine.py: move, gravity, spawn, collect, game-over
- session.py: GameSession and event dispatch
- view.py: renderable projection and text rendering
"""
