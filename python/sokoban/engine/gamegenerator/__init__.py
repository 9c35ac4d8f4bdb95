from sokoban.engine.gamegenerator.generator import GameGenerator
from sokoban.engine.gamegenerator.pipeline import (
    randomized,
    serial,
    solvable_randomized,
    solvable_serial,
)

__all__ = [
    "GameGenerator",
    "randomized",
    "serial",
    "solvable_randomized",
    "solvable_serial",
]
