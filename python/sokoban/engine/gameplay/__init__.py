from sokoban.engine.gameplay.moves import move_piece

__all__ = ["move_piece"]
