from slidecore.engine.moves.engine import MoveEngine, MoveResult

__all__ = ["MoveEngine", "MoveResult"]
