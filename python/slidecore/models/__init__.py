from slidecore.models.board import Board

__all__ = ["Board"]
