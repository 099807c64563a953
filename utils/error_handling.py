"""
utils/error_handling.py

Иерархия исключений игрового движка.
"""

from typing import Any


class GameError(Exception):
    """Базовое исключение движка."""
    pass


class InvalidStateError(GameError):
    """Некорректное состояние доски (длина или значения клеток)."""
    pass


class IllegalMoveError(GameError):
    """Ход недопустим в данной позиции."""

    def __init__(self, state: Any, move: Any, reason: str = ""):
        self.state = state
        self.move = move
        self.reason = reason
        message = f"Недопустимый ход {tuple(move)} в позиции {state}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
