"""
scoring/score.py

Подсчёт очков.

- Базовые очки: k-я пустая клетка (считая с нуля слева направо) стоит 10 * k.
  Первая пустая клетка даёт 0.
- Бонус: за колышки у вершины. Вес клетки ix равен 15 - ix, множитель
  равен 14 минус число колышков. При многих колышках бонус отрицательный.
"""

import math
from typing import NamedTuple

from core.board import BoardState
from core.utils import BOARD_SIZE

POINTS_PER_CAPTURE = 10


class Score(NamedTuple):
    base: int
    bonus: int

    @property
    def total(self) -> int:
        return self.base + self.bonus


def base_score(state: BoardState) -> int:
    """Сумма 10 * k по пустым клеткам; 0, если пустых нет."""
    vacant = len(state.vacant_indexes())
    return sum(POINTS_PER_CAPTURE * k for k in range(vacant))


def bonus_score(state: BoardState) -> int:
    """Бонус за расположение оставшихся колышков; 0 для пустой доски."""
    weights = [BOARD_SIZE - ix for ix in state.occupied_indexes()]
    if not weights:
        return 0

    multiplier = (BOARD_SIZE - 1) - len(weights)
    bonus = sum(weights) / len(weights)
    return math.ceil(multiplier * bonus)


def get_score(state: BoardState) -> Score:
    """Очки позиции: (base, bonus)."""
    return Score(base_score(state), bonus_score(state))
