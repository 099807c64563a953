"""
policy/fuzzy.py

"Нечёткие" ходы: иногда выполняется не тот ход, который просили.

- 70% — выполняется запрошенный ход;
- 20% — другой ход с той же стартовой клетки;
- 10% — любой другой ход.

Если других ходов с той же клетки нет, получается 80/20.
Если альтернатив нет вовсе, всегда выполняется запрошенный ход.
"""

import random
from typing import List, Optional, Sequence, TypeVar

from core.board import BoardState
from core.moves import Move, MoveCatalog, get_legal_moves
from utils.logging import get_logger

KEEP_PROBABILITY = 0.70
SAME_START_PROBABILITY = 0.67

T = TypeVar('T')


def random_choice(items: Sequence[T], rng=None) -> Optional[T]:
    """Равновероятный выбор элемента; None для пустой последовательности."""
    if not items:
        return None
    rng = rng if rng is not None else random
    return items[int(rng.random() * len(items))]


class MoveFuzzifier:
    """
    Подмена запрошенного хода другим допустимым.

    Источник случайности внедряется через rng (любой объект с методом
    random()); по умолчанию используется модуль random.
    """

    def __init__(self, catalog: Optional[MoveCatalog] = None, rng=None,
                 keep_probability: float = KEEP_PROBABILITY,
                 same_start_probability: float = SAME_START_PROBABILITY):
        self.catalog = catalog
        self.rng = rng if rng is not None else random
        self.keep_probability = keep_probability
        self.same_start_probability = same_start_probability
        self.logger = get_logger()

    def fuzzify(self, state: BoardState, move: Sequence[int]) -> Move:
        """Возвращает ход, который будет выполнен вместо move."""
        intended = Move(*move)
        if self.rng.random() < self.keep_probability:
            return intended

        different_moves: List[Move] = [
            m for m in get_legal_moves(state, self.catalog) if m != intended
        ]
        same_start_moves = [m for m in different_moves if m.from_ix == intended.from_ix]
        diff_start_moves = [m for m in different_moves if m.from_ix != intended.from_ix]

        if same_start_moves:
            if not different_moves or self.rng.random() < self.same_start_probability:
                return self._substitute(intended, random_choice(same_start_moves, self.rng))

        if diff_start_moves:
            return self._substitute(intended, random_choice(diff_start_moves, self.rng))

        # Других ходов нет
        return intended

    def random_move(self, state: BoardState) -> Optional[Move]:
        """Случайный допустимый ход; None, если ходов нет."""
        return random_choice(get_legal_moves(state, self.catalog), self.rng)

    def _substitute(self, intended: Move, chosen: Move) -> Move:
        self.logger.debug(f"Нечёткий ход: {tuple(intended)} → {tuple(chosen)}")
        return chosen
