"""
core/board.py

Иммутабельное представление треугольной доски из 15 клеток.

Нумерация клеток:

            0
          1   2
        3   4   5
      6   7   8   9
    10  11  12  13  14
"""

from typing import Dict, Iterator, List, Tuple

from .utils import BOARD_SIZE, OCCUPIED, VACANT
from utils.error_handling import InvalidStateError

INITIAL_STATE = '011111111111111'


class BoardState:
    """
    Иммутабельная доска: кортеж из 15 статусов клеток.
    Новые состояния получаются только копированием с записью по индексам.
    """
    __slots__ = ('cells', '_hash')

    def __init__(self, cells):
        cells = tuple(cells)
        if len(cells) != BOARD_SIZE:
            raise InvalidStateError(
                f"Доска должна содержать {BOARD_SIZE} клеток, получено {len(cells)}"
            )
        for cell in cells:
            if cell not in (OCCUPIED, VACANT):
                raise InvalidStateError(f"Недопустимое значение клетки: {cell!r}")
        self.cells: Tuple[str, ...] = cells
        self._hash = hash(cells)

    @classmethod
    def from_string(cls, text: str) -> 'BoardState':
        """Создаёт доску из строки вида '011111111111111'."""
        return cls(text)

    @classmethod
    def initial(cls) -> 'BoardState':
        """Стартовая позиция: пустая вершина, остальные 14 клеток заняты."""
        return cls(INITIAL_STATE)

    def to_string(self) -> str:
        return ''.join(self.cells)

    def has_peg(self, ix: int) -> bool:
        return self.cells[ix] == OCCUPIED

    def is_vacant(self, ix: int) -> bool:
        return self.cells[ix] == VACANT

    def peg_count(self) -> int:
        return self.cells.count(OCCUPIED)

    def occupied_indexes(self) -> List[int]:
        return [ix for ix, cell in enumerate(self.cells) if cell == OCCUPIED]

    def vacant_indexes(self) -> List[int]:
        return [ix for ix, cell in enumerate(self.cells) if cell == VACANT]

    def with_cells(self, updates: Dict[int, str]) -> 'BoardState':
        """Возвращает копию доски с заменой клеток по индексам."""
        cells = list(self.cells)
        for ix, value in updates.items():
            cells[ix] = value
        return BoardState(cells)

    def __getitem__(self, ix: int) -> str:
        return self.cells[ix]

    def __len__(self) -> int:
        return BOARD_SIZE

    def __iter__(self) -> Iterator[str]:
        return iter(self.cells)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.cells == other.cells

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BoardState('{self.to_string()}')"
