"""
core/moves.py

Каталог прыжков и генерация ходов.

Ход (from, to) означает: взять колышек из `from`, перепрыгнуть клетку
`(from + to) // 2` и поставить колышек в `to`. Ход допустим, если:

- в `from` есть колышек;
- `to` пуста;
- в перепрыгиваемой клетке есть колышек.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from .board import BoardState
from .utils import BOARD_SIZE, OCCUPIED, VACANT
from utils.error_handling import IllegalMoveError

# Геометрия прыжков задана вручную: (верхняя клетка, нижняя клетка)
JUMP_PAIRS: Tuple[Tuple[int, int], ...] = (
    (0, 3), (0, 5),
    (1, 6), (1, 8),
    (2, 7), (2, 9),
    (3, 5), (3, 10), (3, 12),
    (4, 11), (4, 13),
    (5, 12), (5, 14),
    (6, 8),
    (7, 9),
    (10, 12),
    (11, 13),
    (12, 14),
)


class Move(NamedTuple):
    """Ход: откуда и куда прыгает колышек."""
    from_ix: int
    to_ix: int

    @property
    def jumped(self) -> int:
        return jumped_position(self)


def jumped_position(move: Sequence[int]) -> int:
    """Индекс перепрыгиваемой клетки."""
    return (move[0] + move[1]) // 2


def build_moves(pairs: Sequence[Tuple[int, int]] = JUMP_PAIRS) -> Tuple[Move, ...]:
    """Каждая пара даёт прямой и обратный ход, в порядке перечисления."""
    moves: List[Move] = []
    for a, b in pairs:
        moves.append(Move(a, b))
        moves.append(Move(b, a))
    return tuple(moves)


def build_adjacency(moves: Sequence[Move]) -> Tuple[Tuple[int, ...], ...]:
    """Список смежности: для каждой клетки — куда из неё можно прыгнуть."""
    return tuple(
        tuple(m.to_ix for m in moves if m.from_ix == ix)
        for ix in range(BOARD_SIZE)
    )


class MoveCatalog:
    """Неизменяемый каталог всех направленных ходов и смежности."""
    __slots__ = ('moves', 'adjacency', '_move_set')

    def __init__(self, pairs: Sequence[Tuple[int, int]] = JUMP_PAIRS):
        self.moves: Tuple[Move, ...] = build_moves(pairs)
        self.adjacency: Tuple[Tuple[int, ...], ...] = build_adjacency(self.moves)
        self._move_set = frozenset(self.moves)

    def __contains__(self, move) -> bool:
        return tuple(move) in self._move_set

    def __len__(self) -> int:
        return len(self.moves)

    def __repr__(self) -> str:
        return f"MoveCatalog({len(self.moves)} moves)"


DEFAULT_CATALOG = MoveCatalog()


def get_legal_moves(state: BoardState, catalog: Optional[MoveCatalog] = None) -> List[Move]:
    """
    Список допустимых ходов.

    Клетки просматриваются от 14 к 0, назначения — в порядке каталога.
    Порядок результата значим. Пустой список означает конец игры.
    """
    adjacency = (catalog or DEFAULT_CATALOG).adjacency
    cells = state.cells
    legal_moves: List[Move] = []
    for ix in range(BOARD_SIZE - 1, -1, -1):
        if cells[ix] != OCCUPIED:
            continue
        for to_ix in adjacency[ix]:
            if cells[to_ix] == VACANT and cells[(ix + to_ix) // 2] == OCCUPIED:
                legal_moves.append(Move(ix, to_ix))
    return legal_moves


def illegal_move_reason(state: BoardState, move: Sequence[int],
                        catalog: Optional[MoveCatalog] = None) -> Optional[str]:
    """Причина, по которой ход недопустим; None для допустимого хода."""
    if len(move) != 2 or move not in (catalog or DEFAULT_CATALOG):
        return "ход вне каталога прыжков"
    from_ix, to_ix = move
    if not state.has_peg(from_ix):
        return "в исходной клетке нет колышка"
    if not state.has_peg(jumped_position(move)):
        return "нечего перепрыгивать"
    if not state.is_vacant(to_ix):
        return "клетка назначения занята"
    return None


def is_legal_move(state: BoardState, move: Sequence[int],
                  catalog: Optional[MoveCatalog] = None) -> bool:
    """Проверка допустимости хода в позиции."""
    return illegal_move_reason(state, move, catalog) is None


def is_terminal(state: BoardState, catalog: Optional[MoveCatalog] = None) -> bool:
    """Нет ни одного допустимого хода."""
    return len(get_legal_moves(state, catalog)) == 0


def get_next_state(state: BoardState, move: Sequence[int],
                   catalog: Optional[MoveCatalog] = None) -> BoardState:
    """
    Применяет ход и возвращает новую доску. Исходная доска не меняется.

    Raises:
        IllegalMoveError: если ход недопустим в этой позиции
    """
    reason = illegal_move_reason(state, move, catalog)
    if reason is not None:
        raise IllegalMoveError(state, move, reason)
    from_ix, to_ix = move
    return state.with_cells({
        from_ix: VACANT,
        jumped_position(move): VACANT,
        to_ix: OCCUPIED,
    })
