"""
core - Ядро треугольного Peg Solitaire

Доска, каталог прыжков и генерация ходов.
"""

from .board import BoardState, INITIAL_STATE
from .moves import (
    Move, MoveCatalog, DEFAULT_CATALOG, JUMP_PAIRS,
    build_moves, build_adjacency, jumped_position,
    get_legal_moves, get_next_state, is_legal_move, is_terminal,
    illegal_move_reason
)
from .utils import (
    BOARD_SIZE, OCCUPIED, VACANT, PEG, HOLE, LABELS, ROWS,
    index_to_label, label_to_index
)

__all__ = [
    'BoardState', 'INITIAL_STATE',
    'Move', 'MoveCatalog', 'DEFAULT_CATALOG', 'JUMP_PAIRS',
    'build_moves', 'build_adjacency', 'jumped_position',
    'get_legal_moves', 'get_next_state', 'is_legal_move', 'is_terminal',
    'illegal_move_reason',
    'BOARD_SIZE', 'OCCUPIED', 'VACANT', 'PEG', 'HOLE', 'LABELS', 'ROWS',
    'index_to_label', 'label_to_index'
]
