"""
tests/test_board.py

Тесты представления доски и каталога прыжков.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import BoardState, INITIAL_STATE
from core.moves import MoveCatalog, Move, JUMP_PAIRS, jumped_position
from core.utils import OCCUPIED, VACANT, index_to_label, label_to_index
from utils.error_handling import InvalidStateError


def test_initial_state():
    """Стартовая позиция: вершина пуста, остальные 14 клеток заняты."""
    board = BoardState.initial()

    assert board.to_string() == INITIAL_STATE
    assert board.peg_count() == 14
    assert board.vacant_indexes() == [0]
    assert board.is_vacant(0)
    assert all(board.has_peg(ix) for ix in range(1, 15))


@pytest.mark.parametrize("cells", ["", "01111111111111", "0111111111111111", "01111111111111x"])
def test_invalid_state_rejected(cells):
    """Неверная длина или значения клеток должны отклоняться."""
    with pytest.raises(InvalidStateError):
        BoardState(cells)


def test_with_cells_returns_copy():
    """Запись по индексам не меняет исходную доску."""
    board = BoardState.initial()
    changed = board.with_cells({0: OCCUPIED, 14: VACANT})

    assert board.to_string() == INITIAL_STATE
    assert changed.to_string() == '111111111111110'
    assert changed != board


def test_state_equality_and_hash():
    """Доски с одинаковыми клетками равны и дают одинаковый hash."""
    a = BoardState.from_string('110110111111111')
    b = BoardState(list('110110111111111'))

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != '110110111111111'


def test_catalog_doubles_authored_pairs():
    """18 пар дают 36 направленных ходов: прямой, затем обратный."""
    catalog = MoveCatalog()

    assert len(JUMP_PAIRS) == 18
    assert len(catalog) == 36
    assert catalog.moves[:4] == (Move(0, 3), Move(3, 0), Move(0, 5), Move(5, 0))
    assert catalog.moves[-2:] == (Move(12, 14), Move(14, 12))


def test_adjacency_keeps_insertion_order():
    """Смежность в порядке каталога, без сортировки."""
    catalog = MoveCatalog()

    assert catalog.adjacency == (
        (3, 5), (6, 8), (7, 9), (0, 5, 10, 12), (11, 13),
        (0, 3, 12, 14), (1, 8), (2, 9), (1, 6), (2, 7),
        (3, 12), (4, 13), (3, 5, 10, 14), (4, 11), (5, 12),
    )


def test_catalog_from_custom_pairs():
    """Каталог можно построить из собственной геометрии."""
    catalog = MoveCatalog(pairs=[(0, 3)])

    assert catalog.moves == (Move(0, 3), Move(3, 0))
    assert (0, 3) in catalog
    assert (0, 5) not in catalog
    assert catalog.adjacency[0] == (3,)
    assert catalog.adjacency[5] == ()


def test_jumped_position():
    """Перепрыгиваемая клетка — середина пары индексов."""
    assert jumped_position((0, 3)) == 1
    assert jumped_position((3, 0)) == 1
    assert jumped_position((3, 12)) == 7
    assert Move(14, 5).jumped == 9


def test_labels():
    assert index_to_label(0) == 'A'
    assert index_to_label(14) == 'O'
    assert label_to_index('d') == 3
    with pytest.raises(ValueError):
        index_to_label(15)
    with pytest.raises(ValueError):
        label_to_index('Z')
