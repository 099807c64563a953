"""
tests/test_peg_io.py

Тесты парсинга и текстового вывода.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import BoardState
from core.moves import Move
from peg_io import parse_state, parse_move, display_board, format_move, format_moves, format_score
from scoring.score import Score


def test_parse_state_binary():
    assert parse_state('011111111111111') == BoardState.initial()


def test_parse_state_symbols_and_whitespace():
    """Нарисованный треугольник парсится так же, как строка."""
    text = """
        ○
       ● ●
      ● ● ●
     ● ● ● ●
    ● ● ● ● ●
    """
    assert parse_state(text) == BoardState.initial()


@pytest.mark.parametrize("text", ['0111', '01111111111111x', ''])
def test_parse_state_errors(text):
    with pytest.raises(ValueError):
        parse_state(text)


@pytest.mark.parametrize("text, expected", [
    ('D→A', Move(3, 0)),
    ('d -> a', Move(3, 0)),
    ('F A', Move(5, 0)),
    ('O-F', Move(14, 5)),
    ('3,0', Move(3, 0)),
    ('12 14', Move(12, 14)),
])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ['Z→A', '15,0', 'DA', '3;0', ''])
def test_parse_move_errors(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_display_board():
    board = display_board(BoardState.initial(), show_labels=False)

    assert board.splitlines() == [
        '    ○',
        '   ● ●',
        '  ● ● ●',
        ' ● ● ● ●',
        '● ● ● ● ●',
    ]


def test_display_board_with_labels():
    lines = display_board(BoardState.initial()).splitlines()

    assert lines[0].endswith('A')
    assert lines[-1].endswith('K L M N O')


def test_format_move_and_moves():
    assert format_move((3, 0)) == 'D → A'
    assert format_moves([(5, 0), (3, 0)]) == '   1. F → A\n   2. D → A'
    assert format_moves([]) == 'Ходов нет'


def test_format_score():
    assert format_score(Score(30, 17)) == 'Score: 30, Bonus: 17, Total: 47'
