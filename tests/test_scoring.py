"""
tests/test_scoring.py

Тесты подсчёта очков.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.board import BoardState
from scoring.score import Score, base_score, bonus_score, get_score


@pytest.mark.parametrize("text, expected", [
    ('011111111111111', (0, 0)),
    ('001111111111111', (10, 7)),
    ('010111111111111', (10, 8)),
    ('110110111111111', (10, 8)),
    ('110111111011110', (30, 17)),
    ('100000000000000', (910, 195)),
    ('000000000000001', (910, 13)),
    ('010000000000010', (780, 96)),
])
def test_score_examples(text, expected):
    assert get_score(BoardState.from_string(text)) == expected


def test_first_vacancy_scores_zero():
    """Первая пустая клетка даёт 0, каждая следующая на 10 больше."""
    assert base_score(BoardState.from_string('011111111111111')) == 0
    assert base_score(BoardState.from_string('001111111111111')) == 10
    assert base_score(BoardState.from_string('000111111111111')) == 30


def test_empty_reductions_are_zero():
    """Полная доска: нет пустых клеток; пустая доска: нет колышков."""
    assert base_score(BoardState.from_string('111111111111111')) == 0
    assert bonus_score(BoardState.from_string('000000000000000')) == 0


def test_bonus_can_be_negative():
    """Множитель 14 - 15 = -1 не обрезается."""
    assert bonus_score(BoardState.from_string('111111111111111')) == -8


def test_bonus_prefers_apex():
    """Одиночный колышек в вершине выгоднее колышка в углу."""
    apex = bonus_score(BoardState.from_string('100000000000000'))
    corner = bonus_score(BoardState.from_string('000000000000001'))

    assert apex > corner


def test_score_total():
    score = Score(910, 195)

    assert score.total == 1105
    assert score.base == 910
    assert score.bonus == 195
