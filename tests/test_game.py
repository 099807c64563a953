"""
tests/test_game.py

Тесты фасада движка и игровой сессии.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random

import pytest

from core.board import BoardState
from core.moves import Move, MoveCatalog
from game import GameEngine, GameSession
from utils.error_handling import IllegalMoveError


@pytest.fixture(scope="module")
def engine():
    return GameEngine(rng=random.Random(0))


def test_engine_interface(engine):
    state = engine.initial_state()

    assert state.to_string() == '011111111111111'
    assert engine.legal_moves(state) == [(5, 0), (3, 0)]
    assert engine.apply_move(state, (3, 0)).to_string() == '101011111111111'
    assert engine.score(state) == (0, 0)
    assert len(engine.reachable_states()) == 3016
    assert engine.label_of(3) == 'D'
    assert not engine.is_finished(state)


def test_engine_rejects_illegal_move(engine):
    with pytest.raises(IllegalMoveError):
        engine.apply_move(engine.initial_state(), (14, 5))
    with pytest.raises(IllegalMoveError):
        engine.attempt_move(engine.initial_state(), (14, 5))


def test_attempt_move_without_fuzzy(engine):
    performed, state = engine.attempt_move(engine.initial_state(), (5, 0), fuzzy=False)

    assert performed == Move(5, 0)
    assert state.to_string() == '110110111111111'


def test_attempt_move_fuzzy_is_consistent(engine):
    """Новая позиция соответствует выполненному, а не запрошенному ходу."""
    start = engine.initial_state()
    for _ in range(50):
        performed, state = engine.attempt_move(start, (5, 0))
        assert performed in engine.legal_moves(start)
        assert state == engine.apply_move(start, performed)


def test_isolated_engine():
    """Собственные каталог, стартовая позиция и источник случайности."""
    start = BoardState.from_string('110110111111111')
    engine = GameEngine(catalog=MoveCatalog(), rng=random.Random(1), initial=start)

    assert engine.initial_state() == start
    assert start in engine.reachable_states()
    assert BoardState.initial() not in engine.reachable_states()


def test_engine_with_low_cap():
    engine = GameEngine(max_states=100)

    assert len(engine.reachable_states()) == 100
    assert engine.stats.capped


def test_session_random_game_ends(engine):
    """Случайная партия заканчивается тупиком, каждый ход снимает один колышек."""
    session = GameSession(engine, fuzzy=True)

    while not session.is_finished():
        pegs = session.state.peg_count()
        move = engine.random_move(session.state)
        session.attempt_move(move)
        assert session.state.peg_count() == pegs - 1
        assert session.state in engine.reachable_states()

    assert session.legal_moves() == []
    assert session.moves_played == 14 - session.state.peg_count()
    assert session.random_move() is None


def test_session_reset_and_toggle(engine):
    session = GameSession(engine, fuzzy=True)
    session.set_fuzzy(False)

    assert session.attempt_move((3, 0)) == (3, 0)
    assert session.random_move() is not None
    assert session.moves_played == 2
    assert session.score().base == 30

    session.reset()
    assert session.state == engine.initial_state()
    assert session.moves_played == 0
