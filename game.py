"""
game.py

Фасад игрового движка для слоя представления.

Движок собирается из явно созданных частей (каталог ходов, перечислитель,
нечёткий выбор), поэтому тесты могут строить изолированные экземпляры
с собственным источником случайности и стартовой позицией.
"""

from typing import List, Optional, Sequence, Tuple

from analysis.reachable import (
    MAX_REACHABLE_STATES, EnumerationStats, ReachableStates, StateSpaceEnumerator
)
from core.board import BoardState
from core.moves import (
    Move, MoveCatalog, DEFAULT_CATALOG,
    get_legal_moves, get_next_state
)
from core.utils import index_to_label
from policy.fuzzy import MoveFuzzifier, KEEP_PROBABILITY, SAME_START_PROBABILITY
from scoring.score import Score, get_score


class GameEngine:
    """Движок: ходы, переходы, очки, нечёткие ходы и каталог позиций."""

    def __init__(self, catalog: Optional[MoveCatalog] = None, rng=None,
                 initial: Optional[BoardState] = None,
                 max_states: int = MAX_REACHABLE_STATES,
                 keep_probability: float = KEEP_PROBABILITY,
                 same_start_probability: float = SAME_START_PROBABILITY):
        self.catalog = catalog or DEFAULT_CATALOG
        self._initial = initial if initial is not None else BoardState.initial()
        self.fuzzifier = MoveFuzzifier(
            self.catalog, rng,
            keep_probability=keep_probability,
            same_start_probability=same_start_probability
        )

        # Каталог позиций строится один раз, до любых игровых операций
        enumerator = StateSpaceEnumerator(self.catalog, max_states)
        self._reachable = enumerator.enumerate(self._initial)
        self.stats: EnumerationStats = enumerator.stats

    def initial_state(self) -> BoardState:
        return self._initial

    def legal_moves(self, state: BoardState) -> List[Move]:
        return get_legal_moves(state, self.catalog)

    def apply_move(self, state: BoardState, move: Sequence[int]) -> BoardState:
        return get_next_state(state, move, self.catalog)

    def fuzzify(self, state: BoardState, move: Sequence[int]) -> Move:
        return self.fuzzifier.fuzzify(state, move)

    def score(self, state: BoardState) -> Score:
        return get_score(state)

    def reachable_states(self) -> ReachableStates:
        return self._reachable

    def label_of(self, ix: int) -> str:
        return index_to_label(ix)

    def is_finished(self, state: BoardState) -> bool:
        return len(self.legal_moves(state)) == 0

    def random_move(self, state: BoardState) -> Optional[Move]:
        return self.fuzzifier.random_move(state)

    def attempt_move(self, state: BoardState, move: Sequence[int],
                     fuzzy: bool = True) -> Tuple[Move, BoardState]:
        """
        Пытается выполнить ход.

        Запрошенный ход должен быть допустимым; при fuzzy=True он может быть
        подменён. Возвращает (выполненный ход, новая позиция).
        """
        requested = Move(*move)
        # Первый apply_move проверяет допустимость запрошенного хода
        next_state = self.apply_move(state, requested)
        if not fuzzy:
            return requested, next_state

        performed = self.fuzzify(state, requested)
        if performed != requested:
            next_state = self.apply_move(state, performed)
        return performed, next_state


class GameSession:
    """Текущая партия: позиция, флаг нечётких ходов, счётчик ходов."""

    def __init__(self, engine: GameEngine, fuzzy: bool = True,
                 state: Optional[BoardState] = None):
        self.engine = engine
        self.fuzzy = fuzzy
        self.state = state if state is not None else engine.initial_state()
        self.moves_played = 0

    def legal_moves(self) -> List[Move]:
        return self.engine.legal_moves(self.state)

    def score(self) -> Score:
        return self.engine.score(self.state)

    def is_finished(self) -> bool:
        return self.engine.is_finished(self.state)

    def attempt_move(self, move: Sequence[int]) -> Move:
        """Выполняет ход (возможно, подменённый) и возвращает его."""
        performed, self.state = self.engine.attempt_move(self.state, move, self.fuzzy)
        self.moves_played += 1
        return performed

    def random_move(self) -> Optional[Move]:
        """Случайный ход без подмены; None, если игра окончена."""
        move = self.engine.random_move(self.state)
        if move is None:
            return None
        self.state = self.engine.apply_move(self.state, move)
        self.moves_played += 1
        return move

    def set_fuzzy(self, fuzzy: bool):
        self.fuzzy = fuzzy

    def reset(self):
        self.state = self.engine.initial_state()
        self.moves_played = 0
