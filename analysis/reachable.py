"""
analysis/reachable.py

Перечисление всех позиций, достижимых из стартовой (BFS).
Результат — диагностический каталог, правила ходов его не используют.
"""

import time
from collections import Counter, deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from core.board import BoardState
from core.moves import MoveCatalog, get_legal_moves, get_next_state
from utils.logging import get_logger
from utils.monitoring import get_monitor, monitor_time

# Реальная неподвижная точка — 3016 позиций, лимит только страхует
MAX_REACHABLE_STATES = 5000


@dataclass
class EnumerationStats:
    """Статистика перечисления."""
    states_found: int = 0
    transitions: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    capped: bool = False

    def __str__(self) -> str:
        return (
            f"States: {self.states_found}, "
            f"Transitions: {self.transitions}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
            + (" [CAPPED]" if self.capped else "")
        )


class ReachableStates:
    """Неизменяемый каталог достижимых позиций в порядке обхода."""
    __slots__ = ('_states', '_index', '_catalog')

    def __init__(self, states: Sequence[BoardState], catalog: Optional[MoveCatalog] = None):
        self._states: Tuple[BoardState, ...] = tuple(states)
        self._index = frozenset(self._states)
        self._catalog = catalog

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[BoardState]:
        return iter(self._states)

    def __getitem__(self, ix: int) -> BoardState:
        return self._states[ix]

    def __contains__(self, state: object) -> bool:
        return state in self._index

    def terminal_states(self) -> List[BoardState]:
        """Позиции без допустимых ходов."""
        return [s for s in self._states if not get_legal_moves(s, self._catalog)]

    def count_by_pegs(self) -> Dict[int, int]:
        """Гистограмма: число колышков → число позиций."""
        counts = Counter(s.peg_count() for s in self._states)
        return dict(sorted(counts.items()))

    def __repr__(self) -> str:
        return f"ReachableStates({len(self._states)} states)"


class StateSpaceEnumerator:
    """
    Обход в ширину от стартовой позиции.

    Очередь и множество посещённых инициализируются стартовой позицией.
    Обход останавливается, когда очередь пуста или каталог достиг max_states.
    """

    def __init__(self, catalog: Optional[MoveCatalog] = None,
                 max_states: int = MAX_REACHABLE_STATES):
        self.catalog = catalog
        self.max_states = max_states
        self.stats = EnumerationStats()
        self.logger = get_logger()

    @monitor_time('enumerate_states')
    def enumerate(self, initial: Optional[BoardState] = None) -> ReachableStates:
        """Возвращает каталог всех достижимых позиций."""
        self.stats = EnumerationStats()
        start_time = time.time()

        initial = initial if initial is not None else BoardState.initial()
        found: List[BoardState] = []
        depth = {initial: 0}
        queue = deque([initial])

        while queue and len(found) < self.max_states:
            state = queue.popleft()
            found.append(state)
            self.stats.max_depth = max(self.stats.max_depth, depth[state])

            for move in get_legal_moves(state, self.catalog):
                self.stats.transitions += 1
                next_state = get_next_state(state, move, self.catalog)
                if next_state not in depth:
                    depth[next_state] = depth[state] + 1
                    queue.append(next_state)

        self.stats.states_found = len(found)
        self.stats.time_elapsed = time.time() - start_time

        if queue:
            self.stats.capped = True
            get_monitor().increment_counter('enumeration_cap_reached')
            self.logger.warning(
                f"Перечисление остановлено на лимите {self.max_states} позиций, "
                f"в очереди осталось {len(queue)}: геометрия прыжков, вероятно, неверна"
            )
        else:
            self.logger.info(f"Достижимых позиций: {len(found)} ({self.stats})")

        return ReachableStates(found, self.catalog)


def enumerate_reachable_states(initial: Optional[BoardState] = None,
                               catalog: Optional[MoveCatalog] = None,
                               max_states: int = MAX_REACHABLE_STATES) -> ReachableStates:
    """Однократное перечисление с настройками по умолчанию."""
    return StateSpaceEnumerator(catalog, max_states).enumerate(initial)
