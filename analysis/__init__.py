"""
analysis - Анализ пространства состояний
"""

from .reachable import (
    MAX_REACHABLE_STATES, EnumerationStats, ReachableStates,
    StateSpaceEnumerator, enumerate_reachable_states
)

__all__ = [
    'MAX_REACHABLE_STATES', 'EnumerationStats', 'ReachableStates',
    'StateSpaceEnumerator', 'enumerate_reachable_states'
]
