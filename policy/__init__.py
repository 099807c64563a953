"""
policy - Политики выбора ходов
"""

from .fuzzy import (
    KEEP_PROBABILITY, SAME_START_PROBABILITY,
    MoveFuzzifier, random_choice
)

__all__ = ['KEEP_PROBABILITY', 'SAME_START_PROBABILITY', 'MoveFuzzifier', 'random_choice']
