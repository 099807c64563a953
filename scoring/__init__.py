"""
scoring - Подсчёт очков
"""

from .score import Score, POINTS_PER_CAPTURE, base_score, bonus_score, get_score

__all__ = ['Score', 'POINTS_PER_CAPTURE', 'base_score', 'bonus_score', 'get_score']
