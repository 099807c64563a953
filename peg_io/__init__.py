"""
peg_io - Ввод/вывод

Экспортирует:
- Парсинг позиций и ходов
- Текстовую визуализацию доски, ходов и очков
"""

from .parser import parse_state, parse_move
from .visualizer import display_board, format_move, format_moves, format_score

__all__ = [
    'parse_state',
    'parse_move',
    'display_board',
    'format_move',
    'format_moves',
    'format_score'
]
