"""
core/utils.py

Общие константы и утилиты треугольной доски.
"""

from typing import Tuple

BOARD_SIZE = 15

# Статус клетки
OCCUPIED = '1'  # Колышек
VACANT = '0'    # Пустое место

# Символы для отображения
PEG = '●'
HOLE = '○'

LABELS = 'ABCDEFGHIJKLMNO'

# Ряды треугольника: (первый индекс, длина ряда)
ROWS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 2), (3, 3), (6, 4), (10, 5))


def index_to_label(ix: int) -> str:
    """Индекс клетки → буква (0 → 'A', 14 → 'O')."""
    if not 0 <= ix < BOARD_SIZE:
        raise ValueError(f"Индекс клетки вне диапазона 0..{BOARD_SIZE - 1}: {ix}")
    return LABELS[ix]


def label_to_index(label: str) -> int:
    """Буква → индекс клетки."""
    label = label.strip().upper()
    if len(label) != 1 or label not in LABELS:
        raise ValueError(f"Неизвестная клетка: {label!r}")
    return LABELS.index(label)
