"""
peg_io/parser.py

Парсинг позиций и ходов из текста.
"""

import re
from typing import List

from core.board import BoardState
from core.moves import Move
from core.utils import BOARD_SIZE, OCCUPIED, VACANT, PEG, HOLE, label_to_index

_SYMBOLS = {
    OCCUPIED: OCCUPIED, VACANT: VACANT,
    PEG: OCCUPIED, HOLE: VACANT,
}


def parse_state(text: str) -> BoardState:
    """
    Парсит позицию.

    Допустимы строки из '0'/'1' или символов '●'/'○'; пробелы и переводы
    строк игнорируются, так что можно передать и нарисованный треугольник.

    Raises:
        ValueError: если символы неизвестны или клеток не 15
    """
    cells: List[str] = []
    for ch in text:
        if ch.isspace():
            continue
        if ch not in _SYMBOLS:
            raise ValueError(f"Неизвестный символ клетки: {ch!r}")
        cells.append(_SYMBOLS[ch])

    if len(cells) != BOARD_SIZE:
        raise ValueError(f"Ожидается {BOARD_SIZE} клеток, получено {len(cells)}")

    return BoardState(cells)


def parse_move(text: str) -> Move:
    """
    Парсит ход.

    Форматы: "D→A", "D -> A", "D A", "3,0", "3 0".

    Raises:
        ValueError: если формат не распознан
    """
    labels = re.fullmatch(r'\s*([A-Oa-o])\s*(?:→|->|-|\s)\s*([A-Oa-o])\s*', text)
    if labels:
        return Move(label_to_index(labels.group(1)), label_to_index(labels.group(2)))

    numbers = re.fullmatch(r'\s*(\d{1,2})\s*[,\s]\s*(\d{1,2})\s*', text)
    if numbers:
        from_ix, to_ix = int(numbers.group(1)), int(numbers.group(2))
        if from_ix < BOARD_SIZE and to_ix < BOARD_SIZE:
            return Move(from_ix, to_ix)

    raise ValueError(
        "Неверный формат хода. Ожидается: D→A, D->A, D A или 3,0"
    )
