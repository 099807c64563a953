"""
peg_io/visualizer.py

Текстовая визуализация доски, ходов и очков.
"""

from typing import List, Optional, Sequence

from core.board import BoardState
from core.utils import PEG, HOLE, ROWS, LABELS, index_to_label
from scoring.score import Score


def display_board(state: BoardState, show_labels: bool = True) -> str:
    """
    Рисует треугольник.

    Args:
        state: позиция
        show_labels: добавить справа треугольник с буквами клеток
    """
    width = ROWS[-1][1] * 2 - 1
    lines = []
    for start, length in ROWS:
        cells = " ".join(PEG if state.has_peg(ix) else HOLE
                         for ix in range(start, start + length))
        line = cells.center(width)
        if show_labels:
            labels = " ".join(LABELS[start:start + length])
            line += "    " + labels.center(width)
        lines.append(line.rstrip())
    return "\n".join(lines)


def format_move(move: Sequence[int]) -> str:
    """Ход в нотации букв: 'D → A'."""
    return f"{index_to_label(move[0])} → {index_to_label(move[1])}"


def format_moves(moves: Optional[List[Sequence[int]]]) -> str:
    """Нумерованный список ходов."""
    if not moves:
        return "Ходов нет"
    return "\n".join(f"  {i:2}. {format_move(m)}" for i, m in enumerate(moves, 1))


def format_score(score: Score) -> str:
    return f"Score: {score.base}, Bonus: {score.bonus}, Total: {score.total}"
