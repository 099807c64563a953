#!/usr/bin/env python3
"""
main.py

Консольная точка входа: диагностика пространства состояний и случайная партия.

Использование:
    python main.py                          # сводка по каталогу позиций
    python main.py --play --seed 7          # случайная партия с нечёткими ходами
    python main.py --play --no-fuzzy        # без подмены ходов
    python main.py --state 110110111111111  # сводка для своей позиции
"""

import argparse
import logging
import random
import sys

from game import GameEngine, GameSession
from peg_io import parse_state, display_board, format_move, format_score
from utils.error_handling import GameError
from utils.logging import get_logger
from utils.monitoring import get_monitor


def print_summary(engine: GameEngine, state):
    """Сводка: каталог позиций, ходы и очки текущей позиции."""
    reachable = engine.reachable_states()
    print(f"Достижимых позиций: {len(reachable)}")
    print(f"Направленных ходов: {len(engine.catalog)}")
    print(f"Тупиковых позиций: {len(reachable.terminal_states())}")
    print()
    print(display_board(state))
    print()
    moves = engine.legal_moves(state)
    if moves:
        print("Допустимые ходы: " + ", ".join(format_move(m) for m in moves))
    else:
        print("Допустимых ходов нет — игра окончена")
    print(format_score(engine.score(state)))


def play_random_game(session: GameSession):
    """Играет случайную партию до конца, печатая каждый ход."""
    print(display_board(session.state))
    while not session.is_finished():
        requested = session.engine.random_move(session.state)
        performed = session.attempt_move(requested)
        line = f"{session.moves_played:2}. {format_move(requested)}"
        if performed != requested:
            line += f"  (выполнен {format_move(performed)})"
        print(line)

    print()
    print(display_board(session.state))
    print(f"\nКолышков осталось: {session.state.peg_count()}")
    print(format_score(session.score()))


def main():
    parser = argparse.ArgumentParser(
        description='Markov Decision Pegs — треугольный Peg Solitaire',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py --play              # случайная партия
  python main.py --play --seed 42    # воспроизводимая партия
  python main.py --by-pegs           # гистограмма по числу колышков
        """
    )
    parser.add_argument('--state', help='Позиция: 15 символов 0/1, например 011111111111111')
    parser.add_argument('--play', action='store_true', help='Сыграть случайную партию')
    parser.add_argument('--no-fuzzy', action='store_true', help='Отключить нечёткие ходы')
    parser.add_argument('--seed', type=int, help='Seed генератора случайных чисел')
    parser.add_argument('--by-pegs', action='store_true',
                        help='Число достижимых позиций по количеству колышков')
    parser.add_argument('--stats', action='store_true', help='Показать статистику мониторинга')
    parser.add_argument('--verbose', '-v', action='store_true', help='Логирование уровня DEBUG')

    args = parser.parse_args()

    logger = get_logger(logging.DEBUG if args.verbose else logging.INFO)

    rng = random.Random(args.seed) if args.seed is not None else None

    print("=" * 50)
    print("🎯 Markov Decision Pegs")
    print("=" * 50)

    try:
        engine = GameEngine(rng=rng)
        state = parse_state(args.state) if args.state else engine.initial_state()

        if args.play:
            session = GameSession(engine, fuzzy=not args.no_fuzzy, state=state)
            play_random_game(session)
        else:
            print_summary(engine, state)

        if args.by_pegs:
            print("\nПозиций по числу колышков:")
            for pegs, count in engine.reachable_states().count_by_pegs().items():
                print(f"  {pegs:2}: {count}")
    except (GameError, ValueError) as e:
        logger.error(str(e))
        print(f"❌ Ошибка: {e}")
        return 1

    if args.stats:
        print("\nМониторинг:")
        print(get_monitor().format_stats())

    return 0


if __name__ == "__main__":
    sys.exit(main())
