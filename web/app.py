"""
web/app.py

Flask JSON API игрового движка.

API не хранит состояние: клиент передаёт позицию в каждом запросе.
"""

import os
import sys

from flask import Flask, request, jsonify

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game import GameEngine
from peg_io import parse_state, parse_move, format_move
from utils.error_handling import GameError
from utils.logging import get_logger

app = Flask(__name__)
logger = get_logger()

engine = GameEngine()


def state_payload(state):
    """Позиция, доступные ходы, очки и флаг окончания."""
    moves = engine.legal_moves(state)
    score = engine.score(state)
    return {
        'state': state.to_string(),
        'pegs': state.peg_count(),
        'moves': [
            {'from': m.from_ix, 'to': m.to_ix, 'label': format_move(m)}
            for m in moves
        ],
        'finished': not moves,
        'score': {'base': score.base, 'bonus': score.bonus, 'total': score.total}
    }


def move_payload(move):
    return {'from': move.from_ix, 'to': move.to_ix, 'label': format_move(move)}


def read_json():
    """Тело запроса: JSON-объект (пустое тело считается пустым объектом)."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Тело запроса должно быть JSON-объектом")
    return data


def read_state(data):
    if 'state' not in data:
        raise ValueError("Не передана позиция (state)")
    return parse_state(str(data['state']))


def _is_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


def read_fuzzy(data):
    fuzzy = data.get('fuzzy', True)
    if not isinstance(fuzzy, bool):
        raise ValueError("Поле fuzzy должно быть true или false")
    return fuzzy


def read_move(data):
    raw = data.get('move')
    if isinstance(raw, str):
        return parse_move(raw)
    if isinstance(raw, list) and len(raw) == 2 and all(_is_index(v) for v in raw):
        return parse_move(f"{raw[0]},{raw[1]}")
    raise ValueError("Ход должен быть [from, to] или строкой вида 'D→A'")


@app.errorhandler(GameError)
@app.errorhandler(ValueError)
def bad_request(error):
    logger.warning(f"{request.path}: {error}")
    return jsonify({'success': False, 'error': str(error)}), 400


@app.route('/api/new', methods=['GET'])
def new_game():
    """Стартовая позиция."""
    return jsonify({'success': True, **state_payload(engine.initial_state())})


@app.route('/api/moves', methods=['POST'])
def legal_moves():
    """
    Доступные ходы и очки позиции.

    Входные данные:
    {
        "state": "011111111111111"
    }
    """
    data = read_json()
    return jsonify({'success': True, **state_payload(read_state(data))})


@app.route('/api/move', methods=['POST'])
def make_move():
    """
    Попытка хода.

    Входные данные:
    {
        "state": "011111111111111",
        "move": [5, 0],          // или "F→A"
        "fuzzy": true            // нечёткие ходы (по умолчанию включены)
    }
    """
    data = read_json()
    state = read_state(data)
    move = read_move(data)
    fuzzy = read_fuzzy(data)

    performed, next_state = engine.attempt_move(state, move, fuzzy=fuzzy)
    return jsonify({
        'success': True,
        'requested': move_payload(move),
        'performed': move_payload(performed),
        'fuzzed': performed != move,
        **state_payload(next_state)
    })


@app.route('/api/random-move', methods=['POST'])
def random_move():
    """Случайный допустимый ход."""
    data = read_json()
    state = read_state(data)
    move = engine.random_move(state)
    if move is None:
        return jsonify({'success': False, 'error': 'Игра окончена', **state_payload(state)}), 409

    return jsonify({
        'success': True,
        'performed': move_payload(move),
        **state_payload(engine.apply_move(state, move))
    })


@app.route('/api/stats', methods=['GET'])
def stats():
    """Диагностика каталога позиций."""
    reachable = engine.reachable_states()
    return jsonify({
        'reachable_states': len(reachable),
        'moves': len(engine.catalog),
        'terminal_states': len(reachable.terminal_states()),
        'by_pegs': {str(k): v for k, v in reachable.count_by_pegs().items()},
        'capped': engine.stats.capped
    })


def server_options(environ=None):
    """
    Параметры запуска сервера из окружения.

    PEGS_HOST (по умолчанию 127.0.0.1), PEGS_PORT (5000), PEGS_DEBUG (выключен).
    """
    environ = os.environ if environ is None else environ
    return {
        'host': environ.get('PEGS_HOST', '127.0.0.1'),
        'port': int(environ.get('PEGS_PORT', '5000')),
        'debug': environ.get('PEGS_DEBUG', '').lower() in ('1', 'true', 'yes'),
    }


if __name__ == '__main__':
    print("=" * 50)
    print("Markov Decision Pegs - Web API")
    print("=" * 50)
    options = server_options()
    print(f"\nOpen http://{options['host']}:{options['port']}/api/new in your browser")
    print()

    app.run(**options)
