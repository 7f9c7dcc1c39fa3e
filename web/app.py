"""
web/app.py

Flask JSON API для Peg Solitaire.

/api/solve решает синхронно с таймаутом; /api/solve-stream запускает
поиск в отдельном потоке и отдаёт события через SSE, пока поток считает.
"""

import os
import sys
import json
import time
import threading
import queue
from flask import Flask, request, jsonify, Response, stream_with_context

# Добавляем корень проекта в path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.layout import Layout
from core.moves import legal_moves, apply_move
from core.patterns import DEFAULT_PATTERN, PATTERNS, get_pattern
from core.utils import index_to_pos
from peg_io.parser import parse_shape
from solvers import DFSMemoSolver, NO_SOLUTION
from utils.error_handling import (
    SolverError, InvalidBoardError, InvalidMoveError, SolverTimeoutError,
    safe_solve, validate_pegs, validate_target
)
from utils.logging import configure_logging, get_logger

HOST = os.environ.get('PEG_PUZZLE_HOST', '127.0.0.1')
PORT = int(os.environ.get('PEG_PUZZLE_PORT', '5000'))
SOLVE_TIMEOUT = float(os.environ.get('SOLVE_TIMEOUT', '60'))

app = Flask(__name__)
logger = get_logger()


def layout_to_json(name: str, layout: Layout) -> dict:
    return {
        'name': name,
        'rows': [list(row) for row in layout.rows],
        'holes': list(layout.holes),
        'hole_count': layout.hole_count,
    }


def move_to_json(layout: Layout, move) -> dict:
    f, over, to = move
    fr, fc = layout.position(f)
    tr, tc = layout.position(to)
    return {
        'from': f,
        'over': over,
        'to': to,
        'notation': f"{index_to_pos(fr, fc)} → {index_to_pos(tr, tc)}",
    }


def read_json() -> dict:
    """Тело запроса как JSON-объект; пустое или не-JSON тело — {}."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidBoardError("Тело запроса должно быть JSON-объектом")
    return data


def read_position(data: dict):
    """
    Достаёт раскладку и колышки из тела запроса.

    {
        "pattern": "Plus 33",     // или "shape": "centered=3,5,7"
        "pegs": [1, 2, 3]         // по умолчанию — все лунки
    }
    """
    if data.get('shape'):
        layout = parse_shape(str(data['shape']))
    else:
        layout = get_pattern(str(data.get('pattern', DEFAULT_PATTERN)))

    pegs = data.get('pegs')
    if pegs is None:
        return layout, frozenset(layout.holes)
    try:
        pegs = [int(h) for h in pegs]
    except (TypeError, ValueError):
        raise InvalidBoardError("pegs должен быть списком номеров лунок")
    return layout, validate_pegs(pegs, layout)


def read_target(data: dict, layout: Layout):
    target = data.get('target')
    if target is None:
        return None
    try:
        return validate_target(int(target), layout)
    except (TypeError, ValueError):
        raise InvalidBoardError("target должен быть номером лунки")


@app.errorhandler(SolverError)
def handle_solver_error(e):
    return jsonify({'success': False, 'error': str(e)}), 400


@app.route('/api/patterns', methods=['GET'])
def get_patterns():
    """Встроенные доски в порядке меню."""
    return jsonify({
        'patterns': [layout_to_json(name, layout) for name, layout in PATTERNS.items()]
    })


@app.route('/api/pattern/<name>')
def get_pattern_info(name):
    try:
        layout = get_pattern(name)
    except SolverError:
        return jsonify({'error': 'Pattern not found'}), 404
    return jsonify(layout_to_json(name, layout))


@app.route('/api/moves', methods=['POST'])
def get_moves():
    """Допустимые ходы и статус позиции."""
    layout, pegs = read_position(read_json())
    moves = legal_moves(pegs, layout)
    return jsonify({
        'moves': [move_to_json(layout, m) for m in moves],
        'peg_count': len(pegs),
        'cleared': len(pegs) == 1,
        'stuck': len(pegs) > 1 and not moves,
    })


@app.route('/api/apply', methods=['POST'])
def apply():
    """Применяет ход; ход должен быть допустимым."""
    data = read_json()
    layout, pegs = read_position(data)
    try:
        move = tuple(int(h) for h in data['move'])
    except (KeyError, TypeError, ValueError):
        raise InvalidMoveError("move должен быть тройкой [from, over, to]")

    if move not in legal_moves(pegs, layout):
        raise InvalidMoveError(f"Недопустимый ход {list(move)}")

    new_pegs = apply_move(pegs, move)
    return jsonify({
        'success': True,
        'pegs': sorted(new_pegs),
        'peg_count': len(new_pegs),
        'moves': [move_to_json(layout, m) for m in legal_moves(new_pegs, layout)],
    })


@app.route('/api/solve', methods=['POST'])
def solve():
    """
    Решает позицию синхронно, не дольше SOLVE_TIMEOUT.

    Входные данные:
    {
        "pattern": "Square 25",
        "pegs": [...],
        "target": 13           // необязательно
    }
    """
    data = read_json()
    layout, pegs = read_position(data)
    target = read_target(data, layout)
    logger.info(f"Solve request: pegs={len(pegs)}, target={target}")

    solver = DFSMemoSolver(target_hole=target, timeout=SOLVE_TIMEOUT)

    start_time = time.time()
    result = safe_solve(solver, pegs, layout, default=None)
    elapsed = time.time() - start_time

    if result is None:
        return jsonify({
            'success': False,
            'error': 'Ошибка решателя или превышен лимит времени',
            'peg_count': len(pegs),
            'time': round(elapsed, 3),
        })

    if result is NO_SOLUTION:
        return jsonify({
            'success': False,
            'error': 'Решение не найдено',
            'peg_count': len(pegs),
            'time': round(elapsed, 3),
        })

    return jsonify({
        'success': True,
        'moves': [move_to_json(layout, m) for m in result],
        'move_count': len(result),
        'peg_count': len(pegs),
        'time': round(elapsed, 3),
        'nodes': solver.stats.nodes_visited,
    })


@app.route('/api/solve-stream', methods=['POST'])
def solve_stream():
    """
    Решение с потоковой передачей событий (SSE).

    События: started, progress (раз в секунду), result | error.
    """
    data = read_json()
    layout, pegs = read_position(data)
    target = read_target(data, layout)
    logger.info(f"Solve stream request: pegs={len(pegs)}, target={target}")

    progress_queue = queue.Queue()
    solver = DFSMemoSolver(target_hole=target, timeout=SOLVE_TIMEOUT)

    def solve_in_thread():
        start = time.time()
        try:
            result = solver.solve(pegs, layout)
        except SolverTimeoutError as e:
            progress_queue.put({'type': 'error', 'error': str(e)})
            return
        except SolverError as e:
            logger.error(f"Ошибка решателя: {e}")
            progress_queue.put({'type': 'error', 'error': str(e)})
            return

        elapsed = round(time.time() - start, 3)
        if result is NO_SOLUTION:
            progress_queue.put({'type': 'result', 'success': False,
                                'error': 'Решение не найдено', 'time': elapsed})
        else:
            progress_queue.put({'type': 'result', 'success': True,
                                'moves': [move_to_json(layout, m) for m in result],
                                'move_count': len(result), 'time': elapsed})

    def generate():
        """Генератор SSE событий."""
        yield f"data: {json.dumps({'type': 'started', 'peg_count': len(pegs)})}\n\n"

        thread = threading.Thread(target=solve_in_thread, daemon=True)
        thread.start()
        while True:
            try:
                event_data = progress_queue.get(timeout=1.0)
                yield f"data: {json.dumps(event_data, ensure_ascii=False)}\n\n"
                break
            except queue.Empty:
                if not thread.is_alive() and progress_queue.empty():
                    break
                progress = {'type': 'progress', 'nodes': solver.stats.nodes_visited}
                yield f"data: {json.dumps(progress)}\n\n"

    return Response(stream_with_context(generate()), mimetype='text/event-stream')


if __name__ == '__main__':
    print("=" * 50)
    print("Peg Solitaire - Web API")
    print("=" * 50)
    print(f"\nAPI: http://{HOST}:{PORT}/api/patterns")
    print()
    configure_logging(verbose=True)

    app.run(host=HOST, port=PORT)
