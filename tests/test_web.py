"""
tests/test_web.py

Тесты Flask API.
"""

import json

import pytest

from web.app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def sse_events(response):
    """Разбирает тело SSE ответа в список событий."""
    body = response.get_data(as_text=True)
    return [json.loads(line[len("data: "):]) for line in body.splitlines() if line.startswith("data: ")]


def test_patterns(client):
    """Тест: встроенные доски в порядке меню."""
    data = client.get('/api/patterns').get_json()

    assert [p['name'] for p in data['patterns']] == ["Plus 33", "Diamond 37", "Square 49", "Square 25"]
    assert data['patterns'][0]['rows'][0] == [None, None, 1, 2, 3, None, None]


def test_pattern_not_found(client):
    assert client.get('/api/pattern/Hexagon').status_code == 404
    assert client.get('/api/pattern/Square%2025').get_json()['hole_count'] == 25


def test_moves(client):
    """Тест: ходы на английской доске без центра."""
    pegs = [h for h in range(1, 34) if h != 17]
    data = client.post('/api/moves', json={'pattern': 'Plus 33', 'pegs': pegs}).get_json()

    assert [(m['from'], m['over'], m['to']) for m in data['moves']] == [
        (5, 10, 17), (15, 16, 17), (19, 18, 17), (29, 24, 17)
    ]
    assert data['peg_count'] == 32
    assert data['moves'][0]['notation'] == "D2 → D4"
    assert not data['stuck']


def test_moves_bad_pegs(client):
    response = client.post('/api/moves', json={'pattern': 'Square 25', 'pegs': [1, 26]})

    assert response.status_code == 400
    assert response.get_json()['success'] is False


@pytest.mark.parametrize('url', ['/api/moves', '/api/apply', '/api/solve', '/api/solve-stream'])
def test_body_must_be_object(client, url):
    """Тест: JSON-массив вместо объекта даёт 400, а не падение."""
    response = client.post(url, json=[1, 2, 3])

    assert response.status_code == 400
    assert response.get_json()['success'] is False


def test_apply(client):
    data = client.post('/api/apply', json={'shape': 'rect=3x3', 'pegs': [1, 2, 6], 'move': [1, 2, 3]}).get_json()

    assert data['success'] is True
    assert data['pegs'] == [3, 6]
    assert [(m['from'], m['over'], m['to']) for m in data['moves']] == [(3, 6, 9)]


def test_apply_illegal(client):
    """Тест: недопустимый ход — 400."""
    response = client.post('/api/apply', json={'shape': 'rect=3x3', 'pegs': [1, 2, 6], 'move': [3, 6, 9]})

    assert response.status_code == 400
    assert client.post('/api/apply', json={'shape': 'rect=3x3', 'pegs': [1, 2]}).status_code == 400


def test_solve(client):
    data = client.post('/api/solve', json={'shape': 'rect=3x3', 'pegs': [1, 2, 6]}).get_json()

    assert data['success'] is True
    assert data['move_count'] == 2
    assert [(m['from'], m['over'], m['to']) for m in data['moves']] == [(1, 2, 3), (3, 6, 9)]


def test_solve_no_solution(client):
    data = client.post('/api/solve', json={'pattern': 'Square 25'}).get_json()

    assert data['success'] is False
    assert data['error'] == 'Решение не найдено'
    assert data['peg_count'] == 25


def test_solve_bad_target(client):
    response = client.post('/api/solve', json={'shape': 'rect=3x3', 'pegs': [1, 2, 6], 'target': 10})

    assert response.status_code == 400


def test_solve_stream(client):
    """Тест: SSE — started, затем result."""
    response = client.post('/api/solve-stream', json={'shape': 'rect=3x3', 'pegs': [1, 2, 6], 'target': 9})
    events = sse_events(response)

    assert response.mimetype == 'text/event-stream'
    assert events[0] == {'type': 'started', 'peg_count': 3}
    assert events[-1]['type'] == 'result'
    assert events[-1]['success'] is True
    assert events[-1]['move_count'] == 2
