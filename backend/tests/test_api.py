from arena.services.puzzles import DIFFICULTIES


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_health(client):
    assert client.get('/health').get_json() == {'status': 'ok'}


def test_room_stats_empty(client):
    res = client.get('/api/rooms/stats')
    assert res.status_code == 200
    assert res.get_json() == {'rooms': 0, 'waiting': 0, 'connections': 0}


def test_puzzle_default_difficulty(client):
    res = client.get('/api/puzzles')
    assert res.status_code == 200
    data = res.get_json()
    assert data['difficulty'] == 'easy'
    assert len(data['puzzle']) == 81


def test_puzzle_each_difficulty(client):
    for difficulty in DIFFICULTIES:
        data = client.get(f'/api/puzzles?difficulty={difficulty}').get_json()
        assert data['difficulty'] == difficulty
        assert set(data['puzzle']) <= set('.123456789')


def test_puzzle_unknown_difficulty(client):
    res = client.get('/api/puzzles?difficulty=impossible')
    assert res.status_code == 400
    assert 'error' in res.get_json()
