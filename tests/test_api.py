import chess


def test_index(client):
    res = client.get('/')
    assert res.status_code == 200
    assert 'message' in res.get_json()


def test_session_state_initial(client):
    res = client.get('/api/session')
    assert res.status_code == 200
    state = res.get_json()
    assert state['fen'] == chess.STARTING_FEN
    assert state['move_right'] == 'w'
    assert state['seats'] == {'w': False, 'b': False}
    assert state['spectators'] == 0
    assert len(state['legal_moves']) == 20


def test_session_state_tracks_sockets(client, connect):
    white, black, watcher = connect(), connect(), connect()
    white.emit('move', {'from': 'e2', 'to': 'e4', 'promotion': 'q'})

    state = client.get('/api/session').get_json()
    assert state['seats'] == {'w': True, 'b': True}
    assert state['spectators'] == 1
    assert state['move_right'] == 'b'
    assert chess.Board(state['fen']).turn == chess.BLACK
