from wakerace.session_store import SessionCredentialStore


class FakeSession(dict):
    permanent = False
    modified = False


def test_get_set_clear():
    backing = FakeSession()
    store = SessionCredentialStore(backing)
    assert store.get('room-1') is None

    store.set('room-1', 'p-1')
    store.set('room-2', 'p-2')
    assert store.get('room-1') == 'p-1'
    assert store.all() == {'room-1': 'p-1', 'room-2': 'p-2'}
    assert backing.permanent is True
    assert backing.modified is True

    assert store.clear('room-1') == 'p-1'
    assert store.clear('room-1') is None
    assert store.all() == {'room-2': 'p-2'}


def test_rejoining_replaces_credential():
    store = SessionCredentialStore(FakeSession())
    store.set('room-1', 'old')
    store.set('room-1', 'new')
    assert store.get('room-1') == 'new'


def test_credentials_survive_across_requests(flask_app):
    client = flask_app.test_client()
    room_id = client.post('/api/rooms').get_json()['id']
    alice = client.post(f'/api/rooms/{room_id}/join', json={'nickname': 'Alice'}).get_json()

    with client.session_transaction() as sess:
        assert sess.permanent
        assert sess['race_credentials'] == {room_id: alice['id']}

    # A different browser has no credential for the room
    stranger = flask_app.test_client()
    assert stranger.get(f'/api/rooms/{room_id}/me').status_code == 404
