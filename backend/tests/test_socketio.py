def _updates(sio_client):
    return [e for e in sio_client.get_received('/ws') if e['name'] == 'room_update']


def test_socket_connect_and_subscribe(sio_client):
    # Ensure we are connected to /ws
    if not sio_client.is_connected('/ws'):
        sio_client.connect(namespace='/ws')
    assert sio_client.is_connected('/ws')

    sio_client.emit('subscribe_room', {'room_id': 'abc'}, namespace='/ws')
    received = sio_client.get_received('/ws')
    subscribed = [e for e in received if e['name'] == 'subscribed']
    assert subscribed
    assert subscribed[0]['args'][0] == {'room': 'room:abc', 'room_id': 'abc'}


def test_subscribe_requires_room_id(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('subscribe_room', {}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(e['name'] == 'error' for e in received)


def test_ping_pong(sio_client):
    sio_client.get_received('/ws')
    sio_client.emit('ping', {'n': 1}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(e['name'] == 'pong' and e['args'][0] == {'n': 1} for e in received)


def test_room_update_on_join_wake_and_comment(sio_client, client, room_id):
    sio_client.emit('subscribe_room', {'room_id': room_id}, namespace='/ws')
    sio_client.get_received('/ws')  # flush

    alice = client.post(f'/api/rooms/{room_id}/join', json={'nickname': 'Alice'}).get_json()
    updates = _updates(sio_client)
    assert [u['args'][0] for u in updates] == [
        {'room_id': room_id, 'event': 'joined', 'participant_id': alice['id']}
    ]

    client.post(f'/api/rooms/{room_id}/wake')
    assert [u['args'][0]['event'] for u in _updates(sio_client)] == ['woke_up']

    client.post(f"/api/participants/{alice['id']}/comment", json={'comment': 'gm'})
    assert [u['args'][0]['event'] for u in _updates(sio_client)] == ['commented']


def test_rejected_wake_sends_no_update(sio_client, client, room_id):
    client.post(f'/api/rooms/{room_id}/join', json={'nickname': 'Alice'})
    client.post(f'/api/rooms/{room_id}/wake')
    sio_client.emit('subscribe_room', {'room_id': room_id}, namespace='/ws')
    sio_client.get_received('/ws')

    assert client.post(f'/api/rooms/{room_id}/wake').status_code == 409
    assert _updates(sio_client) == []


def test_other_rooms_are_not_notified(sio_client, client, room_id):
    other_room = client.post('/api/rooms').get_json()['id']
    sio_client.emit('subscribe_room', {'room_id': other_room}, namespace='/ws')
    sio_client.get_received('/ws')

    client.post(f'/api/rooms/{room_id}/join', json={'nickname': 'Alice'})
    assert _updates(sio_client) == []


def test_unsubscribe_stops_updates(sio_client, client, room_id):
    sio_client.emit('subscribe_room', {'room_id': room_id}, namespace='/ws')
    sio_client.emit('unsubscribe_room', {'room_id': room_id}, namespace='/ws')
    received = sio_client.get_received('/ws')
    assert any(e['name'] == 'unsubscribed' for e in received)

    client.post(f'/api/rooms/{room_id}/join', json={'nickname': 'Alice'})
    assert _updates(sio_client) == []
