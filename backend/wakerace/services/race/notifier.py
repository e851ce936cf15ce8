from wakerace import socketio

NAMESPACE = '/ws'


def room_channel(room_id: str) -> str:
    return f"room:{room_id}"


def notify_room_changed(room_id: str, event: str, participant_id: str = None) -> None:
    """Tell subscribers of a room that something changed so they re-fetch.

    Called only after the mutation is committed. Payloads are hints, not
    deltas: clients rebuild their view from the room state endpoint.
    """
    socketio.emit(
        'room_update',
        {'room_id': room_id, 'event': event, 'participant_id': participant_id},
        to=room_channel(room_id),
        namespace=NAMESPACE,
    )
