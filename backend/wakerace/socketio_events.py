from flask import current_app
from flask_socketio import join_room, leave_room, emit

from wakerace import socketio
from wakerace.services.race.notifier import NAMESPACE, room_channel


def handle_connect():
    emit('connected', {'message': f'Connected to {NAMESPACE}'})


def handle_subscribe_room(data):
    room_id = (data or {}).get('room_id')
    if not room_id:
        emit('error', {'message': 'room_id is required'})
        return
    channel = room_channel(room_id)
    join_room(channel)
    current_app.logger.debug(f"[subscribe] room={room_id}")
    emit('subscribed', {'room': channel, 'room_id': room_id})


def handle_unsubscribe_room(data):
    room_id = (data or {}).get('room_id')
    if not room_id:
        emit('error', {'message': 'room_id is required'})
        return
    channel = room_channel(room_id)
    leave_room(channel)
    emit('unsubscribed', {'room': channel, 'room_id': room_id})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the '/ws' namespace."""
    socketio.on_event('connect', handle_connect, namespace=NAMESPACE)
    socketio.on_event('subscribe_room', handle_subscribe_room, namespace=NAMESPACE)
    socketio.on_event('unsubscribe_room', handle_unsubscribe_room, namespace=NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=NAMESPACE)
