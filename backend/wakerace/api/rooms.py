from flask import Blueprint, jsonify, request, current_app

from wakerace.models import Participant
from wakerace.services import race
from wakerace.session_store import SessionCredentialStore

rooms = Blueprint('rooms', __name__)


def _current_participant(room_id):
    """Resolve the caller's participant in this room from the session cookie.

    Credentials that no longer resolve to a participant of the room are
    dropped from the session.
    """
    store = SessionCredentialStore()
    participant_id = store.get(room_id)
    if not participant_id:
        return None
    participant = Participant.query.filter_by(id=participant_id, room_id=room_id).first()
    if not participant:
        store.clear(room_id)
        current_app.logger.info(f"[session] dropped stale credential room={room_id} participant={participant_id}")
    return participant


@rooms.route('', methods=['POST'])
def create_room():
    room = race.create_room()
    return jsonify(room.to_dict()), 201


@rooms.route('/<string:room_id>', methods=['GET'])
def get_room(room_id):
    return jsonify(race.get_room(room_id).to_dict())


@rooms.route('/<string:room_id>/state', methods=['GET'])
def get_room_state(room_id):
    room = race.get_room(room_id)
    return jsonify(race.build_room_state(room, _current_participant(room.id)))


@rooms.route('/<string:room_id>/join', methods=['POST'])
def join_room(room_id):
    data = request.get_json(silent=True) or {}
    participant = race.join_room(room_id, data.get('nickname'))
    SessionCredentialStore().set(room_id, participant.id)
    return jsonify(participant.to_dict()), 201


@rooms.route('/<string:room_id>/winner', methods=['GET'])
def get_winner(room_id):
    race.get_room(room_id)
    winner = race.get_room_rank1(room_id)
    return jsonify({'winner': winner.to_dict() if winner else None})


@rooms.route('/<string:room_id>/count', methods=['GET'])
def count_participants(room_id):
    race.get_room(room_id)
    return jsonify({'count': race.count_participants(room_id)})


@rooms.route('/<string:room_id>/ranking', methods=['GET'])
def get_ranking(room_id):
    race.get_room(room_id)
    return jsonify([p.to_dict() for p in race.list_ranked_participants(room_id)])


@rooms.route('/<string:room_id>/wake', methods=['POST'])
def wake_up(room_id):
    data = request.get_json(silent=True) or {}
    # Fall back to the session credential when the body names no participant
    participant_id = data.get('participant_id') or SessionCredentialStore().get(room_id)
    if not participant_id:
        raise race.MissingCredential()
    participant = race.mark_awake(room_id, participant_id)
    return jsonify(participant.to_dict())


@rooms.route('/<string:room_id>/me', methods=['GET'])
def get_me(room_id):
    participant = _current_participant(room_id)
    if not participant:
        return jsonify({'error': 'Not joined in this room'}), 404
    return jsonify(participant.to_dict())


@rooms.route('/<string:room_id>/me', methods=['DELETE'])
def forget_me(room_id):
    removed = SessionCredentialStore().clear(room_id)
    return jsonify({'ok': True, 'participant_id': removed})
