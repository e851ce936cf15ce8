from typing import Optional

from flask import current_app

from wakerace import db
from wakerace.models import Participant, Room
from .errors import RoomNotFound
from .participants import count_participants, get_room_rank1, list_ranked_participants


def create_room() -> Room:
    room = Room(status='waiting', wake_count=0)
    db.session.add(room)
    db.session.commit()
    current_app.logger.info(f"[room] created room={room.id}")
    return room


def get_room(room_id: str) -> Room:
    room = Room.query.filter_by(id=room_id).first() if room_id else None
    if not room:
        raise RoomNotFound()
    return room


def participant_view(me: Optional[Participant]) -> str:
    """Which screen the caller belongs on: join, sleeping or awake."""
    if me is None:
        return 'join'
    return 'awake' if me.is_awake else 'sleeping'


def build_room_state(room: Room, me: Optional[Participant] = None) -> dict:
    """Everything a client re-fetches after a change notification."""
    winner = get_room_rank1(room.id)
    ranking = list_ranked_participants(room.id)
    strict = bool(current_app.config.get('STRICT_COMMENTS', True))

    me_payload = None
    if me is not None:
        me_payload = me.to_dict()
        me_payload['is_winner'] = me.rank == 1
        if strict:
            me_payload['can_comment'] = me.is_awake and me.comment is None
        else:
            me_payload['can_comment'] = True

    return {
        'room': room.to_dict(),
        'participant_count': count_participants(room.id),
        'winner': winner.to_dict() if winner else None,
        'winner_message': winner.comment if winner else None,
        'ranking': [p.to_dict() for p in ranking],
        'me': me_payload,
        'view': participant_view(me),
    }
