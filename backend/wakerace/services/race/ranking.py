from flask import current_app

from wakerace import db
from wakerace.models import Participant, Room, utcnow
from .errors import AlreadyAwake, NotInRoom, ParticipantNotFound, RaceError, RoomNotFound
from .notifier import notify_room_changed


def _claim_next_rank(room_id: str) -> int:
    """Bump the room's wake counter and return the claimed rank.

    The UPDATE is the first statement of the transaction: it takes the room
    row lock (PostgreSQL) or the database write lock (SQLite) and holds it
    until commit or rollback, serializing every wake in the room.
    """
    updated = (
        Room.query.filter(Room.id == room_id)
        .update({Room.wake_count: Room.wake_count + 1}, synchronize_session=False)
    )
    if not updated:
        raise RoomNotFound()
    return db.session.query(Room.wake_count).filter(Room.id == room_id).scalar()


def mark_awake(room_id: str, participant_id: str) -> Participant:
    """Record that a participant woke up and assign the next rank in the room.

    Runs as one transaction. Rank is 1 + the number of participants already
    ranked in the room, which is what the counter holds because ranks are only
    handed out here. Any rejection rolls back, undoing the counter bump, so a
    failed call leaves no trace; calling it again for an awake participant is
    rejected with AlreadyAwake and changes nothing.
    """
    try:
        rank = _claim_next_rank(room_id)

        participant = Participant.query.filter_by(id=participant_id).first()
        if not participant:
            raise ParticipantNotFound()
        if participant.room_id != room_id:
            raise NotInRoom()
        if participant.woke_up_at is not None:
            raise AlreadyAwake()

        # Timestamp taken under the lock so wake times follow rank order
        participant.woke_up_at = utcnow()
        participant.rank = rank
        db.session.add(participant)
        db.session.commit()
    except RaceError as exc:
        db.session.rollback()
        current_app.logger.warning(f"[wake-reject] room={room_id} participant={participant_id} reason={exc.message!r}")
        raise
    except Exception:
        db.session.rollback()
        raise

    current_app.logger.info(f"[wake] room={room_id} participant={participant_id} rank={rank}")
    notify_room_changed(room_id, 'woke_up', participant_id)
    return participant
