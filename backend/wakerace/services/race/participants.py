from typing import List, Optional

from flask import current_app

from wakerace import db
from wakerace.models import Participant, Room
from .errors import CommentRejected, ParticipantNotFound, RoomNotFound, ValidationError
from .notifier import notify_room_changed


def clean_text(value, field: str, max_length: int) -> str:
    """Strip user text and reject it when empty or too long."""
    if not isinstance(value, str):
        raise ValidationError(f'{field} is required')
    text = value.strip()
    if not text:
        raise ValidationError(f'{field} is required')
    if len(text) > max_length:
        raise ValidationError(f'{field} must be at most {max_length} characters')
    return text


def join_room(room_id: str, nickname) -> Participant:
    """Add a sleeping participant to the room. Nicknames need not be unique."""
    nickname = clean_text(nickname, 'nickname', int(current_app.config.get('NICKNAME_MAX_LENGTH', 64)))
    room = Room.query.filter_by(id=room_id).first()
    if not room:
        raise RoomNotFound()

    participant = Participant(room_id=room.id, nickname=nickname)
    db.session.add(participant)
    db.session.commit()
    current_app.logger.info(f"[join] room={room.id} participant={participant.id} nickname={nickname!r}")

    notify_room_changed(room.id, 'joined', participant.id)
    return participant


def get_participant(participant_id: str) -> Participant:
    participant = Participant.query.filter_by(id=participant_id).first() if participant_id else None
    if not participant:
        raise ParticipantNotFound()
    return participant


def get_room_rank1(room_id: str) -> Optional[Participant]:
    return Participant.query.filter_by(room_id=room_id, rank=1).first()


def count_participants(room_id: str) -> int:
    return Participant.query.filter_by(room_id=room_id).count()


def list_ranked_participants(room_id: str) -> List[Participant]:
    return (
        Participant.query
        .filter(Participant.room_id == room_id, Participant.rank.isnot(None))
        .order_by(Participant.rank.asc())
        .all()
    )


def set_comment(participant_id: str, text) -> Participant:
    """Store the participant's comment.

    With STRICT_COMMENTS the write is a single conditional UPDATE that only
    matches an awake participant without a comment, so "after waking" and
    "only once" hold at the data layer even under concurrent submissions.
    """
    text = clean_text(text, 'comment', int(current_app.config.get('COMMENT_MAX_LENGTH', 280)))
    strict = bool(current_app.config.get('STRICT_COMMENTS', True))

    query = Participant.query.filter(Participant.id == participant_id)
    if strict:
        query = query.filter(Participant.woke_up_at.isnot(None), Participant.comment.is_(None))
    updated = query.update({'comment': text}, synchronize_session=False)

    if not updated:
        db.session.rollback()
        participant = get_participant(participant_id)
        reason = 'Comment already sent' if participant.comment is not None else 'Wake up before commenting'
        current_app.logger.warning(f"[comment-reject] participant={participant_id} reason={reason!r}")
        raise CommentRejected(reason)

    db.session.commit()
    participant = get_participant(participant_id)
    current_app.logger.info(f"[comment] room={participant.room_id} participant={participant.id} rank={participant.rank}")

    notify_room_changed(participant.room_id, 'commented', participant.id)
    return participant
