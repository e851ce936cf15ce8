from datetime import datetime, timezone
import uuid

from flask import current_app

from wakerace import db


def _new_id():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


def _isoformat(value):
    return value.isoformat() if value else None


class Room(db.Model):
    __tablename__ = 'room'
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    status = db.Column(db.String(16), nullable=False, default='waiting')  # waiting, active, finished
    # Ranks handed out so far; bumped under the room's write lock on every wake
    wake_count = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    participants = db.relationship('Participant', back_populates='room', lazy='dynamic')

    @property
    def invite_url(self):
        base = current_app.config.get('CLIENT_BASE_URL', '').rstrip('/')
        return f"{base}/room/{self.id}"

    def to_dict(self):
        return {
            'id': self.id,
            'status': self.status,
            'created_at': _isoformat(self.created_at),
            'invite_url': self.invite_url,
        }


class Participant(db.Model):
    __tablename__ = 'participant'
    __table_args__ = (
        db.UniqueConstraint('room_id', 'rank', name='uq_participant_room_rank'),
    )
    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    room_id = db.Column(db.String(36), db.ForeignKey('room.id'), nullable=False, index=True)
    nickname = db.Column(db.String(64), nullable=False)
    woke_up_at = db.Column(db.DateTime(timezone=True), nullable=True)
    rank = db.Column(db.Integer, nullable=True)
    comment = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    room = db.relationship('Room', back_populates='participants')

    @property
    def is_awake(self):
        return self.woke_up_at is not None

    def to_dict(self):
        return {
            'id': self.id,
            'room_id': self.room_id,
            'nickname': self.nickname,
            'woke_up_at': _isoformat(self.woke_up_at),
            'rank': self.rank,
            'comment': self.comment,
        }
