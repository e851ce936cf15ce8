"""Wake-up race operations.

Rooms and participants live in the database; the only cross-row invariant
(sequential ranks per room) is maintained by ``mark_awake``. Every committed
participant mutation is announced to Socket.IO subscribers of the room.
"""

from .errors import (
    AlreadyAwake,
    CommentRejected,
    MissingCredential,
    NotInRoom,
    ParticipantNotFound,
    RaceError,
    RoomNotFound,
    ValidationError,
)
from .participants import (
    count_participants,
    get_participant,
    get_room_rank1,
    join_room,
    list_ranked_participants,
    set_comment,
)
from .ranking import mark_awake
from .rooms import build_room_state, create_room, get_room
from .notifier import notify_room_changed, room_channel
