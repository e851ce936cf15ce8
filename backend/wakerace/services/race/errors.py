class RaceError(Exception):
    """Base error for rejected race operations; carries an HTTP status."""

    status_code = 400

    def __init__(self, message=None):
        super().__init__(message or self.__doc__)
        self.message = message or self.__doc__


class ValidationError(RaceError):
    """Invalid input"""
    status_code = 400


class MissingCredential(RaceError):
    """No participant credential for this room"""
    status_code = 401


class RoomNotFound(RaceError):
    """Room not found"""
    status_code = 404


class ParticipantNotFound(RaceError):
    """Participant not found"""
    status_code = 404


class NotInRoom(RaceError):
    """Participant does not belong to this room"""
    status_code = 409


class AlreadyAwake(RaceError):
    """Participant is already awake"""
    status_code = 409


class CommentRejected(RaceError):
    """Comment can not be set"""
    status_code = 409
