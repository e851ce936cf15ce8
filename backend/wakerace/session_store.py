from typing import Dict, Optional

from flask import session


class SessionCredentialStore:
    """Room id -> participant id mapping held by the client.

    Backed by Flask's signed session cookie, marked permanent so the
    credentials survive browser reloads. Possessing the participant id is the
    only credential a player has.
    """

    SESSION_KEY = 'race_credentials'

    def __init__(self, backing=None):
        self._backing = session if backing is None else backing

    def _credentials(self) -> Dict[str, str]:
        return self._backing.get(self.SESSION_KEY) or {}

    def _save(self, credentials: Dict[str, str]) -> None:
        self._backing[self.SESSION_KEY] = credentials
        if hasattr(self._backing, 'permanent'):
            self._backing.permanent = True
        if hasattr(self._backing, 'modified'):
            self._backing.modified = True

    def get(self, room_id: str) -> Optional[str]:
        return self._credentials().get(room_id)

    def set(self, room_id: str, participant_id: str) -> None:
        credentials = dict(self._credentials())
        credentials[room_id] = participant_id
        self._save(credentials)

    def clear(self, room_id: str) -> Optional[str]:
        credentials = dict(self._credentials())
        removed = credentials.pop(room_id, None)
        if removed is not None:
            self._save(credentials)
        return removed

    def all(self) -> Dict[str, str]:
        return dict(self._credentials())
