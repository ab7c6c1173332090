from __future__ import annotations
import logging
import threading
import uuid
from collections import OrderedDict
from typing import Optional, Tuple
from .config import settings
from .dictionary import DictionaryProvider
from .session import Session

logger = logging.getLogger(__name__)

class SessionStore:
    """
    In-memory sessions keyed by id, all sharing one dictionary provider.
    Holds at most `max_sessions`; creating one more drops the session that
    was used least recently.
    """

    def __init__(self, provider: DictionaryProvider, max_sessions: int = settings.max_sessions) -> None:
        self.provider = provider
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, Session] = OrderedDict()
        self._lock = threading.Lock()

    def create(self) -> Tuple[str, Session]:
        session_id = uuid.uuid4().hex
        session = Session(self.provider)
        with self._lock:
            self._sessions[session_id] = session
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Dropped idle session %s", evicted)
        return session_id, session

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
            return session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)

# Loaded lazily on first use, then shared by every request
DICTIONARY = DictionaryProvider.from_settings(settings)
SESSIONS = SessionStore(DICTIONARY)
