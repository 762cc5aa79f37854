import logging
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10


@dataclass
class GenerationSession:
    cover_letter: str
    bullets: str
    role_title: Optional[str] = None
    company_name: Optional[str] = None
    id: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def evict_oldest(entries: "OrderedDict[str, GenerationSession]") -> str:
    key, _ = entries.popitem(last=False)
    return key


class SessionStore:
    """Bounded in-memory registry of completed generations.

    Insertion order is recency order: reads never move an entry, and once
    the store grows past capacity the eviction policy (oldest first by
    default) drops entries until it fits again.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY,
                 evict: Callable[["OrderedDict[str, GenerationSession]"], str] = evict_oldest):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._evict = evict
        self._entries: "OrderedDict[str, GenerationSession]" = OrderedDict()
        self._last_id = 0

    def _next_id(self) -> str:
        # Nanosecond clock, bumped so ids stay strictly increasing
        stamp = max(time.time_ns(), self._last_id + 1)
        self._last_id = stamp
        return str(stamp)

    def put(self, session: GenerationSession) -> str:
        session.id = self._next_id()
        self._entries[session.id] = session
        while len(self._entries) > self.capacity:
            evicted = self._evict(self._entries)
            logger.debug(f"Evicted generation session {evicted}")
        return session.id

    def get(self, session_id: str) -> Optional[GenerationSession]:
        return self._entries.get(session_id)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def ids(self):
        return list(self._entries.keys())
