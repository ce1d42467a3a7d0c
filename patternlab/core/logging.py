import logging
from collections import deque
from typing import Deque, Dict, List, Optional


class RingBufferHandler(logging.Handler):
    """
    Keeps the last ``max_entries`` records as plain dicts.

    Each entry holds the message as ``event`` plus ``level``, ``ts`` and the
    ``details`` passed through ``extra``. The demos are single-threaded, so
    the buffer relies on the handler's own lock around ``emit`` and takes no
    extra lock for ``get_events``.
    """

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)

    def emit(self, record: logging.LogRecord) -> None:
        self._events.append(
            {
                "event": record.getMessage(),
                "level": record.levelname,
                "ts": record.created,
                "details": getattr(record, "details", {}),
            }
        )

    def get_events(self) -> List[Dict]:
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()


def create_logger(name: str, ring_size: int, level: int | str = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = RingBufferHandler(max_entries=ring_size)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


class EventLog:
    """
    Structured event history kept next to a regular logger.

    Events go to ``logger`` as usual and are also recorded in a private ring
    buffer, so each owner keeps its own recent history.
    """

    def __init__(self, logger: logging.Logger, max_entries: int = 200):
        self.logger = logger
        self.buffer = RingBufferHandler(max_entries=max_entries)

    def log(self, event: str, details: Optional[dict] = None, level: int = logging.INFO) -> None:
        extra = {"details": dict(details or {})}
        self.logger.log(level, event, extra=extra)
        record = self.logger.makeRecord(self.logger.name, level, "(event)", 0, event, (), None, extra=extra)
        self.buffer.handle(record)

    def get_events(self) -> List[Dict]:
        return self.buffer.get_events()
