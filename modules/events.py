from dataclasses import dataclass
from typing import Callable, Any


LOG = "log"
STATUS_UPDATE = "statusUpdate"
SHUTDOWN = "shutdown"

LEVELS = ("INFO", "WAIT", "SUCCESS", "WARN", "ERROR")


@dataclass(frozen=True)
class LogEvent:
    level: str
    message: str

    def __post_init__(self):
        if self.level not in LEVELS:
            raise ValueError(f'Unknown log level "{self.level}"')


class EventBus:
    """Synchronous in-process pub/sub, no replay for late subscribers."""

    def __init__(self):
        self._handlers: dict[str, list[Callable[[Any], None]]] = {}


    def subscribe(self, event: str, handler: Callable[[Any], None]):
        self._handlers.setdefault(event, []).append(handler)
        return handler


    def unsubscribe(self, event: str, handler: Callable[[Any], None]):
        if handler in self._handlers.get(event, []):
            self._handlers[event].remove(handler)


    def emit(self, event: str, payload: Any = None):
        for handler in list(self._handlers.get(event, [])):
            handler(payload)


    def log(self, level: str, message: str):
        self.emit(LOG, LogEvent(level=level, message=message))


    def status(self, **fields):
        self.emit(STATUS_UPDATE, fields)
