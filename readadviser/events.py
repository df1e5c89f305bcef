"""Event types shared between fetchers and processors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class EventType(IntEnum):
    UNKNOWN = 0
    MESSAGE = 1


@dataclass
class Event:
    type: EventType
    text: str = ""
    meta: Any = None


class Fetcher(ABC):
    """Something that yields batches of events."""

    @abstractmethod
    def fetch(self, limit: int) -> list[Event]:
        """Return at most ``limit`` new events."""


class Processor(ABC):
    """Something that handles a single event."""

    @abstractmethod
    def process(self, event: Event) -> None:
        """Handle ``event``, raising on failure."""