"""Consumers that pull events from a fetcher and hand them to a processor."""

import logging
import time
from abc import ABC, abstractmethod

from readadviser.events import Event, Fetcher, Processor

logger = logging.getLogger(__name__)

_IDLE_DELAY_SECONDS = 1


class Consumer(ABC):
    """A long-running loop that consumes events."""

    @abstractmethod
    def start(self) -> None:
        """Run the consuming loop."""


class EventConsumer(Consumer):
    """Fetches batches of events and processes each of them, forever."""

    def __init__(self, fetcher: Fetcher, processor: Processor, batch_size: int) -> None:
        self.fetcher = fetcher
        self.processor = processor
        self.batch_size = batch_size

    def start(self) -> None:
        """Poll the fetcher endlessly; errors are logged and the loop goes on."""
        while True:
            try:
                events = self.fetcher.fetch(self.batch_size)
            except Exception as err:
                logger.error("[ERR] consumer: %s", err)
                continue
            if not events:
                time.sleep(_IDLE_DELAY_SECONDS)
                continue
            self._handle_events(events)

    def _handle_events(self, events: list[Event]) -> None:
        for event in events:
            logger.info("got new event: %s", event.text)
            try:
                self.processor.process(event)
            except Exception as err:
                logger.error("can't handle event: %s", err)