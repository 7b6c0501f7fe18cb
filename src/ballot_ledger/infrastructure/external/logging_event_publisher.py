"""Event publisher that writes each notification as a structured log record."""

from ballot_ledger.common.logging import get_logger
from ballot_ledger.domain.events import DomainEvent


logger = get_logger("ballot_ledger.events")


class LoggingEventPublisher:
    """Publishes domain events to the structured log."""

    def publish(self, event: DomainEvent) -> None:
        logger.info("ledger_event", event_type=event.event_name, **event.to_dict())


class InMemoryEventPublisher:
    """Keeps published events in memory."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()
