"""
In-process event bus for post-commit side effects.

Handlers run after the publishing use case has committed. A failing handler
is logged and never propagates to the publisher, so a side effect cannot turn
a committed write into a failed request.
"""

import logging
from collections import defaultdict
from typing import Awaitable, Callable, Dict, List, Type

from src.domain.events import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBus:
    def __init__(self):
        self._subscribers: Dict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        self._subscribers[event_type].append(handler)

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[EventHandler]:
        return list(self._subscribers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Deliver event to every subscriber; handler failures are logged and dropped."""
        handlers = self.handlers_for(type(event))
        logger.debug(f"Publishing {type(event).__name__} to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                await handler(event)
            except Exception:
                logger.exception(
                    f"Handler for {type(event).__name__} failed (club_id={event.club_id})"
                )
