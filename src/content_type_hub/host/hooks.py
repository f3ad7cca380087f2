"""
Hook bus for host lifecycle events.

Actions run callbacks for their side effects; filters thread a value through
each callback and return the final value. Callbacks run in ascending priority,
ties in subscription order. ``accepted_args`` caps how many positional
arguments a callback receives.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from content_type_hub.domain.content_types.protocols import DEFAULT_PRIORITY
from content_type_hub.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(order=True)
class Subscription:
    priority: int
    sequence: int
    callback: Callable[..., Any] = field(compare=False)
    accepted_args: int = field(default=1, compare=False)

    def invoke(self, *args: Any) -> Any:
        return self.callback(*args[: self.accepted_args])


class HookBus:
    """Named events with prioritized subscribers."""

    def __init__(self) -> None:
        self._subscriptions: Dict[str, List[Subscription]] = {}
        self._sequence = itertools.count()

    def subscribe(
        self,
        event: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        if not callable(callback):
            raise TypeError(f"Hook callback for '{event}' must be callable")
        subscription = Subscription(
            priority=priority,
            sequence=next(self._sequence),
            callback=callback,
            accepted_args=max(accepted_args, 0),
        )
        subscribers = self._subscriptions.setdefault(event, [])
        subscribers.append(subscription)
        subscribers.sort()
        logger.debug("hooks.subscribed", hook_event=event, priority=priority)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> bool:
        """Remove every subscription of ``callback`` on ``event``."""
        subscribers = self._subscriptions.get(event, [])
        remaining = [s for s in subscribers if s.callback != callback]
        removed = len(remaining) != len(subscribers)
        if remaining:
            self._subscriptions[event] = remaining
        else:
            self._subscriptions.pop(event, None)
        return removed

    def has(self, event: str, callback: Callable[..., Any] | None = None) -> bool:
        subscribers = self._subscriptions.get(event, [])
        if callback is None:
            return bool(subscribers)
        return any(s.callback == callback for s in subscribers)

    def count(self, event: str) -> int:
        return len(self._subscriptions.get(event, []))

    def dispatch(self, event: str, *args: Any) -> None:
        for subscription in list(self._subscriptions.get(event, [])):
            subscription.invoke(*args)

    def filter(self, event: str, value: Any, *args: Any) -> Any:
        for subscription in list(self._subscriptions.get(event, [])):
            value = subscription.invoke(value, *args)
        return value

    def events(self) -> List[str]:
        return list(self._subscriptions)
