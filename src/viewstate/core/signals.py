"""
Change Notification - Synchronous Signals for View Models

🔄 Keeping the UI in Sync:
Every observable object owns a ``ChangeNotifier``. Setting a property fires
the notifier with the property's name, and every subscriber (bindings,
coordinators, commands) is called before the setter returns.

Key Features:
- Handlers run synchronously in subscription order
- Dispatch iterates over a snapshot, so handlers may subscribe or
  unsubscribe (themselves or others) while a notification is running
- No deduplication: a handler subscribed twice runs twice
- Handler exceptions propagate to whoever triggered the notification
"""

from typing import Any, Callable, List
import logging

logger = logging.getLogger(__name__)

PropertyChangedHandler = Callable[[Any, str], None]

class Signal:
    """
    Ordered list of callbacks invoked with the arguments passed to ``emit``.

    Used for every event in the package: property changes, repository
    additions, collection membership changes and command requery.
    """

    def __init__(self, name: str = "signal"):
        self.name = name
        self._handlers: List[Callable[..., None]] = []

    def subscribe(self, handler: Callable[..., None]) -> None:
        """Subscribe a handler; subscribing the same handler twice registers it twice."""
        self._handlers.append(handler)

    def unsubscribe(self, handler: Callable[..., None]) -> None:
        """
        Remove the most recent registration of a handler.

        Unknown handlers are ignored so teardown code can run more than once.
        """
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return

    def emit(self, *args: Any) -> None:
        """Invoke every handler subscribed at the time of the call."""
        if not self._handlers:
            return

        for handler in tuple(self._handlers):
            handler(*args)

    def clear(self) -> None:
        """Remove all subscribers."""
        self._handlers.clear()

    @property
    def subscriber_count(self) -> int:
        """Get the number of active subscribers."""
        return len(self._handlers)

    def __repr__(self):
        return f"Signal({self.name!r}, subscribers={len(self._handlers)})"

class ChangeNotifier(Signal):
    """
    Per-object property change notifier.

    Handlers receive ``(sender, property_name)``; the sender is the object
    that owns this notifier.
    """

    def __init__(self, sender: Any):
        super().__init__("property_changed")
        self.sender = sender

    def notify(self, property_name: str) -> None:
        """Tell every subscriber that ``property_name`` changed on the sender."""
        logger.debug(f"{type(self.sender).__name__}.{property_name} changed "
                     f"({self.subscriber_count} subscribers)")
        self.emit(self.sender, property_name)

# Export main components
__all__ = ["Signal", "ChangeNotifier", "PropertyChangedHandler"]
