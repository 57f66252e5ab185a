"""
Commands - Guarded Operations for the UI

🚀 Command Gating:
A ``RelayCommand`` pairs an operation with the predicate that decides
whether it may run. The predicate is evaluated on every query; nothing is
cached, so the answer always reflects current state.

Instead of a process-wide "requery everything" broadcast, each command
declares the notifications it depends on with ``watch()``. When one of them
fires, the command raises ``can_execute_changed`` and bound controls ask
``can_execute()`` again.

Example:
    save = RelayCommand(vm.save, lambda: vm.can_save)
    save.watch(vm.property_changed, "email", "first_name")
    save.can_execute_changed.subscribe(lambda cmd: button.set_enabled(cmd.can_execute()))
"""

import logging
from typing import Any, Callable, List, Optional, Tuple

from ..core.errors import ArgumentError, IllegalStateError
from ..core.resources import Strings
from ..core.signals import ChangeNotifier, Signal

logger = logging.getLogger(__name__)


class RelayCommand:
    """
    A command whose behavior is supplied by delegates.

    Args:
        execute: Operation to run
        can_execute: Guard; when omitted the command can always execute
        name: Name used in log messages and errors
    """

    def __init__(self,
                 execute: Callable[[], Any],
                 can_execute: Optional[Callable[[], bool]] = None,
                 name: Optional[str] = None):
        if execute is None:
            raise ArgumentError("execute")

        self._execute = execute
        self._can_execute = can_execute
        self.name = name or getattr(execute, "__name__", "command")
        self.can_execute_changed = Signal("can_execute_changed")
        self._watches: List[Tuple[ChangeNotifier, Callable[[Any, str], None]]] = []

    def can_execute(self) -> bool:
        """Evaluate the guard now."""
        if self._can_execute is None:
            return True
        return bool(self._can_execute())

    def execute(self) -> Any:
        """
        Run the operation after re-checking the guard.

        Raises:
            IllegalStateError: the guard is false
        """
        if not self.can_execute():
            logger.warning(f"Refused to execute {self.name}: guard is false")
            raise IllegalStateError(f"{Strings.COMMAND_EXCEPTION_CANNOT_EXECUTE}: {self.name}")
        return self._execute()

    def watch(self, notifier: ChangeNotifier, *property_names: str) -> 'RelayCommand':
        """
        Requery whenever ``notifier`` reports one of ``property_names``.

        With no names, every notification from ``notifier`` counts.
        """
        names = frozenset(property_names)

        def on_property_changed(sender, property_name):
            if not names or property_name in names:
                self.requery()

        notifier.subscribe(on_property_changed)
        self._watches.append((notifier, on_property_changed))
        return self

    def requery(self) -> None:
        """Tell listeners that ``can_execute()`` may return a different answer."""
        self.can_execute_changed.emit(self)

    def dispose(self) -> None:
        """Drop every subscription made by ``watch()``."""
        for notifier, handler in self._watches:
            notifier.unsubscribe(handler)
        self._watches.clear()

    def __repr__(self):
        return f"RelayCommand({self.name!r})"


__all__ = ["RelayCommand"]
