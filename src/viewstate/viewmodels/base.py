"""
View Model Base Classes

⚡ Observable Objects:
``ObservableObject`` owns a ``ChangeNotifier`` and a declarative table of
dependent properties. Raising a change for one property also raises the
properties that depend on it, so the dependency graph lives in one
inspectable place instead of being scattered across setters.

    class CustomerViewModel(WorkspaceViewModel):
        property_dependencies = {"customer_type": ("last_name",)}
"""

import logging
from collections import deque
from typing import ClassVar, Dict, Optional, Tuple

from ..config import get_config
from ..core.errors import UnknownPropertyError
from ..core.resources import Strings
from ..core.signals import ChangeNotifier, Signal
from .command import RelayCommand

logger = logging.getLogger(__name__)

class ObservableObject:
    """Base class for objects that report property changes."""

    # property name -> names whose value or validity depends on it
    property_dependencies: ClassVar[Dict[str, Tuple[str, ...]]] = {}

    def __init__(self):
        self.property_changed = ChangeNotifier(self)

    @classmethod
    def dependent_properties(cls, property_name: str) -> Tuple[str, ...]:
        """
        Get every property invalidated by a change to ``property_name``.

        Dependencies are followed transitively, breadth first. Each name
        appears once and the changed property itself is excluded.
        """
        ordered = []
        seen = {property_name}
        pending = deque(cls.property_dependencies.get(property_name, ()))

        while pending:
            name = pending.popleft()
            if name in seen:
                continue
            seen.add(name)
            ordered.append(name)
            pending.extend(cls.property_dependencies.get(name, ()))

        return tuple(ordered)

    def on_property_changed(self, property_name: str) -> None:
        """Notify ``property_name`` and then each of its dependents."""
        self.verify_property_name(property_name)
        self.property_changed.notify(property_name)

        for dependent in self.dependent_properties(property_name):
            self.verify_property_name(dependent)
            self.property_changed.notify(dependent)

    def verify_property_name(self, property_name: str) -> None:
        """
        Check that a property with this name exists on the object's class.

        Only active when ``verify_property_names`` is configured, which is
        the case in development and testing.

        Raises:
            UnknownPropertyError: no such property
        """
        if not get_config().verify_property_names:
            return

        if not hasattr(type(self), property_name):
            raise UnknownPropertyError(property_name, type(self).__name__)

class ViewModelBase(ObservableObject):
    """
    Base class for all view models.

    Provides a display name for the UI and a disposal hook.
    """

    def __init__(self, display_name: Optional[str] = None):
        super().__init__()
        self._display_name = display_name

    @property
    def display_name(self) -> Optional[str]:
        """User-friendly name of this object."""
        return self._display_name

    @display_name.setter
    def display_name(self, value: Optional[str]):
        if value == self._display_name:
            return
        self._display_name = value
        self.on_property_changed("display_name")

    def dispose(self) -> None:
        """Release subscriptions held by this view model."""
        logger.debug(f"Disposing {type(self).__name__} ({self.display_name})")
        self.on_dispose()

    def on_dispose(self) -> None:
        """Child classes override this to unhook events."""

class WorkspaceViewModel(ViewModelBase):
    """A view model that the UI can close."""

    def __init__(self, display_name: Optional[str] = None):
        super().__init__(display_name)
        self.request_close = Signal("request_close")
        self._close_command: Optional[RelayCommand] = None

    @property
    def close_command(self) -> RelayCommand:
        """Command that asks the owner of this workspace to close it."""
        if self._close_command is None:
            self._close_command = RelayCommand(self.on_request_close,
                                               name=Strings.WORKSPACE_VIEW_MODEL_CLOSE)
        return self._close_command

    def on_request_close(self) -> None:
        self.request_close.emit(self)

# Export main components
__all__ = ["ObservableObject", "ViewModelBase", "WorkspaceViewModel"]
