"""
Observable Collection

An ordered list that reports membership changes through its
``collection_changed`` signal. Subscribers receive ``(collection,
CollectionChangedEventArgs)`` after the list has been updated.

``collection_changing`` carries the same arguments before the list is
touched. A subscriber that raises vetoes the change.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..core.signals import Signal

T = TypeVar("T")

class CollectionChangeAction(Enum):
    """Kinds of membership change"""
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    RESET = "reset"

@dataclass(frozen=True)
class CollectionChangedEventArgs:
    """Describes one membership change."""
    action: CollectionChangeAction
    new_items: Tuple = ()
    old_items: Tuple = ()
    index: Optional[int] = None

class ObservableCollection(Generic[T]):
    """
    List with change notification.

    Membership tests and removal compare items by identity.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: List[T] = list(items or ())
        self.collection_changing = Signal("collection_changing")
        self.collection_changed = Signal("collection_changed")

    def append(self, item: T) -> None:
        self.insert(len(self._items), item)

    def extend(self, items: Iterable[T]) -> None:
        for item in list(items):
            self.append(item)

    def insert(self, index: int, item: T) -> None:
        size = len(self._items)
        if index < 0:
            index = max(0, size + index)
        index = min(index, size)
        args = CollectionChangedEventArgs(CollectionChangeAction.ADD, new_items=(item,), index=index)
        self.collection_changing.emit(self, args)
        self._items.insert(index, item)
        self._notify(args)

    def remove(self, item: T) -> None:
        index = self._index_of(item)
        if index < 0:
            raise ValueError(f"{item!r} is not in the collection")
        self.pop(index)

    def pop(self, index: int = -1) -> T:
        if index < 0:
            index += len(self._items)
        item = self._items[index]
        args = CollectionChangedEventArgs(CollectionChangeAction.REMOVE, old_items=(item,), index=index)
        self.collection_changing.emit(self, args)
        del self._items[index]
        self._notify(args)
        return item

    def clear(self) -> None:
        args = CollectionChangedEventArgs(CollectionChangeAction.RESET, old_items=tuple(self._items))
        self.collection_changing.emit(self, args)
        self._items.clear()
        self._notify(args)

    def __setitem__(self, index: int, item: T) -> None:
        if index < 0:
            index += len(self._items)
        old_item = self._items[index]
        args = CollectionChangedEventArgs(CollectionChangeAction.REPLACE, new_items=(item,),
                                          old_items=(old_item,), index=index)
        self.collection_changing.emit(self, args)
        self._items[index] = item
        self._notify(args)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return self._index_of(item) >= 0

    def __repr__(self):
        return f"ObservableCollection({self._items!r})"

    def _index_of(self, item: object) -> int:
        for index, existing in enumerate(self._items):
            if existing is item:
                return index
        return -1

    def _notify(self, args: CollectionChangedEventArgs) -> None:
        self.collection_changed.emit(self, args)

__all__ = ["ObservableCollection", "CollectionChangedEventArgs", "CollectionChangeAction"]
