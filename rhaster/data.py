"""Small data containers: blackboard, deferred deleter, sparse set, locked resource."""

from __future__ import annotations

import copy
import threading
from contextlib import contextmanager
from typing import Any, Generic, Hashable, Iterator, MutableMapping, TypeVar

from rhaster.hashing import UID, type_hash

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


class Blackboard:
    """Typed key-value store keyed by UID."""

    def __init__(self) -> None:
        self._fields: dict[UID, tuple[int, Any]] = {}

    def store(self, uid: UID, data: Any) -> bool:
        """Add a field; return False if the field already exists."""
        if uid in self._fields:
            return False
        self._fields[uid] = (type_hash(type(data)), data)
        return True

    def edit(self, uid: UID, data: Any) -> bool:
        """Change a field; return False if it is missing or of another type."""
        field = self._fields.get(uid)
        if field is None or field[0] != type_hash(type(data)):
            return False
        self._fields[uid] = (field[0], data)
        return True

    def retrieve(self, uid: UID, data_type: type) -> Any:
        """Return the field's data.

        Raises KeyError if the field is missing and TypeError if it holds
        another type.
        """
        try:
            stored_hash, data = self._fields[uid]
        except KeyError:
            raise KeyError(uid) from None
        if stored_hash != type_hash(data_type):
            raise TypeError(f"field {uid!r} does not hold {data_type.__name__}")
        return data

    def __contains__(self, uid: object) -> bool:
        return uid in self._fields

    def __len__(self) -> int:
        return len(self._fields)


class Deleter(Generic[T]):
    """Collects elements to remove later from a container, by identity."""

    def __init__(self) -> None:
        self._marked: dict[int, T] = {}

    def mark_for_deletion(self, element: T) -> None:
        self._marked[id(element)] = element

    def _is_marked(self, element: object) -> bool:
        return id(element) in self._marked

    def cleanup(self, elements: list) -> None:
        """Remove marked elements from a list in place and forget the marks."""
        elements[:] = [e for e in elements if not self._is_marked(e)]
        self._marked.clear()

    def cleanup_mapping(self, mapping: MutableMapping) -> None:
        """Remove entries whose value is marked and forget the marks."""
        for key in [k for k, v in mapping.items() if self._is_marked(v)]:
            del mapping[key]
        self._marked.clear()

    def is_cleanup_needed(self) -> bool:
        return bool(self._marked)


class SparseSet(Generic[H]):
    """Set with dense storage and O(1) swap-removal."""

    def __init__(self) -> None:
        self._elements: list[H] = []
        self._index: dict[H, int] = {}

    def insert(self, element: H) -> None:
        if element in self._index:
            return
        self._index[element] = len(self._elements)
        self._elements.append(element)

    def remove(self, element: H) -> None:
        idx = self._index.get(element)
        if idx is None:
            return
        last = self._elements[-1]
        self._elements[idx] = last
        self._index[last] = idx
        self._elements.pop()
        del self._index[element]

    def clear(self) -> None:
        self._elements.clear()
        self._index.clear()

    def data(self) -> tuple:
        """Return the elements in storage order."""
        return tuple(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._index

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[H]:
        return iter(tuple(self._elements))


class SafeResource(Generic[T]):
    """A value guarded by a mutex."""

    def __init__(self, resource: T) -> None:
        self._guard = threading.Lock()
        self._resource = resource

    @contextmanager
    def lock(self) -> Iterator[T]:
        """Hold the mutex and yield the guarded value."""
        with self._guard:
            yield self._resource

    def peek(self) -> T:
        """Return the guarded value without locking."""
        return self._resource

    def set(self, value: T) -> None:
        with self._guard:
            self._resource = value

    def clone(self) -> T:
        """Return an independent copy of the guarded value."""
        with self._guard:
            return copy.deepcopy(self._resource)