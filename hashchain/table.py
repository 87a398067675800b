from dataclasses import dataclass, field
from typing import Iterator

from .hashing import hash_string
from .shared import trace


class DuplicateKey(KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"duplicate key: {self.key!r}"


class NotFound(KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class InvalidCapacity(ValueError):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"capacity must be positive, got {capacity}")
        self.capacity = capacity


class MutatedDuringIteration(RuntimeError):
    pass


@dataclass(eq=False)
class Entry:
    key: str
    value: str
    next: "Entry | None" = field(default=None, repr=False)


@dataclass(eq=False, repr=False)
class HashMap:
    """Fixed-capacity hash map with separate chaining.

    Every bucket slot owns the head of a singly linked chain; every entry
    owns its successor. New entries are appended at the chain tail, so a
    chain is in insertion order. The bucket count never changes.

    Adding or deleting while an iterator over the map is suspended is an
    error: the iterator raises MutatedDuringIteration on its next step.
    """

    capacity: int
    size: int
    buckets: list[Entry | None]
    _mod_count: int

    def __init__(self, capacity: int) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity <= 0:
            raise InvalidCapacity(capacity)

        self.capacity = capacity
        self.size = 0
        self.buckets = [None for _ in range(capacity)]
        self._mod_count = 0

    def index_of(self, key: str) -> int:
        return hash_string(key) % self.capacity

    def add(self, key: str, value: str):
        index = self.index_of(key)
        entry = self.buckets[index]

        if entry is None:
            self.buckets[index] = Entry(key, value)
            self._added(key, index)
            return

        while True:
            if entry.key == key:
                trace("add {0!r} -> bucket {1:d}: duplicate\n", key, index)
                raise DuplicateKey(key)
            if entry.next is None:
                entry.next = Entry(key, value)
                self._added(key, index)
                return
            entry = entry.next

    def _added(self, key: str, index: int):
        self.size += 1
        self._mod_count += 1
        trace("add {0!r} -> bucket {1:d}: ok\n", key, index)

    def get(self, key: str) -> str:
        index = self.index_of(key)
        entry = self.buckets[index]

        while entry is not None:
            if entry.key == key:
                trace("get {0!r} -> bucket {1:d}: hit\n", key, index)
                return entry.value
            entry = entry.next

        trace("get {0!r} -> bucket {1:d}: miss\n", key, index)
        raise NotFound(key)

    def delete(self, key: str):
        index = self.index_of(key)
        prev: Entry | None = None
        entry = self.buckets[index]

        while entry is not None:
            if entry.key == key:
                if prev is None:
                    self.buckets[index] = entry.next
                else:
                    prev.next = entry.next
                entry.next = None

                self.size -= 1
                self._mod_count += 1
                trace("del {0!r} -> bucket {1:d}: ok\n", key, index)
                return
            prev, entry = entry, entry.next

        trace("del {0!r} -> bucket {1:d}: miss\n", key, index)
        raise NotFound(key)

    def chain(self, index: int) -> Iterator[Entry]:
        entry = self.buckets[index]
        while entry is not None:
            yield entry
            entry = entry.next

    def chain_length(self, index: int) -> int:
        return sum(1 for _ in self.chain(index))

    def items(self) -> Iterator[tuple[str, str]]:
        mod_count = self._mod_count
        for index in range(self.capacity):
            entry = self.buckets[index]
            while entry is not None:
                yield entry.key, entry.value
                if self._mod_count != mod_count:
                    raise MutatedDuringIteration("map changed during iteration")
                entry = entry.next

    def keys(self) -> Iterator[str]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[str]:
        for _, value in self.items():
            yield value

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.items()

    def __getitem__(self, key: str) -> str:
        return self.get(key)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"HashMap(capacity={self.capacity}, size={self.size}, {{{pairs}}})"

    def __eq__(self, other: object) -> bool:
        # equal contents, regardless of chain order or history
        if not isinstance(other, HashMap):
            return NotImplemented
        if self.capacity != other.capacity or self.size != other.size:
            return False
        for key, value in self.items():
            found = other._find(key)
            if found is None or found.value != value:
                return False
        return True

    def __contains__(self, key: str) -> bool:
        return self._find(key) is not None

    def _find(self, key: str) -> Entry | None:
        entry = self.buckets[self.index_of(key)]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None
