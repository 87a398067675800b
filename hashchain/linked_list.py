from dataclasses import dataclass, field
from typing import Iterator


class EmptyList(IndexError):
    pass


@dataclass(eq=False)
class Node:
    value: str
    prev: "Node | None" = field(default=None, repr=False)
    next: "Node | None" = field(default=None, repr=False)


@dataclass(eq=False, repr=False)
class LinkedList:
    head: Node | None
    tail: Node | None
    length: int

    def __init__(self) -> None:
        self.head = None
        self.tail = None
        self.length = 0

    def append(self, value: str):
        node = Node(value, prev=self.tail)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self.length += 1

    def prepend(self, value: str):
        node = Node(value, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self.length += 1

    def pop(self) -> str:
        if self.tail is None:
            raise EmptyList("pop from empty list")
        return self._unlink(self.tail)

    def shift(self) -> str:
        if self.head is None:
            raise EmptyList("shift from empty list")
        return self._unlink(self.head)

    def get(self, index: int) -> str:
        return self._node_at(index).value

    def delete(self, index: int) -> str:
        return self._unlink(self._node_at(index))

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < self.length:
            raise IndexError(f"index {index} out of range for length {self.length}")

        # walk from whichever end is closer
        if index < self.length // 2:
            node = self.head
            for _ in range(index):
                node = node.next
        else:
            node = self.tail
            for _ in range(self.length - 1 - index):
                node = node.prev
        assert node is not None
        return node

    def _unlink(self, node: Node) -> str:
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next

        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev

        node.prev = node.next = None
        self.length -= 1
        return node.value

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[str]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self.length == other.length and list(self) == list(other)

    def __reversed__(self) -> Iterator[str]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev
