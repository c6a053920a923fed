"""
Recency-ordered entry list for the LRU cache.

Entries live in an arena of node slots addressed by integer index. Links
between nodes are slot indices rather than object references, so the arena
is the only owner of every node. Position 0 of the logical order (the head)
is the most recently used entry; the tail is the least recently used one.
"""

import itertools
from typing import Generic, Iterator, List, NamedTuple, Optional, Tuple, TypeVar

from lrukit.exceptions import StaleHandleError

K = TypeVar('K')
V = TypeVar('V')

NIL = -1  # list boundary


class Handle(NamedTuple):
    """
    Opaque reference to a node in a RecencyList.

    Attributes:
        slot: Arena index of the node
        generation: Stamp of the node the handle was issued for
    """
    slot: int
    generation: int


class _Node:
    __slots__ = ('key', 'value', 'prev', 'next', 'generation')

    def __init__(self):
        self.key = None
        self.value = None
        self.prev = NIL
        self.next = NIL
        self.generation = NIL  # NIL while the slot is free


class RecencyList(Generic[K, V]):
    """
    Doubly linked list of (key, value) entries backed by a slot arena.

    Every node pushed gets a generation number that is never reused for
    the lifetime of the list, so a handle to a removed node can never
    resolve to whatever later occupies the same slot.
    """

    def __init__(self):
        self._nodes: List[_Node] = []
        self._free: List[int] = []
        self._head = NIL
        self._tail = NIL
        self._size = 0
        self._generations = itertools.count()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs from head (MRU) to tail (LRU)."""
        slot = self._head
        while slot != NIL:
            node = self._nodes[slot]
            yield node.key, node.value
            slot = node.next

    def __repr__(self) -> str:
        return f"RecencyList(size={self._size}, slots={len(self._nodes)})"

    def _resolve(self, handle: Handle) -> _Node:
        slot, generation = handle
        if 0 <= slot < len(self._nodes):
            node = self._nodes[slot]
            if node.generation == generation:
                return node
        raise StaleHandleError(handle)

    def _allocate(self) -> int:
        if self._free:
            return self._free.pop()
        self._nodes.append(_Node())
        return len(self._nodes) - 1

    def _release(self, slot: int) -> None:
        node = self._nodes[slot]
        node.key = None
        node.value = None
        node.prev = NIL
        node.next = NIL
        node.generation = NIL
        self._free.append(slot)

    def _unlink(self, node: _Node) -> None:
        if node.prev == NIL:
            self._head = node.next
        else:
            self._nodes[node.prev].next = node.next

        if node.next == NIL:
            self._tail = node.prev
        else:
            self._nodes[node.next].prev = node.prev

        node.prev = NIL
        node.next = NIL

    def _link_head(self, slot: int, node: _Node) -> None:
        node.prev = NIL
        node.next = self._head
        if self._head == NIL:
            self._tail = slot
        else:
            self._nodes[self._head].prev = slot
        self._head = slot

    def push_head(self, key: K, value: V) -> Handle:
        """
        Insert a new entry as the most recently used one.

        Args:
            key: Entry key
            value: Entry value

        Returns:
            Handle: Reference to the new node
        """
        slot = self._allocate()
        node = self._nodes[slot]
        node.key = key
        node.value = value
        node.generation = next(self._generations)
        self._link_head(slot, node)
        self._size += 1
        return Handle(slot, node.generation)

    def remove(self, handle: Handle) -> Tuple[K, V]:
        """
        Remove the node referenced by ``handle``.

        Returns:
            Tuple[K, V]: The removed entry

        Raises:
            StaleHandleError: If the handle does not refer to a live node
        """
        node = self._resolve(handle)
        entry = (node.key, node.value)
        self._unlink(node)
        self._release(handle.slot)
        self._size -= 1
        return entry

    def move_to_head(self, handle: Handle) -> None:
        """Promote the referenced node to most recently used."""
        node = self._resolve(handle)
        if self._head == handle.slot:
            return
        self._unlink(node)
        self._link_head(handle.slot, node)

    def peek_tail(self) -> Optional[Handle]:
        """Return a handle to the least recently used node, or None if empty."""
        if self._tail == NIL:
            return None
        return Handle(self._tail, self._nodes[self._tail].generation)

    def pop_tail(self) -> Tuple[K, V]:
        """
        Remove and return the least recently used entry.

        Raises:
            IndexError: If the list is empty
        """
        handle = self.peek_tail()
        if handle is None:
            raise IndexError("pop from an empty RecencyList")
        return self.remove(handle)

    def key_of(self, handle: Handle) -> K:
        return self._resolve(handle).key

    def value_of(self, handle: Handle) -> V:
        return self._resolve(handle).value

    def set_value(self, handle: Handle, value: V) -> None:
        self._resolve(handle).value = value

    def clear(self) -> None:
        """Drop every node. Handles issued before the call become stale."""
        self._nodes = []
        self._free = []
        self._head = NIL
        self._tail = NIL
        self._size = 0
