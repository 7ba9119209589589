from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

K = TypeVar("K")

__all__ = ["NULL", "NodeArena", "KeyList"]

NULL = -1
"""Handle value meaning "no node"."""


class NodeArena(Generic[K]):
    """
    A pool of doubly-linked list nodes addressed by integer handles.

    Nodes live in parallel lists indexed by their handle, so a handle stays
    valid for as long as the node is allocated, no matter how the lists that
    use it are relinked. Released handles are recycled by later allocations.
    """

    __slots__ = ("_keys", "_prev", "_next", "_free")

    def __init__(self) -> None:
        self._keys: List[Optional[K]] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._free: List[int] = []

    def allocate(self, key: K) -> int:
        if self._free:
            handle = self._free.pop()
            self._keys[handle] = key
            self._prev[handle] = NULL
            self._next[handle] = NULL
            return handle

        self._keys.append(key)
        self._prev.append(NULL)
        self._next.append(NULL)
        return len(self._keys) - 1

    def release(self, handle: int) -> None:
        # Drop the key reference so released nodes don't keep objects alive
        self._keys[handle] = None
        self._prev[handle] = NULL
        self._next[handle] = NULL
        self._free.append(handle)

    def key(self, handle: int) -> K:
        return self._keys[handle]  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._keys) - len(self._free)


class KeyList(Generic[K]):
    """
    Recency-ordered sequence of keys stored in a shared `NodeArena`.

    The front holds the most recently touched key, the back the least
    recently touched one. `push_front` returns the handle of the new node,
    which is all `remove` needs to unlink it in constant time.
    """

    __slots__ = ("_arena", "_head", "_tail", "_size")

    def __init__(self, arena: NodeArena[K]) -> None:
        self._arena = arena
        self._head = NULL
        self._tail = NULL
        self._size = 0

    def push_front(self, key: K) -> int:
        arena = self._arena
        handle = arena.allocate(key)

        arena._next[handle] = self._head
        if self._head == NULL:
            self._tail = handle
        else:
            arena._prev[self._head] = handle
        self._head = handle

        self._size += 1
        return handle

    def remove(self, handle: int) -> None:
        arena = self._arena
        prev, nxt = arena._prev[handle], arena._next[handle]

        if prev == NULL:
            self._head = nxt
        else:
            arena._next[prev] = nxt

        if nxt == NULL:
            self._tail = prev
        else:
            arena._prev[nxt] = prev

        arena.release(handle)
        self._size -= 1

    def back(self) -> K:
        if self._tail == NULL:
            raise IndexError("back from empty KeyList")
        return self._arena.key(self._tail)

    def pop_back(self) -> K:
        key = self.back()
        self.remove(self._tail)
        return key

    def __iter__(self) -> Iterator[K]:
        handle = self._head
        while handle != NULL:
            yield self._arena.key(handle)
            handle = self._arena._next[handle]

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
