"""
Pairing heap engines.

``PairingHeap`` addresses elements by identity: it keeps a dict from element to
tree node, so priorities of arbitrary elements can be changed and elements can be
deleted without searching the tree. ``SimplePairingHeap`` drops the index, which
allows repeated elements and O(1) melding of two heaps but gives up
change-priority and delete.

Neither class is thread-safe.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .errors import (
    DuplicateElementError,
    EmptyHeapError,
    InvalidPromotionError,
    OrderingMismatchWarning,
    SelfMergeError,
    UnknownElementError,
)
from .order import Order, min_order
from .tree import Node, cut, is_heap, meld, merge_pairs, to_string, walk

T = TypeVar("T")
P = TypeVar("P")

# Marks an omitted priority; None is a legitimate priority for custom orders
_MISSING: Any = object()


class _BaseHeap(Generic[T, P]):
    """Root handling, peeking, popping and traversal shared by both engines."""

    def __init__(self, order: Order = min_order):
        self._root: Optional[Node[T, P]] = None
        self._order = order

    @property
    def order(self) -> Order:
        """Ordering policy of this heap."""
        return self._order

    def __len__(self) -> int:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[T]:
        return self.each()

    def __str__(self) -> str:
        return self.to_string()

    def size(self) -> int:
        """Return the number of elements in the heap."""
        return len(self)

    def is_empty(self) -> bool:
        """Check if the heap is empty."""
        return self._root is None

    def any(self) -> bool:
        """Check if the heap holds at least one element."""
        return self._root is not None

    def peek(self) -> Optional[T]:
        """Return the most prioritary element, or None if the heap is empty."""
        return self._root.element if self._root is not None else None

    def peek_priority(self) -> Optional[P]:
        """Return the priority of the most prioritary element, or None if empty."""
        return self._root.priority if self._root is not None else None

    def peek_with_priority(self) -> tuple[Optional[T], Optional[P]]:
        """Return ``(element, priority)`` of the top, or ``(None, None)`` if empty."""
        if self._root is None:
            return None, None
        return self._root.element, self._root.priority

    def top(self) -> T:
        """
        Return the most prioritary element without removing it.

        Raises:
            EmptyHeapError: If the heap is empty
        """
        if self._root is None:
            raise EmptyHeapError("peek at an empty heap")
        return self._root.element

    def pop_with_priority(self) -> tuple[T, P]:
        """
        Remove the most prioritary element.

        The root's children are melded back together with the two-pass
        pairing merge. Amortized O(log n).

        Returns:
            Tuple of the removed element and its priority

        Raises:
            EmptyHeapError: If the heap is empty
        """
        root = self._root
        if root is None:
            raise EmptyHeapError("pop from an empty heap")

        self._forget(root)
        self._root = merge_pairs(root.first_child, self._order)
        root.first_child = None
        return root.element, root.priority

    def pop(self) -> T:
        """Remove and return the most prioritary element."""
        return self.pop_with_priority()[0]

    def pop_priority(self) -> P:
        """Remove the most prioritary element and return its priority."""
        return self.pop_with_priority()[1]

    dequeue = pop

    def each(self) -> Iterator[T]:
        """
        Iterate over all elements in unspecified order.

        Each call starts a fresh traversal. Mutating the heap while iterating
        gives undefined results.
        """
        return (node.element for node in walk(self._root))

    def each_with_priority(self) -> Iterator[tuple[T, P]]:
        """Iterate over all ``(element, priority)`` pairs in unspecified order."""
        return ((node.element, node.priority) for node in walk(self._root))

    def for_each(self, f: Callable[[T, P], None]) -> None:
        """
        Apply function to each element in the heap.

        Args:
            f: Function to apply to each (element, priority) pair
        """
        for node in walk(self._root):
            f(node.element, node.priority)

    def is_heap(self) -> bool:
        """
        Verify heap property (for testing).

        Returns:
            True if heap is in valid state
        """
        return is_heap(self._root, self._order)

    def to_string(self, selector: Callable[[T], str] = str) -> str:
        """
        Convert heap to string representation.

        Args:
            selector: Function to convert elements to strings

        Returns:
            String representation of the tree
        """
        return to_string(self._root, selector)

    def _forget(self, node: Node[T, P]) -> None:
        raise NotImplementedError


class PairingHeap(_BaseHeap[T, P]):
    """
    Addressable priority queue backed by a pairing heap.

    Elements must be hashable and are unique: two pushes of equal elements are
    rejected. Priorities are compared only through the ordering policy.

    Provides O(1) push and peek, O(log n) amortized pop and delete, and
    o(log n) amortized change-priority.
    """

    def __init__(self, order: Order = min_order, *, safe_change_priority: bool = False):
        """
        Initialize heap.

        Args:
            order: Ordering policy, ``order(a, b)`` is True when priority ``a``
                is at least as prioritary as ``b``. Min-heap by default.
            safe_change_priority: If True, ``change_priority`` also accepts
                demotions and carries them out as delete followed by push
        """
        super().__init__(order)
        self._nodes: dict[T, Node[T, P]] = {}
        self._safe_change_priority = safe_change_priority

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, element: object) -> bool:
        return element in self._nodes

    def include(self, element: T) -> bool:
        """Check if the element is in the heap."""
        return element in self._nodes

    def push(self, element: T, priority: P = _MISSING) -> PairingHeap[T, P]:
        """
        Push element onto the heap. O(1).

        Args:
            element: Element to push
            priority: Priority of the element; the element itself if omitted

        Returns:
            The heap itself

        Raises:
            DuplicateElementError: If the element is already in the heap
        """
        if element in self._nodes:
            raise DuplicateElementError(f"element {element!r} is already in the heap")
        if priority is _MISSING:
            priority = element

        node = Node(element, priority)
        # index only once the comparison in meld has succeeded
        self._root = meld(self._root, node, self._order)
        self._nodes[element] = node
        return self

    enqueue = push

    def get_priority(self, element: T) -> P:
        """
        Return the priority of an element.

        Raises:
            UnknownElementError: If the element is not in the heap
        """
        node = self._nodes.get(element)
        if node is None:
            raise UnknownElementError(f"element {element!r} is not in the heap")
        return node.priority

    def get_priority_if_exists(self, element: T) -> tuple[bool, Optional[P]]:
        """Return ``(True, priority)`` for a present element, else ``(False, None)``."""
        node = self._nodes.get(element)
        if node is None:
            return False, None
        return True, node.priority

    def change_priority(self, element: T, priority: P) -> PairingHeap[T, P]:
        """
        Change the priority of an element.

        A promotion updates the node in place when the parent still dominates
        it; otherwise the node is cut out with its subtree and melded with the
        root. A demotion is rejected, unless the heap was built with
        ``safe_change_priority``, in which case the element is deleted and
        pushed again.

        Args:
            element: Element whose priority changes
            priority: New priority

        Returns:
            The heap itself

        Raises:
            UnknownElementError: If the element is not in the heap
            InvalidPromotionError: If the new priority is less prioritary than
                the current one on a strict heap
        """
        node = self._nodes.get(element)
        if node is None:
            raise UnknownElementError(f"element {element!r} is not in the heap")

        if not self._order(priority, node.priority):
            if not self._safe_change_priority:
                raise InvalidPromotionError(
                    f"priority of {element!r} cannot change from {node.priority!r} "
                    f"to the less prioritary {priority!r}"
                )
            self.delete(element)
            return self.push(element, priority)

        node.priority = priority
        parent = node.parent
        if parent is None or self._order(parent.priority, priority):
            return self

        cut(node)
        self._root = meld(node, self._root, self._order)
        return self

    def delete(self, element: T) -> PairingHeap[T, P]:
        """
        Remove an arbitrary element. Amortized O(log n).

        Raises:
            UnknownElementError: If the element is not in the heap
        """
        node = self._nodes.pop(element, None)
        if node is None:
            raise UnknownElementError(f"element {element!r} is not in the heap")

        if node.parent is None:
            self._root = merge_pairs(node.first_child, self._order)
        else:
            cut(node)
            subtree = merge_pairs(node.first_child, self._order)
            self._root = meld(subtree, self._root, self._order)
        node.first_child = None
        return self

    def clear(self) -> None:
        """Remove all elements."""
        self._root = None
        self._nodes.clear()

    def _forget(self, node: Node[T, P]) -> None:
        del self._nodes[node.element]


class SimplePairingHeap(_BaseHeap[T, P]):
    """
    Pairing heap of anonymous elements.

    Elements need not be hashable and may repeat. There is no change-priority
    or delete, but two heaps can be melded in O(1) with ``merge``.
    """

    def __init__(self, order: Order = min_order):
        super().__init__(order)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def push(self, element: T, priority: P = _MISSING) -> SimplePairingHeap[T, P]:
        """
        Push element onto the heap. O(1).

        Args:
            element: Element to push
            priority: Priority of the element; the element itself if omitted

        Returns:
            The heap itself
        """
        if priority is _MISSING:
            priority = element
        self._root = meld(self._root, Node(element, priority), self._order)
        self._size += 1
        return self

    enqueue = push

    def merge(self, other: SimplePairingHeap[T, P]) -> SimplePairingHeap[T, P]:
        """
        Move every element of ``other`` into this heap. O(1).

        ``other`` is left empty. The ordering policy of this heap is kept; a
        heap built with a different policy triggers ``OrderingMismatchWarning``.

        Args:
            other: Heap to absorb

        Returns:
            The heap itself

        Raises:
            SelfMergeError: If ``other`` is this heap
            TypeError: If ``other`` is not a ``SimplePairingHeap``
        """
        if other is self:
            raise SelfMergeError("cannot merge a heap with itself")
        if not isinstance(other, SimplePairingHeap):
            raise TypeError(f"cannot merge {type(other).__name__} into SimplePairingHeap")
        if other._order is not self._order:
            warnings.warn(
                "Merging heaps with different ordering policies; "
                "the merged heap keeps the receiver's policy.",
                OrderingMismatchWarning,
                stacklevel=2,
            )

        self._root = meld(self._root, other._root, self._order)
        self._size += other._size
        other._root = None
        other._size = 0
        return self

    def clear(self) -> None:
        """Remove all elements."""
        self._root = None
        self._size = 0

    def _forget(self, node: Node[T, P]) -> None:
        self._size -= 1
