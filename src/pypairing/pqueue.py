"""
Priority queues built on the pairing heap engine.

These classes only fix the configuration of ``PairingHeap`` (ordering policy and
change-priority mode) and add the conventional names for its operations.
"""

from typing import TypeVar

from .heap import PairingHeap
from .order import Order, max_order, min_order

T = TypeVar("T")
P = TypeVar("P")


class MinPriorityQueue(PairingHeap[T, P]):
    """Priority queue where the smallest priority is the most prioritary."""

    def __init__(self):
        super().__init__(min_order)

    decrease_key = PairingHeap.change_priority
    min = PairingHeap.peek
    extract_min = PairingHeap.pop


class MaxPriorityQueue(PairingHeap[T, P]):
    """Priority queue where the largest priority is the most prioritary."""

    def __init__(self):
        super().__init__(max_order)

    increase_key = PairingHeap.change_priority
    max = PairingHeap.peek
    extract_max = PairingHeap.pop


class SafeChangePriorityQueue(PairingHeap[T, P]):
    """
    Priority queue whose ``change_priority`` accepts any new priority.

    Promotions keep the O(1) amortized path; demotions cost a delete and a push,
    O(log n) amortized.
    """

    def __init__(self, order: Order = min_order):
        super().__init__(order, safe_change_priority=True)
