"""
PyPairing: addressable priority queues backed by pairing heaps.
"""

__version__ = "0.1.0"

from .errors import (
    DuplicateElementError,
    EmptyHeapError,
    InvalidPromotionError,
    OrderingMismatchWarning,
    PairingHeapError,
    SelfMergeError,
    UnknownElementError,
)
from .heap import PairingHeap, SimplePairingHeap
from .order import Order, key_order, max_order, min_order
from .pqueue import MaxPriorityQueue, MinPriorityQueue, SafeChangePriorityQueue

__all__ = [
    "PairingHeap",
    "SimplePairingHeap",
    "MinPriorityQueue",
    "MaxPriorityQueue",
    "SafeChangePriorityQueue",
    "Order",
    "min_order",
    "max_order",
    "key_order",
    "PairingHeapError",
    "DuplicateElementError",
    "UnknownElementError",
    "InvalidPromotionError",
    "EmptyHeapError",
    "SelfMergeError",
    "OrderingMismatchWarning",
]
