"""
Ordering policies for pairing heaps.

An ordering policy is a binary predicate ``order(a, b)`` that returns True when
priority ``a`` is at least as prioritary as priority ``b``. Ties are allowed; the
heap never assumes the relation is strict and only ever compares priorities
through the policy.
"""

import operator
from typing import Any, Callable, TypeVar

P = TypeVar("P")

Order = Callable[[Any, Any], bool]

# Smaller priorities come out first (default)
min_order: Order = operator.le

# Larger priorities come out first
max_order: Order = operator.ge


def key_order(key: Callable[[P], Any], reverse: bool = False) -> Order:
    """
    Build an ordering policy that compares projected priorities.

    Args:
        key: Function mapping a priority to a comparable value
        reverse: If True, larger projected values are more prioritary

    Returns:
        Ordering policy usable by any heap in this package
    """
    compare = operator.ge if reverse else operator.le

    def order(a: P, b: P) -> bool:
        return compare(key(a), key(b))

    return order
