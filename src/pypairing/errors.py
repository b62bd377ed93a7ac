"""
Exceptions and warnings raised by the pairing heaps.

Every error is raised before the heap is touched, so a failed call leaves the
heap exactly as it was.
"""


class PairingHeapError(Exception):
    """Base class for all pairing heap errors."""
    pass


class DuplicateElementError(PairingHeapError, ValueError):
    """Element pushed while already present in the heap."""
    pass


class UnknownElementError(PairingHeapError, KeyError):
    """Element looked up, changed or deleted while absent from the heap."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable instead
        return Exception.__str__(self)


class InvalidPromotionError(PairingHeapError, ValueError):
    """Priority change towards a less prioritary value on a strict heap."""
    pass


class EmptyHeapError(PairingHeapError, IndexError):
    """Pop or strict peek on an empty heap."""
    pass


class SelfMergeError(PairingHeapError, ValueError):
    """Heap merged with itself."""
    pass


class OrderingMismatchWarning(UserWarning):
    """Warning about merging heaps built with different ordering policies."""
    pass
