"""
Profiling script for PyPairing heap performance analysis.

Compares a workload that promotes elements in place with change_priority against
one that pushes duplicate entries instead, and profiles bulk push/pop.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from pypairing import MinPriorityQueue, SafeChangePriorityQueue, SimplePairingHeap

N = 100_000


def create_workload(n):
    """Create shuffled odd elements and shuffled even promotion targets."""
    rng = np.random.default_rng(42)
    odd = rng.permutation(np.arange(1, n, 2)).tolist()
    even = rng.permutation(np.arange(0, n, 2)).tolist()
    return odd, even


def promoted_priority(element, target, n):
    return target if target < element else -(n - element)


def drain(heap):
    """Pop everything, returning the number of pops."""
    pops = 0
    while heap:
        heap.pop()
        pops += 1
    return pops


def profile_with_change_priority():
    """Push odd elements, promote each one, then pop everything."""
    odd, even = create_workload(N)
    queue = MinPriorityQueue()
    for element in odd:
        queue.push(element, element)
    for element, target in zip(odd, even):
        queue.change_priority(element, promoted_priority(element, target, N))
    peak = len(queue)
    return {"push": len(odd), "change_priority": len(odd), "pop": drain(queue)}, peak


def profile_without_change_priority():
    """Push odd elements plus one promoted copy each, then pop everything."""
    odd, even = create_workload(N)
    heap = SimplePairingHeap()
    for element in odd:
        heap.push(element)
    for element, target in zip(odd, even):
        heap.push(element)
        heap.push(promoted_priority(element, target, N))
    peak = len(heap)
    return {"push": 3 * len(odd), "pop": drain(heap)}, peak


def profile_safe_demotions():
    """Push elements and demote every one of them."""
    odd, _ = create_workload(N)
    queue = SafeChangePriorityQueue()
    for element in odd:
        queue.push(element, element)
    for element in odd:
        queue.change_priority(element, element + N)
    peak = len(queue)
    return {"push": len(odd), "change_priority": len(odd), "pop": drain(queue)}, peak


def profile_bulk_push_pop():
    """Push random float priorities and pop them all."""
    rng = np.random.default_rng(7)
    heap = SimplePairingHeap()
    for p in rng.random(N):
        heap.push(p)
    peak = len(heap)
    return {"push": N, "pop": drain(heap)}, peak


def run_scenario(name, func):
    """Profile one scenario and report its heap operations."""
    profiler = cProfile.Profile()
    start_time = time.perf_counter()
    profiler.enable()
    counts, peak = func()
    profiler.disable()
    elapsed = time.perf_counter() - start_time

    total = sum(counts.values())
    print(f"\n== {name}: {peak} elements at peak, {total} operations in {elapsed:.3f}s "
          f"({total / elapsed:,.0f} ops/s)")
    for op, count in counts.items():
        print(f"   {op:<16} {count:>8}")

    s = io.StringIO()
    # restrict the listing to the heap's own functions
    pstats.Stats(profiler, stream=s).sort_stats(SortKey.TIME).print_stats("pypairing", 8)
    print(s.getvalue())


def main():
    scenarios = [
        ("change_priority", profile_with_change_priority),
        ("duplicate pushes", profile_without_change_priority),
        ("safe demotions", profile_safe_demotions),
        ("bulk push/pop", profile_bulk_push_pop),
    ]
    for name, func in scenarios:
        run_scenario(name, func)


if __name__ == "__main__":
    main()
