"""
Pairing heap tree cells and the algorithms that restructure them.

A pairing heap is a multiway tree in heap order. Children of a node form a doubly
linked, non-circular sibling list whose head is ``parent.first_child``. Every
function here works on bare nodes and an ordering policy; bookkeeping such as the
identity index or the element count is left to the heap classes in ``heap.py``.

None of the algorithms recurse, so arbitrarily wide or deep trees are fine.
"""

from typing import Callable, Generic, Iterator, Optional, TypeVar

from .order import Order

T = TypeVar("T")
P = TypeVar("P")


class Node(Generic[T, P]):
    """
    Tree cell holding one (element, priority) pair.

    ``parent`` is set only while the node hangs below another node; the root and
    detached nodes have no parent.
    """

    __slots__ = ("element", "priority", "first_child", "parent", "prev_sibling", "next_sibling")

    def __init__(self, element: T, priority: P):
        self.element = element
        self.priority = priority
        self.first_child: Optional[Node[T, P]] = None
        self.parent: Optional[Node[T, P]] = None
        self.prev_sibling: Optional[Node[T, P]] = None
        self.next_sibling: Optional[Node[T, P]] = None

    def __repr__(self) -> str:
        return f"Node({self.element!r}, {self.priority!r})"

    def children(self) -> Iterator["Node[T, P]"]:
        """Iterate over the direct children, head first."""
        child = self.first_child
        while child is not None:
            yield child
            child = child.next_sibling


def meld(left: Optional[Node[T, P]], right: Optional[Node[T, P]], order: Order) -> Optional[Node[T, P]]:
    """
    Meld two trees into one.

    The root whose priority wins under ``order`` becomes the parent; on ties the
    left root wins. The other root becomes the head of the winner's child list.

    Args:
        left: Root of the first tree, or None
        right: Root of the second tree, or None
        order: Ordering policy

    Returns:
        Root of the melded tree, or None if both were None
    """
    if left is None:
        return right
    if right is None:
        return left

    if order(left.priority, right.priority):
        parent, child = left, right
    else:
        parent, child = right, left

    head = parent.first_child
    child.next_sibling = head
    if head is not None:
        head.prev_sibling = child
    child.prev_sibling = None
    child.parent = parent
    parent.first_child = child
    return parent


def merge_pairs(head: Optional[Node[T, P]], order: Order) -> Optional[Node[T, P]]:
    """
    Meld a whole sibling list into a single tree with the two-pass method.

    The first pass melds siblings pairwise from left to right, stacking the
    results (a trailing unpaired sibling is stacked as is). The second pass
    folds the stack from its top, so the pairs are combined from the last one
    back to the first. Both passes are loops.

    Args:
        head: First node of a sibling list, or None
        order: Ordering policy

    Returns:
        Detached root of the resulting tree, or None for an empty list
    """
    if head is None:
        return None

    stack: list[Node[T, P]] = []
    current = head
    while current is not None:
        first = current
        second = current.next_sibling
        if second is None:
            stack.append(first)
            break
        # meld() overwrites the loser's sibling link
        current = second.next_sibling
        stack.append(meld(first, second, order))

    root = stack.pop()
    while stack:
        root = meld(stack.pop(), root, order)

    root.parent = None
    root.prev_sibling = None
    root.next_sibling = None
    return root


def cut(node: Node[T, P]) -> None:
    """
    Detach a non-root node, with its subtree, from its parent.

    Fixes the parent's ``first_child`` when the node heads the sibling list and
    leaves the node with no parent and no siblings.
    """
    prev_sibling = node.prev_sibling
    next_sibling = node.next_sibling
    if prev_sibling is not None:
        prev_sibling.next_sibling = next_sibling
    elif node.parent is not None and node.parent.first_child is node:
        node.parent.first_child = next_sibling
    if next_sibling is not None:
        next_sibling.prev_sibling = prev_sibling

    node.parent = None
    node.prev_sibling = None
    node.next_sibling = None


def walk(root: Optional[Node[T, P]]) -> Iterator[Node[T, P]]:
    """
    Pre-order traversal: a node, then its child subtree, then its next sibling.

    Uses an explicit stack. The tree must not be mutated while the iterator is
    being consumed.
    """
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.next_sibling is not None:
            stack.append(node.next_sibling)
        if node.first_child is not None:
            stack.append(node.first_child)


def is_heap(root: Optional[Node[T, P]], order: Order) -> bool:
    """
    Verify heap order and link consistency of a whole tree.

    Args:
        root: Root of the tree, or None
        order: Ordering policy

    Returns:
        True if every child is dominated by its parent and all sibling and
        parent links agree with each other
    """
    if root is None:
        return True
    if root.parent is not None or root.prev_sibling is not None or root.next_sibling is not None:
        return False

    for node in walk(root):
        prev = None
        for child in node.children():
            if child.parent is not node or child.prev_sibling is not prev:
                return False
            if not order(node.priority, child.priority):
                return False
            prev = child
    return True


def to_string(root: Optional[Node[T, P]], selector: Callable[[T], str] = str) -> str:
    """
    Render a tree as ``elem(child,child(grandchild))``.

    Args:
        root: Root of the tree, or None
        selector: Function to convert an element to a string

    Returns:
        String representation of the tree
    """
    if root is None:
        return ""

    parts: list[str] = []
    stack: list = [root]
    while stack:
        item = stack.pop()
        if not isinstance(item, Node):
            parts.append(item)
            continue
        parts.append(selector(item.element))
        children = list(item.children())
        if not children:
            continue
        stack.append(")")
        for index in range(len(children) - 1, -1, -1):
            stack.append(children[index])
            if index > 0:
                stack.append(",")
        stack.append("(")
    return "".join(parts)
