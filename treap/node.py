from __future__ import annotations

from typing import Generic, TypeVar, Optional

K = TypeVar("K")


class TreapNode(Generic[K]):
    """A single key in a treap, along with its heap priority.

    Each node is owned by exactly one parent (or by the tree, for the root);
    there are no parent links.
    """

    __slots__ = ("key", "priority", "left", "right")

    def __init__(
        self,
        key: K,
        priority: int,
        left: Optional[TreapNode[K]] = None,
        right: Optional[TreapNode[K]] = None,
    ):
        self.key: K = key
        self.priority: int = priority
        self.left: Optional[TreapNode[K]] = left
        self.right: Optional[TreapNode[K]] = right

    def __repr__(self) -> str:
        return "TreapNode({!r}, {})".format(self.key, self.priority)

    def _print_recursive(self, level: int) -> str:
        ret = ""
        if self.left is not None:
            ret = self.left._print_recursive(level + 1)

        ret += ("    " * level) + self._print_node() + "\n"

        if self.right is not None:
            ret += self.right._print_recursive(level + 1)

        return ret

    def _print_node(self) -> str:
        return "{} ({})".format(self.key, self.priority)


# Rotations require `pivot` to be the matching child of `root`; this is not
# checked.


def rotate_right(root: TreapNode[K], pivot: TreapNode[K]) -> TreapNode[K]:
    root.left = pivot.right
    pivot.right = root
    return pivot


def rotate_left(root: TreapNode[K], pivot: TreapNode[K]) -> TreapNode[K]:
    root.right = pivot.left
    pivot.left = root
    return pivot


def find_node(node: Optional[TreapNode[K]], key: K) -> Optional[TreapNode[K]]:
    """Return the node holding `key` within the subtree at `node`, or None."""
    while node is not None:
        if key == node.key:
            return node
        elif key < node.key:
            node = node.left
        else:
            node = node.right
    return None
