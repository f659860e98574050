from __future__ import annotations

import logging
from typing import Generic, TypeVar, Optional

from .node import TreapNode, rotate_left, rotate_right, find_node
from .priority import PrioritySource, random_priorities

K = TypeVar("K")

logger = logging.getLogger(__name__)


class Treap(Generic[K]):
    """A binary search tree kept balanced (in expectation) by random
    per-node priorities.

    Keys are ordered by key and nodes are max-heap ordered by priority.
    Inserting a key that is already present and deleting a key that is
    absent are both no-ops.

    `priorities` is a zero-argument callable producing the priority of each
    new node; if not given, a numpy-backed uniform source is created from
    `seed`.
    """

    def __init__(
        self,
        priorities: Optional[PrioritySource] = None,
        seed: Optional[int] = None,
    ):
        if priorities is None:
            priorities = random_priorities(seed)
        self._priorities: PrioritySource = priorities
        self._root: Optional[TreapNode[K]] = None
        self._len: int = 0

    @property
    def root(self) -> Optional[TreapNode[K]]:
        """The root node of this tree, or None if the tree is empty.

        This property is read-only.
        """
        return self._root

    def search(self, key: K) -> bool:
        return self._search_at(self._root, key)

    def _search_at(self, node: Optional[TreapNode[K]], key: K) -> bool:
        if node is None:
            return False
        if key == node.key:
            return True
        elif key < node.key:
            return self._search_at(node.left, key)
        else:
            return self._search_at(node.right, key)

    def insert(self, key: K):
        priority = self._priorities()
        old_len = self._len
        self._root = self._insert_at(self._root, key, priority)
        logger.debug(
            "insert %r (priority %d): %s",
            key,
            priority,
            "created" if self._len > old_len else "already present",
        )

    def _insert_at(
        self, node: Optional[TreapNode[K]], key: K, priority: int
    ) -> TreapNode[K]:
        if node is None:
            self._len += 1
            return TreapNode(key, priority)

        if key < node.key:
            node.left = self._insert_at(node.left, key, priority)
            if node.left.priority > node.priority:
                node = rotate_right(node, node.left)
        elif key > node.key:
            node.right = self._insert_at(node.right, key, priority)
            if node.right.priority > node.priority:
                node = rotate_left(node, node.right)

        return node

    def delete(self, key: K):
        old_len = self._len
        self._root = self._delete_at(self._root, key)
        logger.debug(
            "delete %r: %s", key, "removed" if self._len < old_len else "not found"
        )

    def _delete_at(
        self, node: Optional[TreapNode[K]], key: K
    ) -> Optional[TreapNode[K]]:
        if node is None:
            return None

        if key < node.key:
            node.left = self._delete_at(node.left, key)
            return node
        elif key > node.key:
            node.right = self._delete_at(node.right, key)
            return node

        if node.left is None:
            self._len -= 1
            return node.right
        elif node.right is None:
            self._len -= 1
            return node.left

        # Rotate the target below whichever child has the higher priority,
        # then keep sinking it on that side.
        if node.left.priority > node.right.priority:
            node = rotate_right(node, node.left)
            node.right = self._delete_at(node.right, key)
        else:
            node = rotate_left(node, node.right)
            node.left = self._delete_at(node.left, key)
        return node

    def get_node(self, key: K) -> Optional[TreapNode[K]]:
        """Directly retrieve the node holding `key`, or None if absent."""
        return find_node(self._root, key)

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        def _height(node: Optional[TreapNode[K]]) -> int:
            if node is None:
                return 0
            return 1 + max(_height(node.left), _height(node.right))

        return _height(self._root)

    def print(self) -> str:
        if self._root is not None:
            return self._root._print_recursive(0)
        else:
            return "<empty tree>"

    def __contains__(self, key: K) -> bool:
        return self.search(key)

    def __len__(self) -> int:
        return self._len


def new_treap(
    priorities: Optional[PrioritySource] = None, seed: Optional[int] = None
) -> Treap:
    """Return a new, empty treap."""
    return Treap(priorities, seed)
