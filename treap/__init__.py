from . import node
from . import priority
from . import tree

from .node import TreapNode
from .priority import MAX_PRIORITY, random_priorities, fixed_priorities
from .tree import Treap, new_treap

__all__ = [
    "Treap",
    "TreapNode",
    "new_treap",
    "MAX_PRIORITY",
    "random_priorities",
    "fixed_priorities",
]
