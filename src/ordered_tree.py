import logging
import operator
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)


class OrderedTree(Generic[T]):
    """Unbalanced binary search tree ordered by a caller-supplied comparator.

    ``less(a, b)`` must be a strict weak ordering. Two values are treated as
    the same key when neither ``less(a, b)`` nor ``less(b, a)`` holds, so
    inserting an equivalent value is a no-op.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

        def is_leaf(self) -> bool:
            return self.left is None and self.right is None

    def __init__(self, less: Callable[[T, T], bool] = operator.lt) -> None:
        self._less = less
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = OrderedTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if self._less(value, node.value):
                if node.left is None:
                    node.left = OrderedTree.Node(value)
                    self._size += 1
                    return
                node = node.left
            elif self._less(node.value, value):
                if node.right is None:
                    node.right = OrderedTree.Node(value)
                    self._size += 1
                    return
                node = node.right
            else:
                return

    def find(self, value: T) -> bool:
        """Return True if a node equivalent to ``value`` holds an equal value.

        The descent is driven by ``less``; the node it stops on must also
        satisfy ``node.value == value``. For comparators that order only part
        of a value, an equivalent but unequal probe is reported as missing.
        """
        node = self._find_node(self._root, value)
        return node is not None and node.value == value

    def delete(self, value: T) -> None:
        self._root, removed = self._delete_from(self._root, value)
        if removed:
            self._size -= 1

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._minimum_of(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        if self._root is None:
            return 0
        deepest = 0
        stack: List[Tuple[OrderedTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return deepest

    def clear(self) -> None:
        if self._root is not None:
            logger.debug("Discarding tree with %d nodes", self._size)
        self._root = None
        self._size = 0

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def render(self) -> str:
        return " ".join(str(value) for value in self.in_order())

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if self._less(value, node.value):
                node = node.left
            elif self._less(node.value, value):
                node = node.right
            else:
                return node
        return None

    def _delete_from(self, subtree: Optional[Node], value: T) -> Tuple[Optional[Node], bool]:
        """Delete ``value`` from ``subtree``.

        Returns the subtree's (possibly new) root and whether a node was
        removed. A node with two children takes its in-order successor's
        value, and the successor is then deleted from the right subtree.
        Since the successor has no left child that second pass always ends
        in the leaf or single-child case.
        """
        parent: Optional[OrderedTree.Node] = None
        node = subtree
        while node is not None:
            if self._less(value, node.value):
                parent, node = node, node.left
            elif self._less(node.value, value):
                parent, node = node, node.right
            else:
                break

        if node is None:
            return subtree, False

        if node.left is not None and node.right is not None:
            successor = self._minimum_of(node.right)
            node.value = successor.value
            node.right, _ = self._delete_from(node.right, successor.value)
            return subtree, True

        if node.is_leaf():
            replacement = None
        elif node.left is None:
            replacement = node.right
        else:
            replacement = node.left
        logger.debug("Node with value %r deleted", node.value)

        if parent is None:
            return replacement, True
        if parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        return subtree, True

    def _minimum_of(self, node: Node) -> Node:
        # node must not be None
        while node.left is not None:
            node = node.left
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.find(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size})"
