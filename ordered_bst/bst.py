"""An ordered symbol table backed by an (unbalanced) binary search tree.

Every node caches the size of its subtree, so rank-based queries (`select`,
`rank`, `median`) run in O(h) time. Deletion is Hibbard deletion using the
in-order *predecessor* of a node with two children rather than the more
common successor.

Based on:
    [1] Robert Sedgewick and Kevin Wayne, Algorithms, 4th edition,
        Section 3.2 (Binary Search Trees). Addison-Wesley (2011).
"""
import logging
from typing import TypeVar, Generic, Optional, Generator
from collections import deque

K = TypeVar('K')
V = TypeVar('V')
NodeType = 'BSTNode[K, V]'
NodeIterator = Generator[NodeType, None, None]

logger = logging.getLogger(__name__)


def _size(node: Optional[NodeType]) -> int:
    """The size of a (possibly empty) subtree."""
    if node is None:
        return 0
    return node.size


class BST(Generic[K, V]):
    """A binary search tree mapping ordered keys to values."""
    def __init__(self):
        """Creates an empty tree."""
        self.root: Optional[NodeType] = None

    def is_empty(self) -> bool:
        """Is the tree empty?"""
        return self.root is None

    def size(self) -> int:
        """The number of key-value pairs in the tree."""
        return _size(self.root)

    def contains(self, key: K) -> bool:
        """Is `key` in the tree?"""
        return self.get(key) is not None

    def get(self, key: K) -> Optional[V]:
        """Searches for a key in the tree.

        If the key is found, its associated value is returned. Otherwise,
        `None` is returned."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.val
        return None

    def put(self, key: K, val: Optional[V]) -> None:
        """Inserts a key-value pair into the tree.

        If `key` is already in the tree, its value is overwritten and the
        shape of the tree is unchanged. Passing `None` as the value removes
        `key` from the tree instead (so no stored value is ever `None`).

        Raises:
            ValueError: `key` is `None`.
        """
        if key is None:
            raise ValueError('Cannot insert a key of None.')
        if val is None:
            self.delete(key)
            return
        if self.root is None:
            logger.debug('creating root node with key %r', key)
            self.root = BSTNode(key, val)
        else:
            self.root = self.root.put(key, val)

    def delete(self, key: K) -> None:
        """Removes a key-value pair from the tree.

        Does nothing if the tree is empty, `key` is `None` or `key` is not
        in the tree. A node with two children is replaced by its in-order
        predecessor."""
        if self.root is None or key is None or not self.contains(key):
            return
        self.root = self.root.delete(key)

    def height(self) -> int:
        """The number of links on the longest root-to-leaf path.

        An empty tree has height -1; a single node has height 0. Every node
        is visited, so this takes O(n) time."""
        height = -1
        if self.root is None:
            return height
        nodes = deque([(0, self.root)])
        while nodes:
            depth, node = nodes.popleft()
            height = max(height, depth)
            for child in (node.left, node.right):
                if child is not None:
                    nodes.append((depth + 1, child))
        return height

    def median(self) -> Optional[K]:
        """The key at rank floor((n - 1) / 2), or `None` if the tree is
        empty."""
        if self.root is None:
            return None
        return self.select((self.size() - 1) // 2)

    def select(self, rank: int) -> K:
        """Finds the key with exactly `rank` smaller keys in the tree.

        Raises:
            TypeError: `rank` is not an integer.
            IndexError: `rank` is not in [0, size - 1] (always the case
              for an empty tree).
        """
        if not isinstance(rank, int):
            raise TypeError(f'Rank must be an integer (got {rank!r}).')
        if not 0 <= rank < self.size():
            raise IndexError(f'Rank {rank} out of range for a tree ' +
                             f'of size {self.size()}.')
        node = self.root
        while True:
            left_size = _size(node.left)
            if left_size > rank:
                node = node.left
            elif left_size < rank:
                rank -= left_size + 1
                node = node.right
            else:
                return node.key

    def rank(self, key: K) -> int:
        """The number of keys in the tree strictly less than `key`.

        `key` does not have to be in the tree."""
        if key is None:
            raise ValueError('Cannot rank a key of None.')
        rank = 0
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                rank += _size(node.left) + 1
                node = node.right
            else:
                return rank + _size(node.left)
        return rank

    def min(self) -> Optional[K]:
        """Finds the minimum key in the tree."""
        if self.root is None:
            return None
        node = self.root
        while node.left is not None:
            node = node.left
        return node.key

    def max(self) -> Optional[K]:
        """Finds the maximum key in the tree."""
        if self.root is None:
            return None
        return self.root.find_predecessor().key

    def print_keys_in_order(self) -> str:
        """All keys in order, with every subtree wrapped in parentheses.

        An empty subtree is rendered as `()`; a node is rendered as
        `(` + left subtree + key + right subtree + `)`.

        Example: for the tree
              B
             / \\
            A   C
                 \\
                  D
        the result is `((()A())B(()C(()D())))`.
        """
        return ''.join(_in_order_tokens(self.root))

    def pretty_print_keys(self) -> str:
        """A multi-line ASCII picture of the tree, one node per line.

        Each node is printed as `-key` after its indentation; its left
        subtree follows with the indentation extended by ` |` and then its
        right subtree with the indentation extended by two spaces. Missing
        children are printed as `-null`.
        """
        lines = []
        stack = [(self.root, '')]
        while stack:
            node, indent = stack.pop()
            if node is None:
                lines.append(f'{indent}-null\n')
                continue
            lines.append(f'{indent}-{node.key}\n')
            # Pushed in reverse so the left subtree is printed first.
            stack.append((node.right, indent + '  '))
            stack.append((node.left, indent + ' |'))
        return ''.join(lines)

    def _order_invariant(self) -> bool:
        """Invariant: in-order keys are strictly increasing."""
        keys = [node.key for node in self.root.all_nodes()]
        return all(a < b for a, b in zip(keys, keys[1:]))

    def _size_invariant(self) -> bool:
        """Invariant: a node's size == 1 + the sizes of its children."""
        return all(node.size == 1 + _size(node.left) + _size(node.right)
                   for node in self.root.all_nodes())

    def _root_size_invariant(self) -> bool:
        """Invariant: the size of the tree == the number of reachable
        nodes."""
        return self.size() == sum(1 for _ in self.root.all_nodes())

    def check_invariants(self) -> None:
        """Verifies that the tree is well-formed."""
        if self.root:
            assert self._order_invariant(), \
                'Keys are not in strictly increasing order.'
            assert self._size_invariant(), '≥1 node has the wrong size.'
            assert self._root_size_invariant(), \
                'The size of the tree ≠ the number of nodes.'


class BSTNode(Generic[K, V]):
    """A node in a binary search tree."""
    def __init__(self, key: K, val: V):
        """Creates a leaf node."""
        self.key = key
        self.val = val
        self.left: Optional[NodeType] = None
        self.right: Optional[NodeType] = None
        self.size = 1

    def update_size(self) -> None:
        """Recomputes the node's size from the sizes of its children."""
        self.size = 1 + _size(self.left) + _size(self.right)

    def put(self, key: K, val: V) -> NodeType:
        """Inserts (or overwrites) a key-value pair in the subtree rooted at
        the node.

        Returns:
            The root of the subtree (always the node itself).
        """
        if key < self.key:
            if self.left is None:
                logger.debug('creating node with key %r', key)
                self.left = BSTNode(key, val)
            else:
                self.left = self.left.put(key, val)
        elif key > self.key:
            if self.right is None:
                logger.debug('creating node with key %r', key)
                self.right = BSTNode(key, val)
            else:
                self.right = self.right.put(key, val)
        else:
            logger.debug('overwriting value for key %r', key)
            self.val = val
        self.update_size()
        return self

    def delete(self, key: K) -> Optional[NodeType]:
        """Removes a key (if it exists) from the subtree rooted at the node.

        Returns:
            The new root of the subtree, or `None` if deleting the key
            leaves it empty.
        """
        if key < self.key:
            if self.left is not None:
                self.left = self.left.delete(key)
        elif key > self.key:
            if self.right is not None:
                self.right = self.right.delete(key)
        else:
            if self.right is None:
                logger.debug('removing node with key %r', key)
                return self.left
            if self.left is None:
                logger.debug('removing node with key %r', key)
                return self.right
            # Two children: splice in the predecessor.
            pred = self.left.find_predecessor()
            logger.debug('replacing node with key %r by predecessor %r',
                         key, pred.key)
            pred.left = self.left.delete_predecessor()
            pred.right = self.right
            pred.update_size()
            return pred
        self.update_size()
        return self

    def find_predecessor(self) -> NodeType:
        """Finds the node with the maximum key in the subtree rooted at the
        node.

        Called on the left child of a node, this is the node's in-order
        predecessor."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def delete_predecessor(self) -> Optional[NodeType]:
        """Unlinks the maximum node (see `find_predecessor`) from the
        subtree rooted at the node, returning the new subtree root."""
        if self.right is None:
            return self.left
        self.right = self.right.delete_predecessor()
        self.update_size()
        return self

    def all_nodes(self) -> NodeIterator:
        """Finds all the nodes in the subtree rooted at the node (in
        order)."""
        if self.left is not None:
            yield from self.left.all_nodes()
        yield self
        if self.right is not None:
            yield from self.right.all_nodes()

    def __repr__(self):
        return f'node with key {self.key} (size {self.size})'


def _in_order_tokens(node: Optional[NodeType]) -> Generator[str, None, None]:
    """Fragments of the parenthesized in-order rendering of a subtree."""
    if node is None:
        yield '()'
        return
    yield '('
    yield from _in_order_tokens(node.left)
    yield str(node.key)
    yield from _in_order_tokens(node.right)
    yield ')'
