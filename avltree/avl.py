from __future__ import annotations
from typing import Any, Callable, TypeVar, Generic
T = TypeVar('T')

def height(x: AVLTree.Node | None) -> int:
    return x.height if x is not None else -1

def size(x: AVLTree.Node | None) -> int:
    return x.num_element if x is not None else 0

def update_height(x: AVLTree.Node):
    x.height = 1 + max(height(x.left), height(x.right))
    x.num_element = 1 + size(x.left) + size(x.right)

def balance_factor(x: AVLTree.Node | None) -> int:
    return height(x.left) - height(x.right) if x is not None else 0

def rotate_right(node: AVLTree.Node) -> AVLTree.Node:
    """Rotates the subtree right around node and returns the new subtree root (the old left child)."""
    y = node.left
    node.left = y.right
    y.right = node
    # node is now below y, so its height has to be fixed first
    update_height(node)
    update_height(y)
    return y

def rotate_left(node: AVLTree.Node) -> AVLTree.Node:
    """Rotates the subtree left around node and returns the new subtree root (the old right child)."""
    y = node.right
    node.right = y.left
    y.left = node
    update_height(node)
    update_height(y)
    return y

def rebalance(node: AVLTree.Node | None) -> AVLTree.Node | None:
    """Restores the AVL property at node, assuming both subtrees are already balanced.

    Left-heavy nodes get a single right rotation when the left child leans left or is even,
    otherwise a left-right double rotation. Right-heavy nodes are the mirror image.
    Returns the root of the subtree, which is node itself if no rotation was needed."""
    if node is None:
        return None

    w = balance_factor(node)
    if w > 1:
        if height(node.left.left) >= height(node.left.right):
            return rotate_right(node)
        node.left = rotate_left(node.left)
        return rotate_right(node)

    if w < -1:
        if height(node.right.right) >= height(node.right.left):
            return rotate_left(node)
        node.right = rotate_right(node.right)
        return rotate_left(node)
    return node

def insert(node: AVLTree.Node | None, value, key: Callable[[Any], Any]) -> AVLTree.Node:
    if node is None:
        return AVLTree.Node(value)

    # Anything not strictly smaller goes right, so duplicates end up in the right subtree
    if key(value) < key(node.value):
        node.left = insert(node.left, value, key)
    else:
        node.right = insert(node.right, value, key)

    node = rebalance(node)
    update_height(node)
    return node

def _identity(x):
    return x

class AVLTree(Generic[T]):
    """A self-balancing binary search tree. Equal values are kept, so this behaves like a sorted multiset.

    Values are compared with `<`. Pass `key` to compare by a derived key instead, like `sorted(key=...)`.
    The tree is not thread safe."""
    class Node:
        def __init__(self, value: T):
            self.value = value
            self.left: AVLTree.Node | None = None
            self.right: AVLTree.Node | None = None
            self.height = 0
            self.num_element = 1

        def __repr__(self):
            return f"Node({self.value!r}, height={self.height})"

    def __init__(self, key: Callable[[T], Any] | None = None):
        self.root: AVLTree.Node | None = None
        self.key: Callable[[T], Any] = key if key is not None else _identity

    def insert(self, value: T):
        self.root = insert(self.root, value, self.key)

    def empty(self):
        return self.root is None

    def height(self) -> int:
        """Returns the height of the tree. A single node has height 0 and an empty tree has height -1."""
        return height(self.root)

    def __len__(self):
        return size(self.root)

    def __contains__(self, x: T):
        k = self.key(x)
        node = self.root
        while node is not None:
            node_key = self.key(node.value)
            if k < node_key:
                node = node.left
            elif node_key < k:
                node = node.right
            else:
                return True
        return False
