# Invariant checks for AVL trees, used by the tests and handy when debugging.
from __future__ import annotations
import warnings
from typing import Any, Callable
from .avl import AVLTree

class InvariantViolation(Exception):
    pass

def subtree_height(node: AVLTree.Node | None) -> int:
    """Computes the height of the subtree from scratch without looking at the cached heights."""
    if node is None:
        return -1
    return 1 + max(subtree_height(node.left), subtree_height(node.right))

def flatten(node: AVLTree.Node | None) -> list:
    """Returns the values in the subtree in order."""
    if node is None:
        return []
    return flatten(node.left) + [node.value] + flatten(node.right)

def check_node(node: AVLTree.Node | None, key: Callable[[Any], Any] | None = None) -> list[str]:
    """Returns a description of every broken invariant in the subtree. An empty list means the subtree is a valid AVL tree.

    Checks the balance factor, the cached height and element count, and the ordering of the values.
    Equal values are allowed on either side of a node since rotations can move duplicates into the left subtree."""
    if key is None:
        key = lambda x: x
    problems: list[str] = []

    def visit(node: AVLTree.Node | None):
        if node is None:
            return
        expected_height = 1 + max(subtree_height(node.left), subtree_height(node.right))
        if node.height != expected_height:
            problems.append(f"{node!r}: cached height is {node.height}, expected {expected_height}")

        expected_size = 1 + len(flatten(node.left)) + len(flatten(node.right))
        if node.num_element != expected_size:
            problems.append(f"{node!r}: cached element count is {node.num_element}, expected {expected_size}")

        w = subtree_height(node.left) - subtree_height(node.right)
        if abs(w) > 1:
            problems.append(f"{node!r}: balance factor is {w}")

        k = key(node.value)
        for x in flatten(node.left):
            if k < key(x):
                problems.append(f"{node!r}: left subtree contains larger value {x!r}")
        for x in flatten(node.right):
            if key(x) < k:
                problems.append(f"{node!r}: right subtree contains smaller value {x!r}")

        visit(node.left)
        visit(node.right)

    visit(node)
    return problems

def check_tree(tree: AVLTree, strict: bool = True) -> list[str]:
    """Checks every invariant of the tree using the tree's own key function.

    If strict, raises InvariantViolation on the first problem. Otherwise warns once per problem and returns them all."""
    problems = check_node(tree.root, tree.key)
    if strict and problems:
        raise InvariantViolation(problems[0])
    for problem in problems:
        warnings.warn(f"AVL invariant violated: {problem}")
    return problems
