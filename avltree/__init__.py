from .avl import AVLTree, height, size, update_height, balance_factor, rotate_left, rotate_right, rebalance
from .check import InvariantViolation, check_node, check_tree
