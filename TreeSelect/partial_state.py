# partial_state.py
# Copyright (c) 2025 Alex Prochot
#
# Tri-state checkbox resolution.
"""Compute the "partially checked" state of a node from its descendants."""


from __future__ import annotations
from typing import Callable

from .models import TreeNode


def get_partial_state(node: TreeNode, get_node: Callable[[str], TreeNode]) -> bool:
    """
    True when `node` itself is not checked but at least one descendant is.
    Leaves are never partial.
    """
    if node.checked or node.is_leaf:
        return False

    stack = list(reversed(node.children))
    while stack:
        child = get_node(stack.pop())
        if child.checked:
            return True
        stack.extend(reversed(child.children))
    return False
