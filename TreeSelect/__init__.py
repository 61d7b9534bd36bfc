# __init__.py
# Copyright (c) 2025 Alex Prochot
#
# Package exports for the tree selection state engine.
"""State engine for hierarchical selection widgets."""

from .models import TreeConfig, TreeNode
from .tree_state import FilterResult, NodeNotFoundError, TreeManager
from .utils import is_outside_click

__all__ = [
    "TreeConfig",
    "TreeNode",
    "TreeManager",
    "FilterResult",
    "NodeNotFoundError",
    "is_outside_click",
]
