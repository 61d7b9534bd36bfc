# models.py
# Copyright (c) 2025 Alex Prochot
#
# Data models representing flattened tree nodes and manager configuration.
"""Domain models for flattened tree nodes and the selection configuration."""


from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TreeConfig:
    """Selection modes fixed for the lifetime of a manager."""
    simple_select: bool = False
    show_partial_state: bool = False


@dataclass
class TreeNode:
    """
    One element of the flattened tree.
    `parent` and `children` hold identifiers only; nodes are looked up through the
    owning manager's mapping.
    """
    id: str
    label: str = ""
    parent: Optional[str] = None
    children: List[str] = field(default_factory=list)
    depth: int = 0
    checked: bool = False
    partial: Optional[bool] = None
    expanded: bool = False
    hide: bool = False
    match_in_children: bool = False
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def box(self) -> str:
        """Checkbox glyph for text rendering: [x], [-] or [ ]."""
        if self.checked:
            return "[x]"
        if self.partial:
            return "[-]"
        return "[ ]"

    def __repr__(self) -> str:
        return (
            f"TreeNode(id={self.id!r}, label={self.label!r}, "
            f"checked={self.checked}, partial={self.partial})"
        )
