# tree_types.py
# Copyright (c) 2025 Alex Prochot
#
# Shared typing aliases for raw tree input.
"""Shared typing aliases for the nested tree accepted by the flattener."""


from __future__ import annotations
from typing import List, TypedDict


class RawNode(TypedDict, total=False):
    id: str
    label: str
    checked: bool
    expanded: bool
    children: List["RawNode"]


# keys consumed by the flattener; everything else lands in TreeNode.data
RAW_NODE_KEYS = frozenset({"id", "label", "checked", "expanded", "children"})
