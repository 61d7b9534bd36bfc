# flatten.py
# Copyright (c) 2025 Alex Prochot
#
# Conversion of nested raw trees into the ordered, id-indexed node mapping.
"""Flatten a nested tree of raw nodes into an insertion-ordered mapping."""


from __future__ import annotations
import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from .models import TreeConfig, TreeNode
from .partial_state import get_partial_state
from .tree_types import RAW_NODE_KEYS, RawNode

logger = logging.getLogger(__name__)


@dataclass
class FlattenResult:
    """Flattened nodes in pre-order plus the ids that were checked on load."""
    nodes: Dict[str, TreeNode]
    default_values: List[str] = field(default_factory=list)


def _node_id(raw: Dict[str, Any], index: int, parent: Optional[TreeNode],
             root_prefix_id: Optional[str]) -> str:
    given = raw.get("id")
    if given is not None and given != "":
        return str(given)
    if parent is not None:
        return f"{parent.id}-{index}"
    if root_prefix_id:
        return f"{root_prefix_id}-{index}"
    return str(index)


def flatten_tree(
    tree: Union[RawNode, Sequence[RawNode]],
    config: TreeConfig,
    root_prefix_id: Optional[str] = None,
) -> FlattenResult:
    """
    Walk `tree` depth-first, producing TreeNode objects keyed by id. The input is only
    read; extra per-node values are copied node by node.
    Insertion order is pre-order, which is the order used for range selection and tags.
    Input is assumed acyclic with unique ids.
    """
    forest = list(tree) if isinstance(tree, (list, tuple)) else [tree]
    result = FlattenResult(nodes={})

    # (raw node, index among siblings, parent TreeNode)
    stack: List[tuple[Dict[str, Any], int, Optional[TreeNode]]] = [
        (raw, i, None) for i, raw in reversed(list(enumerate(forest)))
    ]
    while stack:
        raw, index, parent = stack.pop()
        node = TreeNode(
            id=_node_id(raw, index, parent, root_prefix_id),
            label=str(raw.get("label", "") or ""),
            parent=parent.id if parent is not None else None,
            depth=parent.depth + 1 if parent is not None else 0,
            checked=bool(raw.get("checked", False)),
            expanded=bool(raw.get("expanded", False)),
            data={k: copy.deepcopy(v) for k, v in raw.items() if k not in RAW_NODE_KEYS},
        )
        if parent is not None:
            parent.children.append(node.id)
        if node.checked:
            result.default_values.append(node.id)
        result.nodes[node.id] = node

        children = raw.get("children") or []
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], i, node))

    if config.simple_select and len(result.default_values) > 1:
        # single-select keeps only the last node checked on load
        for node_id in result.default_values[:-1]:
            result.nodes[node_id].checked = False
        result.default_values = result.default_values[-1:]

    if config.show_partial_state:
        for node in result.nodes.values():
            node.partial = get_partial_state(node, result.nodes.__getitem__)

    logger.debug("Flattened %d nodes (%d checked on load)",
                 len(result.nodes), len(result.default_values))
    return result
