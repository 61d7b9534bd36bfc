# tree_state.py
# Copyright (c) 2025 Alex Prochot
#
# Tree selection state: checkbox propagation, expansion, search and tags.
"""Checkbox, expansion and search state for a flattened selection tree."""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

from .flatten import flatten_tree
from .models import TreeConfig, TreeNode
from .partial_state import get_partial_state
from .tree_types import RawNode
from .view_filter import SearchCache, apply_filter, restore_nodes

logger = logging.getLogger(__name__)


class NodeNotFoundError(KeyError):
    """Raised when an id does not belong to the managed tree."""


@dataclass
class FilterResult:
    """Outcome of a search: whether every node was hidden, plus the node mapping."""
    all_nodes_hidden: bool
    tree: Dict[str, TreeNode]


class TreeManager:
    """
    Owns the flattened node mapping and every mutation on it.

    The mapping is ordered depth-first (pre-order). Renderers read `tree` and route
    clicks, expand toggles and searches back through the methods below.
    """
    def __init__(
        self,
        tree: Union[RawNode, Sequence[RawNode]],
        simple_select: bool = False,
        show_partial_state: bool = False,
        root_prefix_id: Optional[str] = None,
    ) -> None:
        self.config = TreeConfig(simple_select=simple_select, show_partial_state=show_partial_state)
        flat = flatten_tree(tree, self.config, root_prefix_id=root_prefix_id)
        self.tree: Dict[str, TreeNode] = flat.nodes
        self.default_values: List[str] = flat.default_values
        self.search_maps = SearchCache(self.tree)
        self.last_clicked: Optional[str] = None
        self.current_checked: Optional[str] = None
        if self.simple_select and self.default_values:
            self.current_checked = self.default_values[-1]

    @classmethod
    def from_config(
        cls,
        tree: Union[RawNode, Sequence[RawNode]],
        config: TreeConfig,
        root_prefix_id: Optional[str] = None,
    ) -> "TreeManager":
        return cls(tree, config.simple_select, config.show_partial_state, root_prefix_id)

    @property
    def simple_select(self) -> bool:
        return self.config.simple_select

    @property
    def show_partial_state(self) -> bool:
        return self.config.show_partial_state

    # ---------------- Lookup & search ----------------
    def get_node_by_id(self, node_id: str) -> TreeNode:
        try:
            return self.tree[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def get_matches(self, search_term: str) -> List[str]:
        """Ids whose label contains `search_term` (expected lowercase), in tree order."""
        return self.search_maps.get_matches(search_term)

    def filter_tree(self, search_term: str) -> FilterResult:
        matches = self.get_matches(search_term.lower())
        all_nodes_hidden = apply_filter(self.tree, matches)
        logger.debug("Filter %r matched %d nodes", search_term, len(matches))
        return FilterResult(all_nodes_hidden=all_nodes_hidden, tree=self.tree)

    def restore_nodes(self) -> Dict[str, TreeNode]:
        restore_nodes(self.tree)
        return self.tree

    def get_visible_nodes(self) -> List[TreeNode]:
        return [node for node in self.tree.values() if not node.hide]

    # ---------------- Selection ----------------
    def set_node_checked_state(self, node_id: str, checked: bool, shift_down: bool = False) -> None:
        node = self.get_node_by_id(node_id)

        if self.simple_select:
            node.checked = checked
            if self.show_partial_state:
                node.partial = False
            self._toggle_previous_checked(node_id)
            return

        self.regular_node_check(node_id, checked)
        if shift_down and self.last_clicked is not None:
            self.toggle_between(node_id, self.last_clicked, checked)
        self.last_clicked = node_id

    def _toggle_previous_checked(self, node_id: str) -> None:
        # re-selecting the current node leaves it as set_node_checked_state just left it
        previous = self.current_checked
        if previous is not None and previous != node_id:
            self.get_node_by_id(previous).checked = False
        self.current_checked = node_id

    def regular_node_check(self, node_id: str, checked: bool) -> None:
        node = self.get_node_by_id(node_id)
        node.checked = checked
        if self.show_partial_state:
            node.partial = False

        self.toggle_children(node_id, checked)

        if self.show_partial_state:
            self._partial_check_parents(node)
        if not checked:
            self._uncheck_parents(node)

    def toggle_between(self, id1: str, id2: str, checked: bool) -> None:
        """Apply `checked` to every visible node between two ids, inclusive."""
        self.get_node_by_id(id1)
        self.get_node_by_id(id2)
        visible = self.get_visible_nodes()
        positions = {node.id: idx for idx, node in enumerate(visible)}
        if id1 not in positions or id2 not in positions:
            # an endpoint hidden by the current search has no position to range over
            logger.debug("Range select skipped: %s or %s is hidden", id1, id2)
            return
        start, end = sorted((positions[id1], positions[id2]))
        logger.debug("Range select %s..%s (%d nodes) -> %s",
                     visible[start].id, visible[end].id, end - start + 1, checked)
        for node in visible[start:end + 1]:
            self.regular_node_check(node.id, checked)

    def toggle_children(self, node_id: str, state: bool) -> None:
        stack = [node_id]
        while stack:
            node = self.get_node_by_id(stack.pop())
            node.checked = state
            if self.show_partial_state:
                node.partial = False
            stack.extend(reversed(node.children))

    def _uncheck_parents(self, node: TreeNode) -> None:
        # no ancestor stays checked once a descendant is unchecked
        parent = node.parent
        while parent is not None:
            current = self.get_node_by_id(parent)
            current.checked = False
            if self.show_partial_state:
                current.partial = get_partial_state(current, self.get_node_by_id)
            parent = current.parent

    def _partial_check_parents(self, node: TreeNode) -> None:
        parent = node.parent
        while parent is not None:
            current = self.get_node_by_id(parent)
            current.checked = all(self.get_node_by_id(c).checked for c in current.children)
            current.partial = get_partial_state(current, self.get_node_by_id)
            parent = current.parent

    # ---------------- Expand / collapse ----------------
    def toggle_node_expand_state(self, node_id: str) -> Dict[str, TreeNode]:
        node = self.get_node_by_id(node_id)
        node.expanded = not node.expanded
        if not node.expanded:
            self._collapse_children(node)
        return self.tree

    def _collapse_children(self, node: TreeNode) -> None:
        stack = list(node.children)
        while stack:
            child = self.get_node_by_id(stack.pop())
            child.expanded = False
            stack.extend(child.children)

    # ---------------- Tags & defaults ----------------
    def get_tags(self) -> List[TreeNode]:
        """
        Maximal checked nodes in tree order: a checked node stands in for its whole
        subtree, so its descendants are never reported separately.
        """
        tags: List[TreeNode] = []
        visited: set[str] = set()

        for node_id, node in self.tree.items():
            if node_id in visited:
                continue
            if node.checked:
                tags.append(node)
                self._mark_subtree(node, visited)
            else:
                visited.add(node_id)
        return tags

    def _mark_subtree(self, node: TreeNode, visited: set[str]) -> None:
        stack = [node.id]
        while stack:
            current = stack.pop()
            visited.add(current)
            stack.extend(self.get_node_by_id(current).children)

    def restore_default_values(self) -> Dict[str, TreeNode]:
        """Reset every check to the state the tree was loaded with."""
        for node in self.tree.values():
            node.checked = False
            if self.show_partial_state:
                node.partial = False
        self.current_checked = None

        for node_id in self.default_values:
            self.set_node_checked_state(node_id, True, False)
        logger.debug("Restored %d default values", len(self.default_values))
        return self.tree
