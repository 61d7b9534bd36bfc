# view_filter.py
# Copyright (c) 2025 Alex Prochot
#
# Label search with cached results and hide/reveal of matching nodes.
"""Search and filtering helpers used by the tree manager."""


from __future__ import annotations
import logging
from typing import Dict, List, Optional

from .models import TreeNode

logger = logging.getLogger(__name__)


class SearchCache:
    """
    Case-insensitive substring search over node labels.
    Results are cached per term. A term that extends a cached term only has to re-check
    the cached term's matches, since appending characters can only shrink the match set.
    """
    def __init__(self, nodes: Dict[str, TreeNode]) -> None:
        self.nodes = nodes
        self._results: Dict[str, List[str]] = {}

    def __contains__(self, term: str) -> bool:
        return term in self._results

    def __len__(self) -> int:
        return len(self._results)

    def closest_match(self, term: str) -> Optional[str]:
        """Longest cached term that `term` starts with, if any."""
        best: Optional[str] = None
        for key in self._results:
            if term.startswith(key) and (best is None or len(key) > len(best)):
                best = key
        return best

    def get_matches(self, term: str) -> List[str]:
        cached = self._results.get(term)
        if cached is not None:
            return cached

        closest = self.closest_match(term)
        if closest is not None:
            candidates = (self.nodes[i] for i in self._results[closest])
            logger.debug("Search %r narrowed from cached %r (%d candidates)",
                         term, closest, len(self._results[closest]))
        else:
            candidates = iter(self.nodes.values())
            logger.debug("Search %r scanning all %d nodes", term, len(self.nodes))

        matches = [node.id for node in candidates if term in node.label.lower()]
        self._results[term] = matches
        return matches


def apply_filter(nodes: Dict[str, TreeNode], matches: List[str]) -> bool:
    """
    Hide everything, then reveal each match and flag its ancestors as having a
    matching descendant. Returns True when nothing matched.
    """
    for node in nodes.values():
        node.hide = True
        node.match_in_children = False

    for match_id in matches:
        node = nodes[match_id]
        node.hide = False
        parent = node.parent
        while parent is not None:
            ancestor = nodes[parent]
            ancestor.match_in_children = True
            parent = ancestor.parent

    return len(matches) == 0


def restore_nodes(nodes: Dict[str, TreeNode]) -> None:
    """Un-hide every node; match_in_children is left as the last filter set it."""
    for node in nodes.values():
        node.hide = False
