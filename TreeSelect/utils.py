# utils.py
# Copyright (c) 2025 Alex Prochot
#
# Event-boundary and logging helpers used alongside the tree manager.
"""Click-outside detection for DOM-shaped events, plus log file location."""


from __future__ import annotations
import os
from typing import Any, List, Optional

LOG_FILENAME = "treeselect.log"


def get_log_path() -> str:
    """Log file used by the command-line entry point (TREESELECT_LOG overrides)."""
    return os.environ.get("TREESELECT_LOG") or os.path.abspath(LOG_FILENAME)


def _parent_of(elem: Any) -> Any:
    parent = getattr(elem, "parent_element", None)
    if parent is None:
        parent = getattr(elem, "parentElement", None)
    return parent


def event_path(event: Any) -> Optional[List[Any]]:
    """
    Elements the event passed through, innermost first when the event supplies its own
    path, or outermost first when rebuilt from `target`. None if `event` is not event-like.
    """
    path = getattr(event, "path", None)
    if path:
        return list(path)
    composed = getattr(event, "composed_path", None) or getattr(event, "composedPath", None)
    if callable(composed):
        found = composed()
        if found:
            return list(found)

    if not hasattr(event, "target"):
        return None
    elem = event.target
    if elem is None:
        return None
    rebuilt = [elem]
    while _parent_of(elem) is not None:
        elem = _parent_of(elem)
        rebuilt.insert(0, elem)
    return rebuilt


def _class_name(elem: Any) -> str:
    name = getattr(elem, "class_name", None)
    if name is None:
        name = getattr(elem, "className", None)
    return name if isinstance(name, str) else ""


def is_outside_click(event: Any, boundary: Any) -> bool:
    """
    True when no element on the event's path is `boundary`.
    A string boundary matches any element whose class name contains it; anything else is
    compared by identity. Non-event input is never an outside click.
    """
    path = event_path(event)
    if path is None:
        return False
    if isinstance(boundary, str):
        return not any(boundary in _class_name(elem) for elem in path)
    return not any(elem is boundary for elem in path)
