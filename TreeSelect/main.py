# main.py
# Copyright (c) 2025 Alex Prochot
#
# Command-line entry point driving the tree manager on a JSON tree.
"""Command-line entry point: load a JSON tree, apply actions, print rows and tags."""


import argparse
import json
import logging
import pathlib
import sys
from typing import List, Optional

# Support running both as a package (`python -m TreeSelect.main`)
# and directly as a script (`python TreeSelect/main.py`).
if __package__:
    from .tree_state import NodeNotFoundError, TreeManager
    from .utils import get_log_path
else:  # pragma: no cover - convenience for direct invocation
    sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))
    from TreeSelect.tree_state import NodeNotFoundError, TreeManager  # type: ignore
    from TreeSelect.utils import get_log_path  # type: ignore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treeselect",
        description="Apply selection actions to a JSON tree and print the result.",
    )
    parser.add_argument("tree", type=pathlib.Path, help="JSON file with a list of root nodes")
    parser.add_argument("--simple-select", action="store_true", help="allow only one checked node")
    parser.add_argument("--partial", action="store_true", help="track partially checked parents")
    parser.add_argument("--check", action="append", default=[], metavar="ID")
    parser.add_argument("--uncheck", action="append", default=[], metavar="ID")
    parser.add_argument("--expand", action="append", default=[], metavar="ID",
                        help="toggle expansion of a node")
    parser.add_argument("--search", metavar="TERM", help="filter rows by label substring")
    parser.add_argument("--log-file", metavar="PATH", help="log destination (default: treeselect.log)")
    return parser


def render_rows(manager: TreeManager) -> List[str]:
    rows = []
    for node in manager.get_visible_nodes():
        rows.append(f"{'  ' * node.depth}{node.box()} {node.label} ({node.id})")
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to load the tree, run the requested actions and print the outcome.
    """
    args = build_parser().parse_args(argv)

    if not logging.getLogger().handlers:
        logging.basicConfig(
            filename=args.log_file or get_log_path(),
            level=logging.INFO,
            format="%(asctime)s - %(message)s",
            filemode="w",
        )

    try:
        data = json.loads(args.tree.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error("Failed to load tree %s: %s", args.tree, e)
        print(f"error: cannot load {args.tree}: {e}", file=sys.stderr)
        return 1

    manager = TreeManager(data, simple_select=args.simple_select, show_partial_state=args.partial)
    logger.info("Loaded tree %s (%d nodes)", args.tree, len(manager.tree))

    try:
        for node_id in args.check:
            manager.set_node_checked_state(node_id, True)
        for node_id in args.uncheck:
            manager.set_node_checked_state(node_id, False)
        for node_id in args.expand:
            manager.toggle_node_expand_state(node_id)
    except NodeNotFoundError as e:
        logger.error("Unknown node id: %s", e)
        print(f"error: unknown node id {e}", file=sys.stderr)
        return 1

    if args.search:
        result = manager.filter_tree(args.search)
        logger.info("Search %r hid all nodes: %s", args.search, result.all_nodes_hidden)
        if result.all_nodes_hidden:
            print("No matches found")

    for row in render_rows(manager):
        print(row)
    print("tags: " + ", ".join(node.id for node in manager.get_tags()))
    return 0


if __name__ == '__main__':
    sys.exit(main())
