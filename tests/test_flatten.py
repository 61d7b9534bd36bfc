from TreeSelect.flatten import flatten_tree
from TreeSelect.models import TreeConfig
from TreeSelect.partial_state import get_partial_state
from TreeSelect.tree_state import TreeManager


def test_flatten_is_preorder_with_back_references():
    tree = [
        {"id": "r", "label": "Root", "children": [
            {"id": "a", "label": "A", "children": [{"id": "a1", "label": "A1"}]},
            {"id": "b", "label": "B"},
        ]},
        {"id": "s", "label": "Second"},
    ]
    flat = flatten_tree(tree, TreeConfig())

    assert list(flat.nodes) == ["r", "a", "a1", "b", "s"]
    assert flat.nodes["r"].children == ["a", "b"]
    assert flat.nodes["a1"].parent == "a"
    assert flat.nodes["s"].parent is None
    assert [flat.nodes[i].depth for i in flat.nodes] == [0, 1, 2, 1, 0]
    # partial display off leaves partial unset
    assert flat.nodes["r"].partial is None


def test_flatten_generates_missing_ids():
    tree = [{"label": "x", "children": [{"label": "y"}, {"label": "z"}]}, {"label": "w"}]
    flat = flatten_tree(tree, TreeConfig())
    assert list(flat.nodes) == ["0", "0-0", "0-1", "1"]

    prefixed = flatten_tree(tree, TreeConfig(), root_prefix_id="rdts")
    assert list(prefixed.nodes) == ["rdts-0", "rdts-0-0", "rdts-0-1", "rdts-1"]


def test_flatten_records_default_values_and_extra_data():
    tree = {"id": "p", "label": "P", "value": 7, "children": [
        {"id": "c1", "label": "C1", "checked": True},
        {"id": "c2", "label": "C2", "expanded": True},
    ]}
    flat = flatten_tree(tree, TreeConfig(show_partial_state=True))

    assert flat.default_values == ["c1"]
    assert flat.nodes["p"].data == {"value": 7}
    assert flat.nodes["c2"].expanded is True
    assert flat.nodes["p"].partial is True
    assert flat.nodes["c1"].partial is False


def test_flatten_deep_copies_input():
    tree = [{"id": "p", "label": "P", "children": [{"id": "c", "label": "C"}]}]
    flat = flatten_tree(tree, TreeConfig())
    flat.nodes["c"].label = "changed"
    assert "parent" not in tree[0]["children"][0]
    assert tree[0]["children"][0]["label"] == "C"


def test_partial_state_resolver():
    tree = [{"id": "a", "label": "a", "children": [
        {"id": "b", "label": "b", "children": [{"id": "c", "label": "c", "checked": True}]},
        {"id": "d", "label": "d"},
    ]}]
    nodes = flatten_tree(tree, TreeConfig()).nodes
    get = nodes.__getitem__

    assert get_partial_state(nodes["a"], get) is True
    assert get_partial_state(nodes["b"], get) is True
    assert get_partial_state(nodes["c"], get) is False  # leaf
    assert get_partial_state(nodes["d"], get) is False

    nodes["a"].checked = True
    assert get_partial_state(nodes["a"], get) is False


def _chain(depth):
    root = {"id": "n0", "label": "n0"}
    cursor = root
    for i in range(1, depth):
        child = {"id": f"n{i}", "label": f"n{i}"}
        cursor["children"] = [child]
        cursor = child
    return root


def test_deep_chain_flattens_and_cascades():
    manager = TreeManager(_chain(5000))
    assert len(manager.tree) == 5000
    assert manager.get_node_by_id("n4999").depth == 4999

    manager.set_node_checked_state("n0", True)
    assert [n.id for n in manager.get_tags()] == ["n0"]
    assert manager.get_node_by_id("n4999").checked is True


def test_extra_values_are_copied_not_shared():
    tree = [{"id": "p", "label": "P", "meta": {"tags": ["a"]}}]
    flat = flatten_tree(tree, TreeConfig())
    flat.nodes["p"].data["meta"]["tags"].append("b")
    assert tree[0]["meta"] == {"tags": ["a"]}


def test_simple_select_loads_at_most_one_checked_node():
    tree = [
        {"id": "x", "label": "x", "checked": True},
        {"id": "y", "label": "y", "checked": True},
    ]
    flat = flatten_tree(tree, TreeConfig(simple_select=True))
    assert [i for i, n in flat.nodes.items() if n.checked] == ["y"]
    assert flat.default_values == ["y"]
    assert tree[0]["checked"] is True

    manager = TreeManager(tree, True)
    assert manager.current_checked == "y"
    assert [i for i, n in manager.tree.items() if n.checked] == ["y"]
