from hierarchyinspector.hierarchy_parser import parse_hierarchy
from hierarchyinspector.sidebar_state import HierarchySidebarState, flatten_nodes

DUMP = """Window
  Other
    Button, identifier: 'loginButton', label: 'Log in'
    TextField, identifier: 'email'
  StaticText, label: 'Welcome Back'
Alert
"""


def test_flatten_nodes_preserves_preorder_and_depth() -> None:
    rows = flatten_nodes(parse_hierarchy(DUMP))

    assert [(node.type, depth) for node, depth in rows] == [
        ("Window", 0),
        ("Other", 1),
        ("Button", 2),
        ("TextField", 2),
        ("StaticText", 1),
        ("Alert", 0),
    ]


def test_search_matches_type_identifier_and_label_case_insensitively() -> None:
    forest = parse_hierarchy(DUMP)
    state = HierarchySidebarState(search_text="  WELCOME ")
    assert [node.type for node, _ in state.visible_nodes(forest)] == ["StaticText"]

    state.search_text = "login"
    assert [node.type for node, _ in state.visible_nodes(forest)] == ["Button"]

    state.search_text = "text"
    assert [node.type for node, _ in state.visible_nodes(forest)] == ["TextField", "StaticText"]

    state.search_text = "   "
    assert len(state.visible_nodes(forest)) == 6


def test_prune_selection_clears_hidden_node() -> None:
    forest = parse_hierarchy(DUMP)
    button = forest[0].children[0].children[0]
    state = HierarchySidebarState(selected_node_id=button.id)

    state.search_text = "log"
    assert state.prune_selection(forest) is False
    assert state.selected_node_id == button.id

    state.search_text = "alert"
    assert state.prune_selection(forest) is True
    assert state.selected_node_id is None


def test_no_matches_hint_only_for_active_search() -> None:
    forest = parse_hierarchy(DUMP)

    assert HierarchySidebarState(search_text="zzz").shows_no_matches(forest)
    assert not HierarchySidebarState().shows_no_matches(forest)
    assert not HierarchySidebarState().shows_no_matches([])
