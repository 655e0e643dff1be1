from pathlib import Path

from hierarchyinspector.inspector_state import UNRECOGNIZED_DROP_MESSAGE, InspectorState
from hierarchyinspector.models import ElementNode, InspectorSnapshot
from hierarchyinspector.snapshot_loader import SnapshotLoadError


def _snapshot() -> InspectorSnapshot:
    child = ElementNode(type="Button", identifier="go")
    root = ElementNode(type="Window", children=[child])
    return InspectorSnapshot(screenshot=object(), hierarchy=[root])


def test_accept_paths_waits_for_both_files() -> None:
    state = InspectorState()

    assert state.accept_paths([Path("/tmp/screen.PNG")]) is None
    assert state.pending_image_path == Path("/tmp/screen.PNG")
    assert state.has_pending_files

    ready = state.accept_paths(["/tmp/dump.txt"])

    assert ready == (Path("/tmp/screen.PNG"), Path("/tmp/dump.txt"))
    assert not state.has_pending_files


def test_accept_paths_keeps_first_file_per_slot() -> None:
    state = InspectorState()

    ready = state.accept_paths(["a.jpg", "b.png", "dump.json", "other.txt"])

    assert ready == (Path("a.jpg"), Path("dump.json"))


def test_accept_paths_reports_unrecognized_drop() -> None:
    state = InspectorState()

    assert state.accept_paths(["notes.md", "archive.zip"]) is None
    assert state.error_message == UNRECOGNIZED_DROP_MESSAGE
    assert state.accept_paths([]) is None


def test_snapshot_lifecycle_and_selection_side_table() -> None:
    state = InspectorState()
    state.begin_load()
    assert state.is_loading

    snapshot = _snapshot()
    state.apply_snapshot(snapshot)
    button = snapshot.hierarchy[0].children[0]

    assert not state.is_loading
    assert state.has_content
    state.select(button.id)
    state.hover(snapshot.hierarchy[0].id)
    assert state.selected_node is button
    assert state.hovered_node is snapshot.hierarchy[0]
    assert state.is_selected(button)
    assert not state.is_selected(snapshot.hierarchy[0])

    state.select("unknown")
    assert state.selected_node is None


def test_apply_error_and_reset() -> None:
    state = InspectorState()
    state.begin_load()
    state.apply_error(SnapshotLoadError("image", "screen.png"))

    assert state.error_message == "Failed to load screenshot from screen.png"
    assert not state.is_loading

    state.apply_snapshot(_snapshot())
    state.reset()
    assert state.hierarchy == []
    assert state.screenshot is None
    assert state.error_message is None
    assert state.selection.selected_id is None
    assert not state.has_content
