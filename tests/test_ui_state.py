from pathlib import Path

from hierarchyinspector.ui_state import (
    WorkspaceState,
    compute_toolbar_state,
    load_workspace_state,
    save_workspace_state,
)


def test_workspace_state_roundtrip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    original = WorkspaceState(last_directory="/tmp/snapshots", search_text="login")

    ok, message = save_workspace_state(original, config_path)

    assert ok
    assert message is None
    assert load_workspace_state(config_path) == original
    assert not list(config_path.parent.glob("*.tmp"))


def test_workspace_state_load_fallbacks(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    assert load_workspace_state(config_path) is None

    config_path.write_text("{invalid", encoding="utf-8")
    assert load_workspace_state(config_path) is None

    config_path.write_text("[1, 2]", encoding="utf-8")
    assert load_workspace_state(config_path) is None

    config_path.write_text('{"last_directory": null}', encoding="utf-8")
    assert load_workspace_state(config_path) == WorkspaceState()


def test_save_reports_unwritable_location(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a folder", encoding="utf-8")

    ok, message = save_workspace_state(WorkspaceState(), blocker / "config.json")

    assert not ok
    assert message


def test_toolbar_state_rules() -> None:
    idle = compute_toolbar_state(has_content=False, has_pending_files=False, is_loading=False)
    assert idle.can_open
    assert not idle.can_reset

    pending = compute_toolbar_state(has_content=False, has_pending_files=True, is_loading=False)
    assert pending.can_reset

    loaded = compute_toolbar_state(has_content=True, has_pending_files=False, is_loading=False)
    assert loaded.can_reset

    loading = compute_toolbar_state(has_content=True, has_pending_files=False, is_loading=True)
    assert not loading.can_open
    assert not loading.can_reset
