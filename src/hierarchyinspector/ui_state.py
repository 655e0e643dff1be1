from __future__ import annotations

from dataclasses import asdict, dataclass
import json
from pathlib import Path
import tempfile

CONFIG_DIR = Path.home() / ".hierarchyinspector"
CONFIG_PATH = CONFIG_DIR / "config.json"
LOG_PATH = CONFIG_DIR / "ui.log"


@dataclass(slots=True)
class WorkspaceState:
    last_directory: str = ""
    search_text: str = ""


@dataclass(frozen=True, slots=True)
class ToolbarState:
    can_open: bool
    can_reset: bool


def load_workspace_state(config_path: Path | None = None) -> WorkspaceState | None:
    path = config_path or CONFIG_PATH
    if not path.exists() or not path.is_file():
        return None

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, TypeError):
        return None

    if not isinstance(payload, dict):
        return None

    return WorkspaceState(
        last_directory=str(payload.get("last_directory", "") or ""),
        search_text=str(payload.get("search_text", "") or ""),
    )


def save_workspace_state(state: WorkspaceState, config_path: Path | None = None) -> tuple[bool, str | None]:
    path = config_path or CONFIG_PATH

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return False, f"Could not create config folder: {exc}"

    payload = json.dumps(asdict(state), ensure_ascii=True, indent=2, sort_keys=True)
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=str(path.parent),
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            handle.write(payload)
            handle.flush()
            temp_path = Path(handle.name)

        temp_path.replace(path)
    except OSError as exc:
        if temp_path and temp_path.exists():
            temp_path.unlink(missing_ok=True)
        return False, f"Could not write workspace state: {exc}"

    return True, None


def compute_toolbar_state(*, has_content: bool, has_pending_files: bool, is_loading: bool) -> ToolbarState:
    return ToolbarState(
        can_open=not is_loading,
        can_reset=(has_content or has_pending_files) and not is_loading,
    )
