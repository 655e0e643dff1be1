from __future__ import annotations

import logging
from pathlib import Path
import threading
from typing import Any, Callable, Literal

from .hierarchy_parser import parse_hierarchy
from .models import ElementNode, InspectorSnapshot

logger = logging.getLogger(__name__)

LoadErrorKind = Literal["image", "hierarchy"]

IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg"})
HIERARCHY_SUFFIXES = frozenset({".txt", ".json"})


class SnapshotLoadError(Exception):
    def __init__(self, kind: LoadErrorKind, filename: str) -> None:
        self.kind = kind
        self.filename = filename
        if kind == "image":
            message = f"Failed to load screenshot from {filename}"
        else:
            message = f"Failed to load hierarchy text from {filename}"
        super().__init__(message)


def read_qimage(path: Path) -> Any | None:
    from PySide6.QtGui import QImage

    image = QImage(str(path))
    if image.isNull():
        return None
    return image


class SnapshotLoader:
    def __init__(
        self,
        parse: Callable[[str], list[ElementNode]] = parse_hierarchy,
        image_reader: Callable[[Path], Any | None] = read_qimage,
    ) -> None:
        self._parse = parse
        self._image_reader = image_reader

    def load(self, image_path: Path | str, hierarchy_path: Path | str) -> InspectorSnapshot:
        image_path = Path(image_path)
        hierarchy_path = Path(hierarchy_path)

        image = self._image_reader(image_path)
        if image is None:
            raise SnapshotLoadError("image", image_path.name)

        try:
            text = hierarchy_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SnapshotLoadError("hierarchy", hierarchy_path.name) from exc

        nodes = self._parse(text)
        logger.info("Loaded snapshot %s + %s (%d root node(s)).", image_path.name, hierarchy_path.name, len(nodes))
        return InspectorSnapshot(screenshot=image, hierarchy=nodes)

    def load_async(
        self,
        image_path: Path | str,
        hierarchy_path: Path | str,
        on_done: Callable[[InspectorSnapshot | None, SnapshotLoadError | None], None],
    ) -> threading.Thread:
        def _run() -> None:
            try:
                snapshot = self.load(image_path, hierarchy_path)
            except SnapshotLoadError as exc:
                logger.warning("%s", exc)
                on_done(None, exc)
                return
            on_done(snapshot, None)

        thread = threading.Thread(target=_run, name="snapshot-loader", daemon=True)
        thread.start()
        return thread
