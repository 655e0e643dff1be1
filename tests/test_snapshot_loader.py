from pathlib import Path

import pytest

from hierarchyinspector.models import InspectorSnapshot
from hierarchyinspector.snapshot_loader import SnapshotLoader, SnapshotLoadError

DUMP = "Element subtree:\n →Application, label: 'Demo'\n    Button, identifier: 'go'\n"


def _fake_reader(path: Path):
    return f"image:{path.name}" if path.exists() else None


def _write_pair(tmp_path: Path) -> tuple[Path, Path]:
    image_path = tmp_path / "screen.png"
    image_path.write_bytes(b"not-really-a-png")
    dump_path = tmp_path / "dump.txt"
    dump_path.write_text(DUMP, encoding="utf-8")
    return image_path, dump_path


def test_load_returns_screenshot_and_parsed_forest(tmp_path: Path) -> None:
    image_path, dump_path = _write_pair(tmp_path)

    snapshot = SnapshotLoader(image_reader=_fake_reader).load(image_path, dump_path)

    assert snapshot.screenshot == "image:screen.png"
    assert len(snapshot.hierarchy) == 1
    assert snapshot.hierarchy[0].children[0].identifier == "go"


def test_unreadable_image_reports_image_error(tmp_path: Path) -> None:
    _image_path, dump_path = _write_pair(tmp_path)

    with pytest.raises(SnapshotLoadError) as excinfo:
        SnapshotLoader(image_reader=_fake_reader).load(tmp_path / "missing.png", dump_path)

    assert excinfo.value.kind == "image"
    assert str(excinfo.value) == "Failed to load screenshot from missing.png"


def test_missing_hierarchy_reports_hierarchy_error(tmp_path: Path) -> None:
    image_path, _dump_path = _write_pair(tmp_path)

    with pytest.raises(SnapshotLoadError) as excinfo:
        SnapshotLoader(image_reader=_fake_reader).load(image_path, tmp_path / "gone.txt")

    assert excinfo.value.kind == "hierarchy"
    assert str(excinfo.value) == "Failed to load hierarchy text from gone.txt"


def test_undecodable_hierarchy_reports_hierarchy_error(tmp_path: Path) -> None:
    image_path, dump_path = _write_pair(tmp_path)
    dump_path.write_bytes(b"\xff\xfe\xfa broken")

    with pytest.raises(SnapshotLoadError) as excinfo:
        SnapshotLoader(image_reader=_fake_reader).load(image_path, dump_path)

    assert excinfo.value.kind == "hierarchy"


def test_load_async_delivers_result_and_error(tmp_path: Path) -> None:
    image_path, dump_path = _write_pair(tmp_path)
    loader = SnapshotLoader(image_reader=_fake_reader)
    results: list[tuple[object, object]] = []

    loader.load_async(image_path, dump_path, lambda snapshot, error: results.append((snapshot, error))).join(5)
    loader.load_async(tmp_path / "nope.png", dump_path, lambda snapshot, error: results.append((snapshot, error))).join(5)

    assert isinstance(results[0][0], InspectorSnapshot)
    assert results[0][1] is None
    assert results[1][0] is None
    assert isinstance(results[1][1], SnapshotLoadError)


def test_qimage_reader_decodes_real_png(tmp_path: Path) -> None:
    QtGui = pytest.importorskip("PySide6.QtGui")
    image = QtGui.QImage(8, 4, QtGui.QImage.Format.Format_RGB32)
    image.fill(0xFF3366)
    image_path = tmp_path / "screen.png"
    assert image.save(str(image_path), "PNG")
    dump_path = tmp_path / "dump.txt"
    dump_path.write_text(DUMP, encoding="utf-8")

    snapshot = SnapshotLoader().load(image_path, dump_path)

    assert snapshot.screenshot.width() == 8
    assert snapshot.screenshot.height() == 4

    with pytest.raises(SnapshotLoadError):
        SnapshotLoader().load(dump_path, dump_path)
