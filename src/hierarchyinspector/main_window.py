from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PySide6.QtCore import QPointF, QRectF, QSettings, Qt, Signal
from PySide6.QtGui import (
    QCloseEvent,
    QColor,
    QDragEnterEvent,
    QDropEvent,
    QGuiApplication,
    QImage,
    QMouseEvent,
    QPainter,
    QPaintEvent,
    QPen,
)
from PySide6.QtWidgets import (
    QFileDialog,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QSizePolicy,
    QSplitter,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from .canvas_geometry import CanvasScale, calculate_scale, map_frame_to_canvas, node_at_point
from .inspector_state import InspectorState
from .models import ElementNode, InspectorSnapshot, LocatorSuggestion
from .node_detail import NodeDetailState
from .sidebar_state import HierarchySidebarState
from .snapshot_loader import SnapshotLoader, SnapshotLoadError
from .ui_state import (
    CONFIG_DIR,
    LOG_PATH,
    WorkspaceState,
    compute_toolbar_state,
    load_workspace_state,
    save_workspace_state,
)

_NODE_ID_ROLE = Qt.ItemDataRole.UserRole
_INDENT_PER_DEPTH = 3


class TopBar(QFrame):
    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("TopBar")

        title = QLabel("Inspector")
        title.setObjectName("Title")
        self.open_button = QPushButton("Open...")
        self.reset_button = QPushButton("Reset")
        self.reset_button.setEnabled(False)

        self.status_pill = QLabel("OK")
        self.status_pill.setObjectName("StatusPill")
        self.status_pill.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.status_pill.setMinimumWidth(76)
        self.status_pill.setMaximumWidth(96)

        for button, width in ((self.open_button, 90), (self.reset_button, 80)):
            button.setMinimumWidth(width)
            button.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)
        layout.addWidget(title)
        layout.addStretch(1)
        layout.addWidget(self.open_button)
        layout.addWidget(self.reset_button)
        layout.addWidget(self.status_pill)

    def set_status_pill(self, level: str) -> None:
        normalized = level.lower()
        if normalized not in {"ok", "warning", "error"}:
            normalized = "ok"
        self.status_pill.setText(normalized.capitalize())
        self.status_pill.setProperty("level", normalized)
        self.status_pill.style().unpolish(self.status_pill)
        self.status_pill.style().polish(self.status_pill)


class DropZone(QFrame):
    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("DropZone")

        self.title_label = QLabel("Native Hierarchy Inspector")
        self.title_label.setObjectName("DropTitle")
        self.hint_label = QLabel("Drag and Drop Files Here")
        self.hint_label.setObjectName("Muted")
        self.requirements_label = QLabel(
            "Required Files:\n"
            "1. Screenshot (.png or .jpg)\n"
            "2. Hierarchy Dump (.txt from app.debugDescription)"
        )
        self.image_row = QLabel()
        self.hierarchy_row = QLabel()
        self.error_label = QLabel()
        self.error_label.setObjectName("ErrorText")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(15)
        layout.addStretch(1)
        for widget in (
            self.title_label,
            self.hint_label,
            self.requirements_label,
            self.image_row,
            self.hierarchy_row,
            self.error_label,
        ):
            widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(widget)
        layout.addStretch(1)

    def set_dragging(self, dragging: bool) -> None:
        self.setProperty("dragging", dragging)
        self.style().unpolish(self)
        self.style().polish(self)

    def show_pending(self, pending_image: Path | None, pending_hierarchy: Path | None, error: str | None) -> None:
        has_pending = pending_image is not None or pending_hierarchy is not None
        self.title_label.setText("Waiting for remaining file:" if has_pending else "Native Hierarchy Inspector")
        self.hint_label.setVisible(not has_pending)
        self.requirements_label.setVisible(not has_pending)
        self.image_row.setVisible(has_pending)
        self.hierarchy_row.setVisible(has_pending)
        self.image_row.setText(self._pending_text("Screenshot", pending_image))
        self.hierarchy_row.setText(self._pending_text("Hierarchy Dump", pending_hierarchy))
        self.error_label.setText(f"Error: {error}" if error else "")
        self.error_label.setVisible(bool(error))

    @staticmethod
    def _pending_text(title: str, path: Path | None) -> str:
        if path is None:
            return f"Awaiting {title.lower()}..."
        return f"{title}: {path.name}"


class HierarchySidebar(QFrame):
    selection_changed = Signal(object)
    hover_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("Sidebar")
        self.state = HierarchySidebarState()
        self._forest: list[ElementNode] = []
        self._rendering = False

        header = QLabel("View Hierarchy")
        header.setObjectName("SectionTitle")
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search (type, identifier, label)")
        self.search_input.setClearButtonEnabled(True)
        self.list_widget = QListWidget()
        self.list_widget.setObjectName("HierarchyList")
        self.list_widget.setMouseTracking(True)
        self.empty_label = QLabel("No matches")
        self.empty_label.setObjectName("Muted")
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setVisible(False)

        self.search_input.textChanged.connect(self._on_search_changed)
        self.list_widget.currentItemChanged.connect(self._on_current_item_changed)
        self.list_widget.itemEntered.connect(self._on_item_entered)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)
        layout.addWidget(header)
        layout.addWidget(self.search_input)
        layout.addWidget(self.list_widget, 1)
        layout.addWidget(self.empty_label)

    def set_forest(self, forest: list[ElementNode]) -> None:
        self._forest = forest
        self.state.selected_node_id = None
        self._render()

    def set_selected_node_id(self, node_id: str | None) -> None:
        self.state.selected_node_id = node_id
        self._render()

    def leaveEvent(self, event) -> None:  # noqa: N802 (Qt API)
        self.hover_changed.emit(None)
        super().leaveEvent(event)

    def _render(self) -> None:
        self._rendering = True
        try:
            self.list_widget.clear()
            current: QListWidgetItem | None = None
            for node, depth in self.state.visible_nodes(self._forest):
                item = QListWidgetItem(" " * (depth * _INDENT_PER_DEPTH) + node.display_name)
                item.setData(_NODE_ID_ROLE, node.id)
                item.setToolTip(node.display_name)
                self.list_widget.addItem(item)
                if node.id == self.state.selected_node_id:
                    current = item
            if current is not None:
                self.list_widget.setCurrentItem(current)
                self.list_widget.scrollToItem(current)
            self.empty_label.setVisible(self.state.shows_no_matches(self._forest))
        finally:
            self._rendering = False

    def _on_search_changed(self, text: str) -> None:
        self.state.search_text = text
        if self.state.prune_selection(self._forest):
            self.selection_changed.emit(None)
        self._render()

    def _on_current_item_changed(self, current: QListWidgetItem | None, _previous: QListWidgetItem | None) -> None:
        if self._rendering:
            return
        node_id = current.data(_NODE_ID_ROLE) if current is not None else None
        self.state.selected_node_id = node_id
        self.selection_changed.emit(node_id)

    def _on_item_entered(self, item: QListWidgetItem) -> None:
        self.hover_changed.emit(item.data(_NODE_ID_ROLE))


class ScreenshotCanvas(QWidget):
    node_hovered = Signal(object)
    node_clicked = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("Canvas")
        self.setMouseTracking(True)
        self.setMinimumWidth(500)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._image: QImage | None = None
        self._forest: list[ElementNode] = []
        self._selected: ElementNode | None = None
        self._hovered: ElementNode | None = None
        self._loading = False

    def set_snapshot(self, image: QImage | None, forest: list[ElementNode]) -> None:
        self._image = image
        self._forest = forest
        self._selected = None
        self._hovered = None
        self.update()

    def set_loading(self, loading: bool) -> None:
        self._loading = loading
        self.update()

    def set_highlights(self, selected: ElementNode | None, hovered: ElementNode | None) -> None:
        self._selected = selected
        self._hovered = hovered
        self.update()

    def current_scale(self) -> CanvasScale:
        if self._image is None:
            return CanvasScale(0.0, 0.0, 0.0)
        return calculate_scale(self.width(), self.height(), self._image.width(), self._image.height(), self._forest)

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802 (Qt API)
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        try:
            if self._loading:
                painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, "Loading and Parsing...")
                return
            scale = self.current_scale()
            if self._image is None or not scale.is_valid:
                return

            origin = self._image_origin(scale)
            painter.drawImage(QRectF(origin.x(), origin.y(), scale.draw_width, scale.draw_height), self._image)
            painter.translate(origin)
            if self._hovered is not None:
                self._draw_overlay(painter, self._hovered, scale, hover=True)
            if self._selected is not None:
                self._draw_overlay(painter, self._selected, scale, hover=False)
        finally:
            painter.end()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # noqa: N802 (Qt API)
        self.node_hovered.emit(self._node_under(event.position()))
        super().mouseMoveEvent(event)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802 (Qt API)
        if event.button() == Qt.MouseButton.LeftButton:
            node = self._node_under(event.position())
            if node is not None:
                self.node_clicked.emit(node)
        super().mousePressEvent(event)

    def leaveEvent(self, event) -> None:  # noqa: N802 (Qt API)
        self.node_hovered.emit(None)
        super().leaveEvent(event)

    def _node_under(self, position: QPointF) -> ElementNode | None:
        scale = self.current_scale()
        if not scale.is_valid:
            return None
        origin = self._image_origin(scale)
        return node_at_point(self._forest, position.x() - origin.x(), position.y() - origin.y(), scale)

    def _image_origin(self, scale: CanvasScale) -> QPointF:
        return QPointF((self.width() - scale.draw_width) / 2, (self.height() - scale.draw_height) / 2)

    @staticmethod
    def _draw_overlay(painter: QPainter, node: ElementNode, scale: CanvasScale, hover: bool) -> None:
        box = map_frame_to_canvas(node.frame, scale)
        if box is None:
            return
        rect = QRectF(box.left, box.top, box.width, box.height)
        fill = QColor(255, 0, 0)
        fill.setAlphaF(0.1 if hover else 0.3)
        stroke = QColor(255, 214, 0) if hover else QColor(255, 0, 0)
        if hover:
            stroke.setAlphaF(0.8)
        painter.fillRect(rect, fill)
        painter.setPen(QPen(stroke, 2 if hover else 3))
        painter.drawRect(rect)


class SuggestionCard(QFrame):
    copied = Signal(str)

    def __init__(self, suggestion: LocatorSuggestion) -> None:
        super().__init__()
        self.setObjectName("SuggestionCard")
        self.suggestion = suggestion

        title = QLabel(suggestion.title)
        title.setObjectName("CardTitleStrong" if suggestion.recommended else "CardTitle")
        copy_button = QPushButton("Copy")
        copy_button.clicked.connect(self._copy)

        header = QHBoxLayout()
        header.setSpacing(8)
        header.addWidget(title)
        if suggestion.recommended:
            badge = QLabel("Recommended")
            badge.setObjectName("Badge")
            header.addWidget(badge)
        header.addStretch(1)
        header.addWidget(copy_button)

        code_view = QPlainTextEdit()
        code_view.setObjectName("CodeView")
        code_view.setReadOnly(True)
        code_view.setPlainText(suggestion.code)
        code_view.setMaximumHeight(22 * (suggestion.code.count("\n") + 2))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)
        layout.addLayout(header)
        layout.addWidget(code_view)

    def _copy(self) -> None:
        QGuiApplication.clipboard().setText(self.suggestion.code)
        self.copied.emit(self.suggestion.title)


class NodeDetailPanel(QFrame):
    suggestion_copied = Signal(str)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("DetailPanel")

        header = QLabel("Details")
        header.setObjectName("SectionTitle")
        self.placeholder_label = QLabel("Select a node to see details.")
        self.placeholder_label.setObjectName("Muted")

        self.content = QWidget()
        self.content_layout = QVBoxLayout(self.content)
        self.content_layout.setContentsMargins(0, 0, 0, 0)
        self.content_layout.setSpacing(10)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        scroll.setWidget(self.content)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(12)
        layout.addWidget(header)
        layout.addWidget(self.placeholder_label)
        layout.addWidget(scroll, 1)

    def show_detail(self, state: NodeDetailState) -> None:
        while self.content_layout.count():
            item = self.content_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        self.placeholder_label.setVisible(not state.has_node)
        if not state.has_node:
            return

        for line in state.detail_lines:
            row = QLabel(f"{line.title}: {line.value}")
            row.setObjectName("DetailRow")
            row.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            row.setWordWrap(True)
            self.content_layout.addWidget(row)

        suggestions_title = QLabel("UI Test Suggestions")
        suggestions_title.setObjectName("SectionTitle")
        self.content_layout.addWidget(suggestions_title)
        suggestions = state.suggestions
        if not suggestions:
            empty = QLabel("No identifier or label to build a locator from.")
            empty.setObjectName("Muted")
            self.content_layout.addWidget(empty)
        for suggestion in suggestions:
            card = SuggestionCard(suggestion)
            card.copied.connect(self.suggestion_copied.emit)
            self.content_layout.addWidget(card)
        self.content_layout.addStretch(1)


class BottomStatusBar(QFrame):
    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("BottomStatusBar")

        self.last_action_value = QLabel("-")
        self.last_action_value.setObjectName("Muted")
        self.last_action_value.setMinimumWidth(0)
        self.last_action_value.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Preferred)
        self.last_action_value.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        root = QHBoxLayout(self)
        root.setContentsMargins(8, 6, 8, 6)
        root.setSpacing(12)
        root.addWidget(QLabel("Last Action:"))
        root.addWidget(self.last_action_value, 1)

    def set_last_action(self, text: str) -> None:
        value = text or "-"
        self.last_action_value.setText(value)
        self.last_action_value.setToolTip(value)


class InspectorWindow(QMainWindow):
    snapshot_finished = Signal(object, object)

    def __init__(self, loader: SnapshotLoader | None = None) -> None:
        super().__init__()
        self.logger = self._build_logger()
        self.setWindowTitle("hierarchyinspector")
        self.setMinimumSize(800, 600)
        self.setAcceptDrops(True)

        self.state = InspectorState()
        self.loader = loader or SnapshotLoader()
        self._settings = QSettings("hierarchyinspector", "workspace")
        self._workspace = load_workspace_state() or WorkspaceState()

        self.top_bar = TopBar()
        self.drop_zone = DropZone()
        self.sidebar = HierarchySidebar()
        self.canvas = ScreenshotCanvas()
        self.detail_panel = NodeDetailPanel()
        self.status_bar = BottomStatusBar()

        self.splitter = QSplitter(Qt.Orientation.Horizontal)
        self.splitter.addWidget(self.sidebar)
        self.splitter.addWidget(self.canvas)
        self.splitter.addWidget(self.detail_panel)
        self.splitter.setStretchFactor(0, 2)
        self.splitter.setStretchFactor(1, 3)
        self.splitter.setStretchFactor(2, 2)

        self.pages = QStackedWidget()
        self.pages.addWidget(self.drop_zone)
        self.pages.addWidget(self.splitter)

        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)
        root.addWidget(self.top_bar)
        root.addWidget(self.pages, 1)
        root.addWidget(self.status_bar)
        self.setCentralWidget(central)

        self.top_bar.open_button.clicked.connect(self._open_files)
        self.top_bar.reset_button.clicked.connect(self._reset)
        self.sidebar.selection_changed.connect(self._on_node_selected)
        self.sidebar.hover_changed.connect(self._on_node_hovered)
        self.canvas.node_hovered.connect(self._on_canvas_hover)
        self.canvas.node_clicked.connect(self._on_canvas_click)
        self.detail_panel.suggestion_copied.connect(self._on_suggestion_copied)
        self.snapshot_finished.connect(self._apply_load_result)
        self.splitter.splitterMoved.connect(self._save_splitter_sizes)

        self.sidebar.search_input.setText(self._workspace.search_text)
        self._apply_style()
        self._restore_splitter_sizes()
        self._refresh()
        self.logger.info("Inspector window ready.")

    def load_files(self, image_path: Path, hierarchy_path: Path) -> None:
        self.state.begin_load()
        self.logger.info("Loading snapshot: image=%s hierarchy=%s", image_path, hierarchy_path)
        self._set_status(f"Loading {image_path.name} + {hierarchy_path.name}...")
        self._refresh()
        self.loader.load_async(image_path, hierarchy_path, self._emit_load_result)

    def dragEnterEvent(self, event: QDragEnterEvent) -> None:  # noqa: N802 (Qt API)
        if event.mimeData().hasUrls():
            self.drop_zone.set_dragging(True)
            event.acceptProposedAction()
            return
        event.ignore()

    def dragLeaveEvent(self, event) -> None:  # noqa: N802 (Qt API)
        self.drop_zone.set_dragging(False)
        super().dragLeaveEvent(event)

    def dropEvent(self, event: QDropEvent) -> None:  # noqa: N802 (Qt API)
        self.drop_zone.set_dragging(False)
        paths = [Path(url.toLocalFile()) for url in event.mimeData().urls() if url.isLocalFile()]
        event.acceptProposedAction()
        self.open_paths(paths)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 (Qt API)
        self._save_splitter_sizes()
        self._persist_workspace_state()
        super().closeEvent(event)

    def open_paths(self, paths: list[Path]) -> None:
        self.logger.info("Received %d file(s).", len(paths))
        ready = self.state.accept_paths(paths)
        if paths:
            self._workspace.last_directory = str(paths[0].parent)
        if ready is not None:
            self.load_files(*ready)
            return
        if self.state.error_message:
            self._set_status(self.state.error_message, level="warning")
        self._refresh()

    def _open_files(self) -> None:
        start_dir = self._workspace.last_directory or str(Path.home())
        selected, _filter = QFileDialog.getOpenFileNames(
            self,
            "Select screenshot and hierarchy dump",
            start_dir,
            "Snapshot files (*.png *.jpg *.jpeg *.txt *.json);;All files (*)",
        )
        if selected:
            self.open_paths([Path(item) for item in selected])

    def _reset(self) -> None:
        self.state.reset()
        self.canvas.set_snapshot(None, [])
        self.sidebar.set_forest([])
        self._set_status("Reset.")
        self._refresh()

    def _emit_load_result(self, snapshot: InspectorSnapshot | None, error: SnapshotLoadError | None) -> None:
        # Called from the loader thread; the signal queues delivery onto the UI thread.
        self.snapshot_finished.emit(snapshot, error)

    def _apply_load_result(self, snapshot: Any, error: Any) -> None:
        if error is not None:
            self.state.apply_error(error)
            self.logger.warning("Snapshot load failed: %s", error)
            self._set_status(str(error), level="error")
        elif snapshot is not None:
            try:
                self.state.apply_snapshot(snapshot)
                self.sidebar.set_forest(self.state.hierarchy)
                self.canvas.set_snapshot(self.state.screenshot, self.state.hierarchy)
            except Exception as exc:
                self._handle_ui_exception("Could not display snapshot.", exc)
                return
            self._set_status(f"Loaded {sum(1 for _ in self._iter_nodes())} element(s).")
        self._refresh()

    def _iter_nodes(self):
        for root in self.state.hierarchy:
            yield from root.iter_subtree()

    def _on_node_selected(self, node_id: str | None) -> None:
        self.state.select(node_id)
        self._refresh_selection()

    def _on_node_hovered(self, node_id: str | None) -> None:
        self.state.hover(node_id)
        self._refresh_highlights()

    def _on_canvas_hover(self, node: ElementNode | None) -> None:
        self._on_node_hovered(node.id if node is not None else None)

    def _on_canvas_click(self, node: ElementNode) -> None:
        self.state.select(node.id)
        self.sidebar.set_selected_node_id(self.state.selection.selected_id)
        self._refresh_selection()

    def _on_suggestion_copied(self, title: str) -> None:
        self._set_status(f"Copied: {title}")

    def _refresh(self) -> None:
        toolbar = compute_toolbar_state(
            has_content=self.state.has_content,
            has_pending_files=self.state.has_pending_files,
            is_loading=self.state.is_loading,
        )
        self.top_bar.open_button.setEnabled(toolbar.can_open)
        self.top_bar.reset_button.setEnabled(toolbar.can_reset)
        self.canvas.set_loading(self.state.is_loading)

        show_inspector = self.state.screenshot is not None or self.state.is_loading
        self.pages.setCurrentIndex(1 if show_inspector else 0)
        self.drop_zone.show_pending(
            self.state.pending_image_path,
            self.state.pending_hierarchy_path,
            self.state.error_message,
        )
        self._refresh_selection()

    def _refresh_selection(self) -> None:
        selected = self.state.selected_node
        self.detail_panel.show_detail(NodeDetailState(node=selected, is_selected=self.state.is_selected(selected)))
        self._refresh_highlights()

    def _refresh_highlights(self) -> None:
        self.canvas.set_highlights(self.state.selected_node, self.state.hovered_node)

    def _set_status(self, message: str, level: str = "ok") -> None:
        self.status_bar.set_last_action(message)
        self.top_bar.set_status_pill(level)

    def _persist_workspace_state(self) -> None:
        self._workspace.search_text = self.sidebar.search_input.text()
        ok, message = save_workspace_state(self._workspace)
        if not ok:
            self.logger.warning("Failed to persist workspace state: %s", message)

    def _restore_splitter_sizes(self) -> None:
        sizes = self._settings.value("splitter_sizes")
        if not isinstance(sizes, (list, tuple)):
            self.splitter.setSizes([450, 640, 420])
            return
        try:
            parsed = [int(value) for value in sizes]
        except (TypeError, ValueError):
            return
        if len(parsed) == 3 and all(value > 0 for value in parsed):
            self.splitter.setSizes(parsed)

    def _save_splitter_sizes(self, *_args) -> None:
        self._settings.setValue("splitter_sizes", self.splitter.sizes())

    def _apply_style(self) -> None:
        self.setStyleSheet(
            """
            QFrame#TopBar, QFrame#BottomStatusBar {
                background: #ffffff;
                border-bottom: 1px solid #e2e8f0;
            }
            QLabel#Title, QLabel#SectionTitle {
                font-weight: 600;
                font-size: 13px;
            }
            QLabel#DropTitle {
                font-size: 24px;
                font-weight: 700;
            }
            QLabel#Muted {
                color: #64748b;
            }
            QLabel#ErrorText {
                color: #dc2626;
            }
            QFrame#DropZone[dragging="true"] {
                border: 3px dashed #0284c7;
                border-radius: 10px;
                margin: 20px;
            }
            QLabel#StatusPill {
                border-radius: 10px;
                padding: 2px 8px;
                background: #dcfce7;
                color: #166534;
            }
            QLabel#StatusPill[level="warning"] {
                background: #fef9c3;
                color: #854d0e;
            }
            QLabel#StatusPill[level="error"] {
                background: #fee2e2;
                color: #991b1b;
            }
            QListWidget#HierarchyList, QLabel#DetailRow, QPlainTextEdit#CodeView {
                font-family: Menlo, Consolas, monospace;
                font-size: 11px;
            }
            QFrame#SuggestionCard {
                background: #f8fafc;
                border: 1px solid #e2e8f0;
                border-radius: 8px;
            }
            QLabel#CardTitleStrong {
                font-weight: 600;
            }
            QLabel#Badge {
                background: #e2e8f0;
                border-radius: 6px;
                padding: 1px 6px;
                font-size: 10px;
                font-weight: 600;
            }
            """
        )

    @staticmethod
    def _build_logger() -> logging.Logger:
        logger = logging.getLogger("hierarchyinspector.ui")
        if logger.handlers:
            return logger

        logger.setLevel(logging.INFO)
        logger.propagate = False
        try:
            CONFIG_DIR.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            logger.addHandler(file_handler)
        except OSError:
            # Fallback to stderr logging if file logger cannot be initialized.
            stream_handler = logging.StreamHandler()
            stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            logger.addHandler(stream_handler)
        return logger

    def _handle_ui_exception(self, user_message: str, exc: Exception) -> None:
        self.logger.exception("%s: %s", user_message, exc)
        self._set_status(user_message, level="error")
