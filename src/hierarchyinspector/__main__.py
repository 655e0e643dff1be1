from __future__ import annotations

import os
import sys
from pathlib import Path


def _configure_qt_logging() -> None:
    rules = os.environ.get("QT_LOGGING_RULES", "").strip()
    extra_rules = "qt.qpa.fonts.warning=false;qt.gui.imageio.warning=false"
    if rules:
        if extra_rules not in rules:
            os.environ["QT_LOGGING_RULES"] = f"{rules};{extra_rules}"
    else:
        os.environ["QT_LOGGING_RULES"] = extra_rules


def main(argv: list[str] | None = None) -> int:
    if sys.version_info < (3, 11):
        raise SystemExit(
            "hierarchyinspector requires Python 3.11+. "
            f"Current interpreter: {sys.executable} (Python {sys.version.split()[0]})"
        )
    _configure_qt_logging()
    args = list(sys.argv if argv is None else argv)
    try:
        from PySide6.QtGui import QColor, QPalette
        from PySide6.QtWidgets import QApplication
        from .main_window import InspectorWindow
    except ModuleNotFoundError as exc:
        if exc.name == "PySide6":
            raise SystemExit(
                "PySide6 is not installed in this interpreter. "
                "Activate the project venv and run `pip install -e .`."
            ) from exc
        raise

    def _apply_light_palette(app: QApplication) -> None:
        palette = QPalette()
        palette.setColor(QPalette.ColorRole.Window, QColor("#f3f5f9"))
        palette.setColor(QPalette.ColorRole.WindowText, QColor("#0f172a"))
        palette.setColor(QPalette.ColorRole.Base, QColor("#ffffff"))
        palette.setColor(QPalette.ColorRole.AlternateBase, QColor("#f8fafc"))
        palette.setColor(QPalette.ColorRole.Text, QColor("#0f172a"))
        palette.setColor(QPalette.ColorRole.Button, QColor("#ffffff"))
        palette.setColor(QPalette.ColorRole.ButtonText, QColor("#0f172a"))
        palette.setColor(QPalette.ColorRole.Highlight, QColor("#0284c7"))
        palette.setColor(QPalette.ColorRole.HighlightedText, QColor("#ffffff"))
        app.setPalette(palette)

    app = QApplication(args)
    app.setStyle("Fusion")
    _apply_light_palette(app)
    window = InspectorWindow()
    window.resize(1400, 900)
    window.show()

    # `hierarchyinspector shot.png dump.txt` opens the pair on startup.
    file_args = [Path(item) for item in args[1:] if not item.startswith("-")]
    if file_args:
        window.open_paths(file_args)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
