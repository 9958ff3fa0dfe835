"""Main application window for the file browser."""

import logging
import sys
from pathlib import Path

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QAction, QKeySequence, QStandardItem, QStandardItemModel
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QToolBar,
    QTreeView,
    QVBoxLayout,
    QWidget,
)

from .config import APP_NAME, WINDOW_SIZE, WINDOW_TITLE, log_level_from_env
from .formatting import format_entry_size, format_modified
from .log import configure_logging
from .models import DirEntry
from .navigation import BrowserState, resolve_start_dir
from .opener import OpenFileError, open_file

logger = logging.getLogger(__name__)

DIR_ICON = "\U0001f4c1"
FILE_ICON = "\U0001f4c4"


class BreadcrumbBar(QWidget):
    """Clickable path segments for the current directory."""

    segment_clicked = pyqtSignal(str)  # Path of the clicked prefix

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(2)

    def set_segments(self, segments: list[tuple[str, Path]]):
        """Rebuild the bar from (label, path) pairs, root first."""
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        for i, (label, path) in enumerate(segments):
            # The root label already ends with a separator
            if i > 1:
                self._layout.addWidget(QLabel("/"))
            button = QPushButton(label)
            button.setFlat(True)
            button.clicked.connect(
                lambda _checked=False, p=path: self.segment_clicked.emit(str(p))
            )
            self._layout.addWidget(button)
        self._layout.addStretch(1)


class FileBrowserWidget(QTreeView):
    """Tree view listing the current directory."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._entries: dict[int, DirEntry] = {}
        self._setup_model()
        self._setup_view()

    def _setup_model(self):
        self._model = QStandardItemModel()
        self._model.setHorizontalHeaderLabels(["Name", "Size", "Modified"])
        self.setModel(self._model)

    def _setup_view(self):
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setRootIsDecorated(False)
        # Header sorting would break the directories-first order
        self.setSortingEnabled(False)
        self.setAlternatingRowColors(True)

        header = self.header()
        header.setStretchLastSection(False)
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)

    def set_entries(self, entries: list[DirEntry]):
        """Populate the view. Entries are expected in display order."""
        self._model.removeRows(0, self._model.rowCount())
        self._entries.clear()

        for row, entry in enumerate(entries):
            icon = DIR_ICON if entry.is_directory else FILE_ICON
            name_item = QStandardItem(f"{icon} {entry.name}")
            name_item.setEditable(False)

            size_item = QStandardItem(format_entry_size(entry))
            size_item.setEditable(False)

            modified_item = QStandardItem(format_modified(entry.modified))
            modified_item.setEditable(False)

            self._model.appendRow([name_item, size_item, modified_item])
            self._entries[row] = entry

    def get_entry_at_index(self, index) -> DirEntry | None:
        """Get the DirEntry at the given model index."""
        return self._entries.get(index.row())


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, start_dir: str | Path | None = None):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        self.state = BrowserState(resolve_start_dir(start_dir))

        self._setup_ui()
        self._connect_signals()
        self._refresh_directory()

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self._create_toolbar()

        nav_layout = QHBoxLayout()
        self.up_button = QPushButton("Up")
        self.up_button.setFixedWidth(50)
        nav_layout.addWidget(self.up_button)
        self.breadcrumbs = BreadcrumbBar()
        nav_layout.addWidget(self.breadcrumbs, 1)
        layout.addLayout(nav_layout)

        self.file_browser = FileBrowserWidget()
        layout.addWidget(self.file_browser)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _create_toolbar(self):
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.refresh_action = QAction("Refresh", self)
        self.refresh_action.setShortcut(QKeySequence("F5"))
        toolbar.addAction(self.refresh_action)

    def _connect_signals(self):
        self.refresh_action.triggered.connect(self._refresh_directory)
        self.up_button.clicked.connect(self._navigate_up)
        self.breadcrumbs.segment_clicked.connect(self._navigate_to)
        self.file_browser.clicked.connect(self._on_item_clicked)
        self.file_browser.doubleClicked.connect(self._on_item_double_clicked)

    # Navigation methods

    def _navigate_to(self, path: str):
        """Navigate to a specific path."""
        self.state.navigate_to(path)
        self._update_view()

    def _navigate_up(self):
        """Navigate to parent directory."""
        if self.state.navigate_up():
            self._update_view()

    def _on_item_clicked(self, index):
        """Enter a directory on single click."""
        entry = self.file_browser.get_entry_at_index(index)
        if entry and self.state.enter(entry):
            self._update_view()

    def _on_item_double_clicked(self, index):
        """Open a file with the system handler on double click."""
        entry = self.file_browser.get_entry_at_index(index)
        if entry is None or entry.is_directory:
            return
        try:
            open_file(entry.path)
        except OpenFileError as e:
            logger.error("Failed to open file: %s", e)

    def _refresh_directory(self):
        """Re-read the current directory listing."""
        self.state.refresh()
        self._update_view()

    def _update_view(self):
        """Push the browser state into the widgets."""
        self.file_browser.set_entries(self.state.entries)
        self.breadcrumbs.set_segments(self.state.breadcrumbs())
        self.up_button.setEnabled(self.state.can_navigate_up())
        if self.state.error:
            self.status_bar.showMessage(self.state.error)
        else:
            self.status_bar.showMessage(
                f"{len(self.state.entries)} items in {self.state.current_dir}"
            )


def main():
    """Application entry point."""
    configure_logging(log_level_from_env())
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    start_dir = sys.argv[1] if len(sys.argv) > 1 else None
    window = MainWindow(start_dir)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
