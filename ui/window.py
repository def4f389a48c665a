import logging
from PyQt6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QLineEdit,
                             QListWidget, QListWidgetItem)
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QIcon, QAction

from core.exceptions import RegistryError


class SwitcherWindow(QMainWindow):
    def __init__(self, controller, registry):
        super().__init__()
        self.controller = controller
        self.registry = registry
        self.logger = logging.getLogger("wswitch.ui")

        # Dialog hint helps tiling WMs (like i3) treat it as a floating window
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint | Qt.WindowType.Dialog)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self.resize(700, 400)
        self.center()

        # Central Widget
        self.central_widget = QWidget()
        self.central_widget.setObjectName("CentralWidget")
        self.setCentralWidget(self.central_widget)

        # Main Layout
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        # Search Bar (Top)
        self.search_bar = QLineEdit()
        self.search_bar.setPlaceholderText("Search windows by title or application...")
        self.search_bar.textChanged.connect(self.controller.set_query)
        self.search_bar.returnPressed.connect(self.execute_selected)
        self.main_layout.addWidget(self.search_bar)

        # Results List
        self.results_list = QListWidget()
        self.results_list.setIconSize(QSize(32, 32))
        self.results_list.itemActivated.connect(self.execute_selected)
        self.main_layout.addWidget(self.results_list)

        self.controller.subscribe(self.update_list)

        # Shortcuts
        self.escape_action = QAction(self)
        self.escape_action.setShortcut("Esc")
        self.escape_action.triggered.connect(self.close)
        self.addAction(self.escape_action)

        # Event Filter for Search Bar Navigation
        self.search_bar.installEventFilter(self)

    def center(self):
        screen = self.screen()
        if screen is None:
            return
        qr = self.frameGeometry()
        cp = screen.availableGeometry().center()
        qr.moveCenter(cp)
        self.move(qr.topLeft())

    def eventFilter(self, obj, event):
        if obj == self.search_bar and event.type() == event.Type.KeyPress:
            key = event.key()
            if key == Qt.Key.Key_Down:
                self.navigate_list(1)
                return True
            elif key == Qt.Key.Key_Up:
                self.navigate_list(-1)
                return True
        return super().eventFilter(obj, event)

    def navigate_list(self, direction):
        current = self.results_list.currentRow()
        count = self.results_list.count()
        if count == 0:
            return

        next_row = current + direction
        if 0 <= next_row < count:
            self.results_list.setCurrentRow(next_row)

    def update_list(self, windows):
        self.results_list.clear()
        icon = QIcon.fromTheme("preferences-system-windows")
        for entry in windows:
            item = QListWidgetItem(icon, entry.display_text())
            item.setData(Qt.ItemDataRole.UserRole, entry)
            if entry.workspace:
                item.setToolTip(f"Workspace: {entry.workspace}")
            self.results_list.addItem(item)

        if self.results_list.count() > 0:
            self.results_list.setCurrentRow(0)

    def selected_entry(self):
        current_item = self.results_list.currentItem()
        if current_item is None:
            return None
        return current_item.data(Qt.ItemDataRole.UserRole)

    def execute_selected(self):
        """Handle activation (double-click or Enter key)"""
        entry = self.selected_entry()
        if entry is None:
            return

        try:
            self.registry.activate(entry)
        except RegistryError as e:
            self.logger.warning(f"Could not activate '{entry.title}': {e}")
            return
        self.close()

    def closeEvent(self, event):
        self.controller.unsubscribe(self.update_list)
        event.accept()
