"""Window list sources consumed by the search controller."""

import logging
import threading

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from core.exceptions import RegistryError


class WindowRegistry(QObject):
    """
    Holds the latest enumeration of open windows.

    Subclasses implement _enumerate(). refresh() may be called from any
    thread; windows_changed is emitted only when the list actually differs
    from the previous one.
    """

    windows_changed = pyqtSignal()

    def __init__(self):
        super().__init__()
        self.logger = logging.getLogger("wswitch.registry")
        self._lock = threading.Lock()
        self._windows = ()

    def get_snapshot(self):
        """Return the current window list as a tuple."""
        with self._lock:
            return self._windows

    def refresh(self):
        """Re-enumerate windows. Raises RegistryError if enumeration fails."""
        # Enumeration can be slow, only the swap is guarded
        windows = tuple(self._enumerate())
        with self._lock:
            changed = windows != self._windows
            self._windows = windows
        if changed:
            self.logger.debug(f"Window list changed ({len(windows)} windows)")
            self.windows_changed.emit()
        return changed

    def activate(self, entry):
        raise RegistryError(f"{type(self).__name__} cannot activate windows")

    def _enumerate(self):
        raise NotImplementedError


class InMemoryWindowRegistry(WindowRegistry):
    """Registry fed by the embedding code instead of the window system."""

    def __init__(self, windows=()):
        super().__init__()
        self._source = tuple(windows)
        self._windows = self._source

    def set_windows(self, windows):
        with self._lock:
            self._source = tuple(windows)
        return self.refresh()

    def _enumerate(self):
        return self._source


class RegistryPoller(QThread):
    """Refreshes a registry at a fixed interval until interrupted."""

    def __init__(self, registry, interval_ms=1000):
        super().__init__()
        self.registry = registry
        self.interval_ms = interval_ms
        self.logger = logging.getLogger("wswitch.registry")

    def run(self):
        while not self.isInterruptionRequested():
            try:
                self.registry.refresh()
            except RegistryError as e:
                self.logger.warning(f"Window enumeration failed: {e}")

            # Sleep in short steps so stop() does not wait a full interval
            waited = 0
            while waited < self.interval_ms and not self.isInterruptionRequested():
                self.msleep(50)
                waited += 50

    def stop(self):
        self.requestInterruption()
        self.wait()
