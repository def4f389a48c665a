"""
Search controller: keeps the list of windows matching the current query.

Every query change or window list change starts a MatchThread that filters a
snapshot of the registry. Threads are tagged with increasing generation
numbers and a result is only published if no newer generation has been
published already, so a slow computation for an old query can never replace
the results of a newer one.
"""

import logging

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from core.fuzzy import filter_windows, normalize_query


class MatchThread(QThread):
    matched = pyqtSignal(int, str, object)

    def __init__(self, generation, query, registry, refresh=False):
        super().__init__()
        self.generation = generation
        self.query = query
        self.registry = registry
        self.refresh = refresh
        self.logger = logging.getLogger("wswitch.search")

    def run(self):
        try:
            if self.refresh:
                self.registry.refresh()
            windows = self.registry.get_snapshot()
        except Exception as e:
            # An unreadable window list is shown as an empty one
            self.logger.warning(f"Window registry unavailable, using empty list: {e}")
            windows = ()

        try:
            matches = filter_windows(self.query, windows)
        except Exception as e:
            self.logger.warning(f"Matching '{self.query}' failed, publishing no results: {e}")
            matches = ()

        self.matched.emit(self.generation, self.query, matches)


class WindowSearchController(QObject):
    """
    Owns the search text and the published match list.

    Observers connect to results_updated (directly or through subscribe());
    it carries the new matches as a tuple, the same value get_matches()
    returns afterwards.
    """

    results_updated = pyqtSignal(object)

    def __init__(self, registry):
        super().__init__()
        self.registry = registry
        self.logger = logging.getLogger("wswitch.search")
        self._query = ""
        self._matches = ()
        self._generation = 0
        self._published_generation = 0
        self._threads = set()
        self.registry.windows_changed.connect(self._on_windows_changed)

    @property
    def query(self):
        return self._query

    def set_query(self, text):
        """Set the search text and recompute matches in the background."""
        query = normalize_query(text)
        if query == self._query and self._generation:
            return
        self._query = query
        self._schedule(refresh=True)

    def update(self):
        """Recompute matches for the current query against a fresh window list."""
        self._schedule(refresh=True)

    def get_matches(self):
        return self._matches

    def subscribe(self, callback):
        self.results_updated.connect(callback)

    def unsubscribe(self, callback):
        self.results_updated.disconnect(callback)

    def is_settled(self):
        """True once the most recently scheduled computation has been published."""
        return self._published_generation == self._generation

    def shutdown(self):
        """Wait for running computations. Their results are still delivered if the event loop runs."""
        for thread in list(self._threads):
            thread.wait()
        self._threads.clear()

    def _on_windows_changed(self):
        self._schedule(refresh=False)

    def _schedule(self, refresh):
        # Finished threads are safe to release
        self._threads = {t for t in self._threads if not t.isFinished()}

        self._generation += 1
        thread = MatchThread(self._generation, self._query, self.registry, refresh)
        thread.matched.connect(self._on_matched)
        self._threads.add(thread)
        self.logger.debug(f"Scheduling search #{self._generation} for '{self._query}'")
        thread.start()

    def _on_matched(self, generation, query, matches):
        if generation <= self._published_generation:
            self.logger.debug(f"Dropping stale results of search #{generation} for '{query}'")
            return

        self._published_generation = generation
        self._matches = matches
        self.logger.debug(f"Search #{generation} for '{query}' matched {len(matches)} windows")
        self.results_updated.emit(matches)
