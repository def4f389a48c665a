from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WindowEntry:
    """One open window as seen at enumeration time.

    Entries never change after creation. A window whose title changes shows
    up as a new entry carrying the same handle.
    """

    title: str
    process_name: str
    handle: Any = None
    workspace: str = ""

    def display_text(self):
        if self.process_name:
            return f"{self.title} - {self.process_name}"
        return self.title
