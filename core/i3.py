import subprocess
import json
import logging

from core.exceptions import RegistryError
from core.models import WindowEntry
from core.registry import WindowRegistry


class I3WindowRegistry(WindowRegistry):
    """Enumerate and focus i3 windows using i3-msg."""

    def __init__(self, timeout=5):
        super().__init__()
        self.timeout = timeout
        self.logger = logging.getLogger("wswitch.i3")

    def _enumerate(self):
        """Get all windows from the i3 window tree."""
        tree = self._get_tree()
        windows = []
        self._traverse_tree(tree, windows)
        return windows

    def _get_tree(self):
        output = self._i3_msg('-t', 'get_tree')
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise RegistryError(f"Could not parse i3 tree: {e}") from e

    def activate(self, entry):
        """Focus the container holding the entry's window."""
        self.logger.debug(f"Focusing container {entry.handle} ({entry.title})")
        self._i3_msg(f'[con_id="{entry.handle}"] focus')

    def _i3_msg(self, *args):
        try:
            result = subprocess.run(
                ['i3-msg', *args],
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise RegistryError("i3-msg timeout") from e
        except FileNotFoundError as e:
            raise RegistryError("i3-msg not found - is i3 running?") from e

        if result.returncode != 0:
            raise RegistryError(f"i3-msg error: {result.stderr.strip()}")

        return result.stdout

    def _traverse_tree(self, node, windows, workspace_name=""):
        """Recursively traverse the i3 tree, collecting windows in tree order."""
        if node.get('type') == 'workspace':
            workspace_name = node.get('name', '')

        # Only leaf containers backed by an X window are real windows
        if node.get('window') and node.get('type') == 'con':
            title = node.get('name') or ''
            if title != '__i3':
                properties = node.get('window_properties') or {}
                process_name = properties.get('class') or properties.get('instance') or ''
                windows.append(WindowEntry(
                    title=title,
                    process_name=process_name,
                    handle=node.get('id'),
                    workspace=workspace_name
                ))

        for child in node.get('nodes', []):
            self._traverse_tree(child, windows, workspace_name)

        for child in node.get('floating_nodes', []):
            self._traverse_tree(child, windows, workspace_name)
