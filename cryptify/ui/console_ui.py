"""
Rich console UI for cryptify

Terminal activity log: timestamped entries as they happen, then a panel
with the most recent entries and a status footer.
"""

from collections import deque
from datetime import datetime
from pathlib import Path
from typing import Deque, Optional, Tuple

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from cryptify import __version__
from cryptify.codec.byte_shift import Mode
from cryptify.files.processor import ProcessResult, format_file_size

THEME = {
    'primary': 'bright_blue',
    'muted': 'dim',
    'success': 'bright_green',
    'error': 'red',
    'processing': 'bold blue',
    'idle': 'white',
}

STATUS_STYLES = {
    'idle': THEME['idle'],
    'processing': THEME['processing'],
    'success': THEME['success'],
    'error': THEME['error'],
}


class ConsoleUI:
    """
    Activity log rendered with rich.

    Entries are kept newest first. Lines containing "Error" render red,
    lines containing "Success" render green.
    """

    def __init__(self, config: dict, console: Optional[Console] = None, max_entries: int = 50):
        """
        Initialize console UI.

        Args:
            config: Configuration dictionary
            console: Rich console to draw on (defaults to stderr)
            max_entries: Number of entries kept for the summary panel
        """
        self.config = config
        self.console = console or Console(stderr=True)
        self.entries: Deque[Tuple[str, str]] = deque(maxlen=max_entries)
        self.status = 'idle'
        self.stats = {
            'successful': 0,
            'failed': 0,
            'skipped': 0,
        }

    def start(self) -> None:
        self.console.print(
            Text.assemble(("Cryptify", "bold white"), (f" v{__version__}", THEME['primary']))
        )

    def stop(self) -> None:
        """Stop console UI (no-op)."""
        pass

    def add_log(self, message: str) -> None:
        """Record and print one timestamped entry."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        line = f"[{timestamp}] {message}"
        self.entries.appendleft((line, self._style_for(message)))

        text = Text("> ", style=THEME['muted'])
        text.append(line, style=self._style_for(message))
        self.console.print(text)

    @staticmethod
    def _style_for(message: str) -> str:
        if "Error" in message:
            return THEME['error']
        if "Success" in message:
            return THEME['success']
        return ""

    def file_loaded(self, path: Path, size: int) -> None:
        self.add_log(f"File loaded: {path.name} ({format_file_size(size)})")

    def key_derived(self, shift: int) -> None:
        self.add_log(f"Key derivation: shift {shift}")

    def operation_started(self, mode: Mode, source: Path) -> None:
        self.status = 'processing'
        self.add_log(f"Starting {mode.value}ion of {source.name}...")

    def operation_succeeded(self, result: ProcessResult) -> None:
        if result.dry_run:
            self.stats['skipped'] += 1
            self.add_log(f"Dry run: would write {result.output}")
        else:
            self.stats['successful'] += 1
            self.add_log(f"Success: {result.output.name} written.")
        self.status = 'error' if self.stats['failed'] else 'success'

    def operation_failed(self, source: Path, message: str) -> None:
        self.stats['failed'] += 1
        self.status = 'error'
        self.add_log(f"Error: {source.name}: {message}")

    def error(self, message: str) -> None:
        """Report an error that blocks the whole run (bad key, bad arguments)."""
        self.status = 'error'
        self.add_log(f"Error: {message}")

    def render_summary(self) -> Panel:
        """Summary panel: recent entries, counts and status footer."""
        if self.entries:
            log_lines = [Text(line, style=style) for line, style in self.entries]
        else:
            log_lines = [Text("Waiting for input...", style=f"italic {THEME['muted']}")]

        counts = Text(
            f"{self.stats['successful']} succeeded  "
            f"{self.stats['failed']} failed  "
            f"{self.stats['skipped']} dry-run",
            style=THEME['muted']
        )
        footer = Text(f"STATUS: {self.status.upper()}", style=STATUS_STYLES[self.status])

        return Panel(
            Group(*log_lines, Text(""), counts),
            title="Activity Log",
            subtitle=footer,
            box=box.ROUNDED,
            border_style=THEME['primary']
        )

    def print_summary(self) -> None:
        self.console.print(self.render_summary())
