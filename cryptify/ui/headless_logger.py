"""
Headless logger for scripts and CI.

Reports progress through the logging module only, with no terminal styling.
Implements the same interface as ConsoleUI so the CLI can use either.
"""

import logging
from pathlib import Path

from cryptify.codec.byte_shift import Mode
from cryptify.files.processor import ProcessResult, format_file_size

logger = logging.getLogger(__name__)


class HeadlessLogger:
    """Minimal reporter for non-interactive runs."""

    def __init__(self, config: dict):
        """
        Initialize headless logger.

        Args:
            config: Configuration dictionary (for consistency with ConsoleUI)
        """
        self.config = config
        self.status = 'idle'
        self.stats = {
            'successful': 0,
            'failed': 0,
            'skipped': 0,
        }

    def start(self) -> None:
        """Start headless logger."""
        logger.debug("Running in headless mode")

    def stop(self) -> None:
        """Stop headless logger (no-op)."""
        pass

    def file_loaded(self, path: Path, size: int) -> None:
        logger.info(f"File loaded: {path.name} ({format_file_size(size)})")

    def key_derived(self, shift: int) -> None:
        logger.info(f"Key derivation: shift {shift}")

    def operation_started(self, mode: Mode, source: Path) -> None:
        self.status = 'processing'
        logger.info(f"Starting {mode.value}ion of {source.name}...")

    def operation_succeeded(self, result: ProcessResult) -> None:
        if result.dry_run:
            self.stats['skipped'] += 1
            logger.info(f"Dry run: would write {result.output}")
        else:
            self.stats['successful'] += 1
            logger.info(f"Success: {result.output.name} written.")
        self.status = 'error' if self.stats['failed'] else 'success'

    def operation_failed(self, source: Path, message: str) -> None:
        self.stats['failed'] += 1
        self.status = 'error'
        logger.error(f"Error: {source.name}: {message}")

    def error(self, message: str) -> None:
        """Report an error that blocks the whole run (bad key, bad arguments)."""
        self.status = 'error'
        logger.error(f"Error: {message}")

    def print_summary(self) -> None:
        """Log final counts."""
        logger.info(
            f"Done: {self.stats['successful']} succeeded, "
            f"{self.stats['failed']} failed, {self.stats['skipped']} dry-run"
        )
