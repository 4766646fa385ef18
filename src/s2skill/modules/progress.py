"""
Progress Display Module

Show stage-by-stage progress of a sync run to the operator.
"""

import logging
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class ProgressStage(Enum):
    """Progress stage indicators."""

    STARTED = "started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ProgressUpdate:
    """Progress update information."""

    stage: ProgressStage
    message: str
    timestamp: float
    operation: str


class ProgressDisplay:
    """
    Stage-based progress display for a sync run.

    Every update is printed on its own line with a stage symbol and kept in
    memory so tests can inspect what the operator saw.
    """

    SYMBOLS = {
        ProgressStage.STARTED: "►",
        ProgressStage.IN_PROGRESS: "...",
        ProgressStage.COMPLETED: "✓",
        ProgressStage.FAILED: "✗",
    }

    # Fallback ASCII symbols (if Unicode not supported)
    ASCII_SYMBOLS = {
        ProgressStage.STARTED: ">",
        ProgressStage.IN_PROGRESS: "...",
        ProgressStage.COMPLETED: "OK",
        ProgressStage.FAILED: "FAIL",
    }

    def __init__(self, use_unicode: bool = True, output_file: Optional[TextIO] = None):
        """
        Initialize progress display.

        Args:
            use_unicode: Use Unicode symbols (True) or ASCII (False)
            output_file: Output file object (default: sys.stdout at print time)
        """
        self.use_unicode = use_unicode
        self.output_file = output_file
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.updates: list[ProgressUpdate] = []

    def start_operation(self, name: str) -> None:
        """
        Begin showing progress for an operation.

        Example:
            >>> progress = ProgressDisplay()
            >>> progress.start_operation("Running generateMarkdownDocs.mjs")
        """
        self.current_operation = name
        self.start_time = time.time()
        self.update(name, ProgressStage.STARTED)

    def update(self, message: str, stage: ProgressStage = ProgressStage.IN_PROGRESS) -> None:
        """
        Record and print a progress update.

        Args:
            message: Progress message
            stage: Current stage
        """
        update = ProgressUpdate(
            stage=stage,
            message=message,
            timestamp=time.time(),
            operation=self.current_operation or "unknown",
        )
        self.updates.append(update)
        self._print(self._format_update(update))

    def complete(self, success: bool = True, message: Optional[str] = None) -> None:
        """
        Mark the current operation complete.

        Args:
            success: Whether operation succeeded
            message: Optional completion message
        """
        if success:
            stage = ProgressStage.COMPLETED
            default_message = f"{self.current_operation} completed"
        else:
            stage = ProgressStage.FAILED
            default_message = f"{self.current_operation} failed"

        final_message = message or default_message

        if self.start_time:
            elapsed = time.time() - self.start_time
            final_message += f" ({self._format_duration(elapsed)})"

        self.update(final_message, stage)

        self.current_operation = None
        self.start_time = None

    def _format_update(self, update: ProgressUpdate) -> str:
        symbols = self.SYMBOLS if self.use_unicode else self.ASCII_SYMBOLS
        symbol = symbols.get(update.stage, "")
        return f"{symbol} {update.message}"

    def _format_duration(self, seconds: float) -> str:
        """Format duration in human-readable format (e.g. "2m 30s")."""
        if seconds < 60:
            return f"{seconds:.1f}s"
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"

    def _print(self, message: str) -> None:
        print(message, file=self.output_file or sys.stdout, flush=True)

    def get_updates(self, stage: Optional[ProgressStage] = None) -> list[ProgressUpdate]:
        """
        Get recorded progress updates, optionally filtered by stage.

        Example:
            >>> failures = progress.get_updates(ProgressStage.FAILED)
        """
        if stage is None:
            return self.updates.copy()
        return [u for u in self.updates if u.stage is stage]
