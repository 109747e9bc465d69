"""Per-directory report accumulation and run summary."""

from dataclasses import dataclass
from typing import List, Optional
from rich.console import Console

from lintplug.utils import get_logger

logger = get_logger(__name__)

DEBUG_PREFIX = "[init] "


class DirectoryReport:
    """
    Narrative of what happened in one working directory.

    Every line lands in the narrative, which is always copied to the debug
    log by ``dump_to_log``. What reaches the user stream depends on the mode:

    - buffered (recursive runs): ``append`` and ``write`` queue lines until
      ``flush``; ``emit`` flushes the queue and then prints.
    - unbuffered (single directory): ``write`` and ``emit`` print at once,
      ``append`` only records the line in the narrative.
    """

    def __init__(self, console: Console, buffered: bool = False):
        """
        Initialize report.

        Args:
            console: User-facing output stream
            buffered: Queue lines until flushed instead of printing them
        """
        self.console = console
        self.buffered = buffered
        self.lines: List[str] = []
        self._pending: List[str] = []

    def append(self, line: str) -> None:
        """Add a line that is only shown when the report is buffered."""
        self.lines.append(line)
        if self.buffered:
            self._pending.append(line)

    def write(self, line: str) -> None:
        """Add a line that is queued when buffered and printed otherwise."""
        self.lines.append(line)
        if self.buffered:
            self._pending.append(line)
        else:
            self._print(line)

    def emit(self, line: str, style: Optional[str] = None) -> None:
        """Print a line now, after any queued context."""
        self.flush()
        self.lines.append(line)
        self._print(line, style)

    def flush(self) -> None:
        """Print queued lines in order and clear the queue."""
        for line in self._pending:
            self._print(line)
        self._pending.clear()

    @property
    def pending(self) -> List[str]:
        return list(self._pending)

    def text(self) -> str:
        return "\n".join(self.lines)

    def dump_to_log(self, prefix: str = DEBUG_PREFIX) -> None:
        """Copy the whole narrative to the debug log, one record per line."""
        for line in self.text().split("\n"):
            logger.debug(f"{prefix}{line}")

    def _print(self, line: str, style: Optional[str] = None) -> None:
        self.console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)


@dataclass
class RunSummary:
    """Aggregate state across all working directories of one run."""

    recursive: bool = False
    installed: bool = False
    directories: int = 0

    def final_message(self) -> Optional[str]:
        if self.recursive and not self.installed:
            return "All plugins are already installed"
        return None
