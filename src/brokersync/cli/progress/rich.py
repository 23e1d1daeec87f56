"""Offering replay bar for the terminal, with warnings printed above it."""

from __future__ import annotations

import logging
from types import TracebackType

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from brokersync.replay.progress import ReplayProgress

_LOGGER_NAME = "brokersync"


class RichReplayProgress(ReplayProgress):
    """Counts submitted offerings on a live bar.

    While entered, WARNING and ERROR records from ``brokersync`` loggers are
    rendered on the same console so they do not tear the live display::

        with RichReplayProgress() as progress:
            result = BrokerSync.from_config(config, progress=progress).advertise()
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("[green]{task.description:>10}[/]"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )
        self._log_handler = RichHandler(console=self.console, level=logging.WARNING, show_path=False)
        self._task_ids: dict[str, RichTaskID] = {}

    def __enter__(self) -> RichReplayProgress:
        logging.getLogger(_LOGGER_NAME).addHandler(self._log_handler)
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()
        logging.getLogger(_LOGGER_NAME).removeHandler(self._log_handler)

    def phase_start(self, phase: str, total: int) -> None:
        self._task_ids[phase] = self._progress.add_task(phase, total=total)

    def item_done(self, phase: str) -> None:
        if phase in self._task_ids:
            self._progress.advance(self._task_ids[phase])

    def phase_done(self, phase: str) -> None:
        if phase in self._task_ids:
            task_id = self._task_ids[phase]
            self._progress.update(task_id, completed=self._progress.tasks[task_id].total)

    def phase_error(self, phase: str, error: BaseException) -> None:
        if phase in self._task_ids:
            self._progress.update(self._task_ids[phase], description=f"[red]✗ {phase}[/red]")
