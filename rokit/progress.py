"""A styled progress tracker for command-line operations."""

from __future__ import annotations

import time

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.text import Text

_DEFAULT_EMOJI = "🚀"


def _format_duration(seconds: float) -> str:
    """Format a duration with two decimals in the largest fitting unit."""
    nanos = seconds * 1e9
    if nanos >= 1e9:
        return f"{seconds:.2f}s"
    if nanos >= 1e6:
        return f"{nanos / 1e6:.2f}ms"
    if nanos >= 1e3:
        return f"{nanos / 1e3:.2f}µs"
    return f"{nanos:.2f}ns"


class CliProgressTracker:
    """A progress bar that counts tasks, optionally split into subtasks.

    With subtasks the bar moves at subtask granularity while the task
    counter shown to the user only counts whole tasks.
    """

    def __init__(
        self,
        message: str,
        num_tasks: int,
        subtasks_per_task: int | None = None,
    ) -> None:
        if num_tasks < 0:
            raise ValueError("num_tasks must not be negative")
        if subtasks_per_task is not None and subtasks_per_task < 1:
            raise ValueError("subtasks_per_task must be at least 1")

        self._num_tasks = num_tasks
        self._subtasks_per_task = subtasks_per_task
        self._per_task = subtasks_per_task or 1
        self._completed = 0
        self._started_at = time.monotonic()

        self._progress = Progress(
            SpinnerColumn("dots", style="bold cyan"),
            TextColumn("{task.description:<11}", style="bold cyan", markup=False),
            TextColumn("["),
            BarColumn(bar_width=32, style="bold", complete_style="bold"),
            TextColumn("]"),
            TextColumn(
                "{task.fields[current_task]:>2} / {task.fields[total_tasks]:2}",
                markup=False,
            ),
            console=Console(stderr=True),
            transient=True,
            refresh_per_second=20,
        )
        self._task = self._progress.add_task(
            str(message),
            total=num_tasks * self._per_task,
            current_task=0,
            total_tasks=num_tasks,
        )
        self._progress.start()

    def __enter__(self) -> CliProgressTracker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._progress.stop()

    @property
    def current_task(self) -> int:
        """The number of whole tasks completed so far."""
        return self._completed // self._per_task

    def _advance(self, steps: int) -> None:
        self._completed += steps
        self._progress.update(
            self._task, completed=self._completed, current_task=self.current_task
        )

    def task_completed(self) -> None:
        """Mark one whole task as completed."""
        self._advance(self._per_task)

    def subtask_completed(self) -> None:
        """Mark one subtask as completed.

        Must be called exactly the number of subtasks per task for each
        task, or the displayed progress will be wrong.
        """
        if self._subtasks_per_task is None:
            raise RuntimeError("subtask_completed called without subtasks")
        self._advance(1)

    def formatted_elapsed(self) -> str:
        """Return the elapsed time as ``(took x.yz<unit>)``."""
        return f"(took {_format_duration(time.monotonic() - self._started_at)})"

    def update_message(self, message: str) -> None:
        """Change the message shown in front of the bar."""
        self._progress.update(self._task, description=str(message))

    def print_message(self, message: str) -> None:
        """Print a line above the progress bar."""
        self._progress.console.print(Text(str(message)), soft_wrap=True)

    def finish_with_message(self, final_message: str) -> None:
        """Clear the bar and print a final message."""
        self.finish_with_emoji_and_message(_DEFAULT_EMOJI, final_message)

    def finish_with_emoji_and_message(self, emoji: str, final_message: str) -> None:
        """Clear the bar and print a final message behind ``emoji``."""
        line = Text.assemble((emoji, "bold green"), " ", str(final_message))
        self._progress.console.print(line, soft_wrap=True)
        self._progress.stop()