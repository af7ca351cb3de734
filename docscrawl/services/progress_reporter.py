import logging
import time
from typing import Callable, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

logger = logging.getLogger(__name__)


class ProgressReporter:
    """Render document fetch progress with a rich progress bar.

    Use as a context manager around the batch run; the instance itself is
    the scheduler's `on_progress` hook and receives the running count of
    settled documents.
    """

    def __init__(
        self,
        total: int,
        console: Optional[Console] = None,
        clock: Callable[[], float] = time.monotonic,
        description: str = "Fetching documents",
    ):
        self.total = int(total)
        self.current = 0
        self.is_complete = False
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
            get_time=clock,
        )
        self.task_id = self.progress.add_task(description, total=self.total)

    def __enter__(self) -> "ProgressReporter":
        self.progress.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.progress.stop()

    def __call__(self, completed: int) -> None:
        self.update(completed)

    @property
    def elapsed(self) -> float:
        return self.progress.tasks[0].elapsed or 0.0

    def update(self, completed: int) -> None:
        self.current = int(completed)
        self.progress.update(self.task_id, completed=self.current)
        if self.current >= self.total and not self.is_complete:
            self.is_complete = True
            logger.info("Fetched %d/%d documents in %.1fs", self.current, self.total, self.elapsed)
