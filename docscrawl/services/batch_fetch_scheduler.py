import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence

from docscrawl.domain.article import ArticleDoc
from docscrawl.domain.fetch_result import FetchFailure, FetchResult, FetchSuccess, FetchTask
from docscrawl.exceptions import RecoverableFetchError

logger = logging.getLogger(__name__)


class BatchFetchScheduler:
    """Fetch a flat list of URLs in consecutive, bounded-concurrency batches.

    Every task in a batch runs on its own worker thread; the next batch starts
    only once all of them have settled, then after `inter_batch_delay`
    seconds. A failing task becomes a `FetchFailure` and never disturbs its
    siblings or later batches. Results come back in task order.
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep):
        self._sleep = sleep

    def run(
        self,
        tasks: Sequence[FetchTask],
        batch_size: int,
        inter_batch_delay: float,
        fetch_one: Callable[[str], ArticleDoc],
        on_progress: Optional[Callable[[int], None]] = None,
    ) -> list[FetchResult]:
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size!r}")
        if inter_batch_delay < 0:
            raise ValueError(f"inter_batch_delay must be >= 0, got {inter_batch_delay!r}")

        tasks = list(tasks)
        results: list[Optional[FetchResult]] = [None] * len(tasks)
        completed = 0
        lock = threading.Lock()

        def _settle(index: int, result: FetchResult) -> None:
            nonlocal completed
            # Worker threads settle concurrently; counter, accumulator and
            # progress callback are serialized.
            with lock:
                results[index] = result
                completed += 1
                self._report(on_progress, completed)

        def _fetch(index: int, task: FetchTask) -> None:
            try:
                article = fetch_one(task.url)
            except RecoverableFetchError as e:
                logger.warning("Fetch failed for %s: %s", task.url, e)
                _settle(index, FetchFailure(task.url, str(e)))
            except Exception as e:
                logger.error("Unexpected error fetching %s: %s", task.url, e, exc_info=True)
                _settle(index, FetchFailure(task.url, str(e) or type(e).__name__))
            else:
                _settle(index, FetchSuccess(task.url, article))

        batches = [range(start, min(start + batch_size, len(tasks))) for start in range(0, len(tasks), batch_size)]
        for number, batch in enumerate(batches, start=1):
            logger.debug("Starting batch %d/%d (%d tasks)", number, len(batches), len(batch))
            with ThreadPoolExecutor(max_workers=len(batch)) as executor:
                futures = [executor.submit(_fetch, index, tasks[index]) for index in batch]
            # Leaving the executor joins every worker of the batch.
            for future in futures:
                future.result()
            if number < len(batches):
                self._sleep(inter_batch_delay)

        return list(results)

    def _report(self, on_progress: Optional[Callable[[int], None]], completed: int) -> None:
        if on_progress is None:
            return
        try:
            on_progress(completed)
        except Exception:
            logger.exception("Progress callback failed at %d completed tasks", completed)
