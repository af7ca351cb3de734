import logging
from typing import Callable, Optional

from docscrawl.domain.config import CrawlConfig
from docscrawl.domain.crawl_summary import CrawlSummary
from docscrawl.services.batch_fetch_scheduler import BatchFetchScheduler
from docscrawl.services.document_fetcher import DocumentFetcher
from docscrawl.services.export_writer import ExportWriter
from docscrawl.services.navigation_service import NavigationService
from docscrawl.services.progress_reporter import ProgressReporter
from docscrawl.services.result_aggregator import ResultAggregator
from docscrawl.services.tree_walker import collect_fetch_tasks, count_nodes

logger = logging.getLogger(__name__)


class DocsCrawler:
    """Runs a full documentation crawl given configured collaborators.

    Owns the control flow only: navigation, flattening, batch fetching,
    aggregation and export. Fatal errors from the navigation step propagate
    to the caller; per-document failures are contained by the scheduler.
    """

    def __init__(
        self,
        *,
        navigation_service: NavigationService,
        document_fetcher: DocumentFetcher,
        scheduler: BatchFetchScheduler,
        aggregator: ResultAggregator,
        writer_factory: Callable[[str], ExportWriter] = ExportWriter,
        progress_factory: Callable[[int], ProgressReporter] = ProgressReporter,
    ):
        self.navigation_service = navigation_service
        self.document_fetcher = document_fetcher
        self.scheduler = scheduler
        self.aggregator = aggregator
        self.writer_factory = writer_factory
        self.progress_factory = progress_factory

    def run(self, config: CrawlConfig, writer: Optional[ExportWriter] = None) -> CrawlSummary:
        if config is None:
            raise ValueError("config is required for crawl")
        writer = writer or self.writer_factory(config.output_dir)

        root = self.navigation_service.load(config.base_url, root_depth=config.nav_root_depth)
        writer.write_nav_tree(root)

        tasks = collect_fetch_tasks(root)
        logger.info("Fetching %d documents in batches of %d", len(tasks), config.batch_size)
        with self.progress_factory(len(tasks)) as on_progress:
            results = self.scheduler.run(
                tasks,
                batch_size=config.batch_size,
                inter_batch_delay=config.batch_delay_seconds,
                fetch_one=self.document_fetcher.fetch,
                on_progress=on_progress,
            )

        aggregate = self.aggregator.aggregate(results)
        writer.write_articles(aggregate.articles)
        writer.write_index(aggregate.index)

        summary = CrawlSummary(
            nav_nodes=count_nodes(root),
            tasks=len(tasks),
            succeeded=len(aggregate.articles),
            failed=len(results) - len(aggregate.articles),
            output_dir=str(config.output_dir),
        )
        logger.info(
            "Crawl finished: %d/%d documents saved, %d failed, output in %s",
            summary.succeeded,
            summary.tasks,
            summary.failed,
            summary.output_dir,
        )
        return summary
