import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional

from docscrawl import config as env
from docscrawl.container import Container
from docscrawl.exceptions import ConfigError, FatalCrawlError

logger = logging.getLogger("docscrawl")


def default_output_dir(now: Optional[datetime] = None) -> str:
    """Return export/<timestamp> for a run started at `now`."""
    now = now or datetime.now(timezone.utc)
    stamp = now.isoformat(timespec="milliseconds").replace(":", "-").replace(".", "-").replace("+", "_")
    return os.path.join(os.getcwd(), "export", stamp)


def main(container: Optional[Container] = None) -> int:
    logging.basicConfig(
        level=env.get_str_env("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    container = container or Container()

    # The export directory is fixed once per invocation and passed down explicitly.
    if not container.config.DOCSCRAWL_OUTPUT_DIR():
        container.config.DOCSCRAWL_OUTPUT_DIR.from_value(default_output_dir())

    try:
        crawl_config = container.crawl_config()
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    logger.info(
        "Starting crawl of %s (batch size %d, delay %.2fs)",
        crawl_config.base_url,
        crawl_config.batch_size,
        crawl_config.batch_delay_seconds,
    )
    try:
        summary = container.docs_crawler().run(crawl_config)
    except FatalCrawlError as e:
        logger.error("Crawl aborted: %s", e)
        return 1

    logger.info("Navigation entries: %d", summary.nav_nodes)
    logger.info("Documents saved: %d (failed: %d)", summary.succeeded, summary.failed)
    logger.info("Output directory: %s", summary.output_dir)
    return 0


if __name__ == '__main__':
    sys.exit(main())
