"""Crawl summary data model."""
from typing import NamedTuple


class CrawlSummary(NamedTuple):
    """Outcome of a full crawl run, used for the final log line."""

    nav_nodes: int
    """Number of navigation entries below the synthetic root"""

    tasks: int
    """Number of in-domain document URLs scheduled for fetching"""

    succeeded: int
    failed: int
    output_dir: str
