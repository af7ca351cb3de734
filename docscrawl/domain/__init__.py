"""Domain objects for DocsCrawl - explicit re-exports to satisfy linters."""
from .nav_node import NavNode as NavNode
from .article import ArticleDoc as ArticleDoc
from .fetch_result import FetchTask as FetchTask
from .fetch_result import FetchSuccess as FetchSuccess
from .fetch_result import FetchFailure as FetchFailure
from .fetch_result import FetchResult as FetchResult
from .config import CrawlConfig as CrawlConfig
from .config import SiteLayout as SiteLayout

__all__ = [
    "NavNode",
    "ArticleDoc",
    "FetchTask",
    "FetchSuccess",
    "FetchFailure",
    "FetchResult",
    "CrawlConfig",
    "SiteLayout",
]
