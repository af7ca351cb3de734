"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from docscrawl import config as env
from docscrawl.services.article_extractor import ArticleExtractor
from docscrawl.services.batch_fetch_scheduler import BatchFetchScheduler
from docscrawl.services.crawl_config_parser import load_crawl_config
from docscrawl.services.docs_crawler import DocsCrawler
from docscrawl.services.document_fetcher import DocumentFetcher
from docscrawl.services.http_service import HttpService
from docscrawl.services.navigation_service import NavigationService
from docscrawl.services.nav_tree_extractor import NavTreeExtractor
from docscrawl.services.result_aggregator import ResultAggregator


# Environment variables used by the container (read via `docscrawl.config` helpers).
#
# DOCSCRAWL_BASE_URL (str, default: "https://docs.spring.io/spring-boot")
#   Root page whose navigation menu is crawled. Page-relative nav links are
#   joined to it, root-relative ones to its origin.
#
# DOCSCRAWL_BATCH_SIZE (int, default: 5)
#   Documents fetched concurrently per batch.
#
# DOCSCRAWL_BATCH_DELAY (float seconds, default: 0.5)
#   Pause between batches.
#
# DOCSCRAWL_OUTPUT_DIR (str | optional)
#   Export directory. When unset, `run.main()` fills in export/<timestamp>.
#
# DOCSCRAWL_NAV_ROOT_DEPTH (int, default: 0)
#   Depth given to the synthetic nav root; top-level entries are matched on
#   this value + 1. Antora marks its top-level sections data-depth="1".
#
# DOCSCRAWL_CONFIG_FILE (str | optional)
#   YAML file whose values override the ones above (see CrawlConfigParser).
#
# USER_AGENT (str, default: browser-like Chrome UA)
# HTTP_TIMEOUT (int seconds, default: 30)
ENV = {
    "DOCSCRAWL_BASE_URL": env.get_str_env("DOCSCRAWL_BASE_URL", "https://docs.spring.io/spring-boot"),
    "DOCSCRAWL_BATCH_SIZE": env.get_int_env("DOCSCRAWL_BATCH_SIZE", 5),
    "DOCSCRAWL_BATCH_DELAY": env.get_float_env("DOCSCRAWL_BATCH_DELAY", 0.5),
    "DOCSCRAWL_OUTPUT_DIR": env.get_optional_str_env("DOCSCRAWL_OUTPUT_DIR"),
    "DOCSCRAWL_NAV_ROOT_DEPTH": env.get_int_env("DOCSCRAWL_NAV_ROOT_DEPTH", 0),
    "DOCSCRAWL_CONFIG_FILE": env.get_optional_str_env("DOCSCRAWL_CONFIG_FILE"),
    "USER_AGENT": env.get_str_env("USER_AGENT", env.DEFAULT_USER_AGENT),
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 30),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for DocsCrawl."""

    # Configuration
    config = providers.Configuration(default=ENV)

    crawl_config = providers.Singleton(
        load_crawl_config,
        config_file=config.DOCSCRAWL_CONFIG_FILE,
        defaults=providers.Dict(
            base_url=config.DOCSCRAWL_BASE_URL,
            output_dir=config.DOCSCRAWL_OUTPUT_DIR,
            batch_size=config.DOCSCRAWL_BATCH_SIZE,
            batch_delay_seconds=config.DOCSCRAWL_BATCH_DELAY,
            nav_root_depth=config.DOCSCRAWL_NAV_ROOT_DEPTH,
        ),
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    nav_tree_extractor = providers.Singleton(
        NavTreeExtractor,
        layout=crawl_config.provided.layout,
    )

    article_extractor = providers.Singleton(
        ArticleExtractor,
        layout=crawl_config.provided.layout,
    )

    navigation_service = providers.Singleton(
        NavigationService,
        http_service=http_service,
        nav_tree_extractor=nav_tree_extractor,
    )

    document_fetcher = providers.Singleton(
        DocumentFetcher,
        http_service=http_service,
        article_extractor=article_extractor,
    )

    batch_fetch_scheduler = providers.Singleton(BatchFetchScheduler)

    result_aggregator = providers.Singleton(ResultAggregator)

    docs_crawler = providers.Factory(
        DocsCrawler,
        navigation_service=navigation_service,
        document_fetcher=document_fetcher,
        scheduler=batch_fetch_scheduler,
        aggregator=result_aggregator,
    )
