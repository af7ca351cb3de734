from __future__ import annotations

from dataclasses import dataclass, field, fields
from urllib.parse import urlsplit

from docscrawl.exceptions import ConfigError


@dataclass(frozen=True)
class SiteLayout:
    """CSS selectors and markers describing the documentation site's markup.

    Defaults match sites generated by Antora.
    """

    nav_root: str = "nav.nav-menu"
    nav_item: str = "ul.nav-list > li.nav-item"
    depth_attribute: str = "data-depth"
    external_class: str = "link-external"
    article: str = "article.doc"
    article_title: str = "h1#page-title"
    breadcrumb_item: str = "nav.breadcrumbs > ul > li"
    breadcrumb_separator: str = " > "

    @classmethod
    def field_names(cls) -> set[str]:
        return {f.name for f in fields(cls)}


@dataclass(frozen=True)
class CrawlConfig:
    """Settings for a single crawl run."""

    base_url: str
    output_dir: str
    batch_size: int = 5
    batch_delay_seconds: float = 0.5
    nav_root_depth: int = 0
    layout: SiteLayout = field(default_factory=SiteLayout)

    def __post_init__(self):
        parts = urlsplit(self.base_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigError(f"base_url must be an absolute http(s) URL, got {self.base_url!r}")
        if not self.output_dir:
            raise ConfigError("output_dir is required")
        if int(self.batch_size) < 1:
            raise ConfigError(f"batch_size must be >= 1, got {self.batch_size!r}")
        if float(self.batch_delay_seconds) < 0:
            raise ConfigError(f"batch_delay_seconds must be >= 0, got {self.batch_delay_seconds!r}")
