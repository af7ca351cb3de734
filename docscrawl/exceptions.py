"""Custom exceptions for DocsCrawl.

Errors come in two tiers. `FatalCrawlError` subclasses abort the whole run;
`RecoverableFetchError` subclasses are captured per document by the batch
scheduler and never escape it.
"""


class DocsCrawlError(Exception):
    """Base class for DocsCrawl errors."""


class ConfigError(DocsCrawlError):
    """Raised when crawl configuration is missing or invalid."""


class HttpFetchError(DocsCrawlError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class FatalCrawlError(DocsCrawlError):
    """Failure while acquiring or parsing the navigation tree."""


class NavFetchError(FatalCrawlError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch navigation page {url}: {reason}")


class NavParseError(FatalCrawlError):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not parse navigation page {url}: {reason}")


class MalformedNavNodeError(FatalCrawlError):
    """Raised when a navigation item has no anchor of its own."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed navigation item: {reason}")


class RecoverableFetchError(DocsCrawlError):
    """Failure limited to a single document."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class DocumentFetchError(RecoverableFetchError):
    def __init__(self, url: str, reason: str):
        self.reason = reason
        super().__init__(url, f"Could not fetch document {url}: {reason}")


class ArticleParseError(RecoverableFetchError):
    """Fetched page does not have the expected article markup."""


class MissingArticleContainerError(ArticleParseError):
    def __init__(self, url: str):
        super().__init__(url, f"No article container found in {url}")


class MissingArticleTitleError(ArticleParseError):
    def __init__(self, url: str):
        super().__init__(url, f"No article title found in {url}")
