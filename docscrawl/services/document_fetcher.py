from typing import Optional

from docscrawl.domain.article import ArticleDoc
from docscrawl.exceptions import DocumentFetchError, HttpFetchError
from docscrawl.services.article_extractor import ArticleExtractor
from docscrawl.services.http_service import HttpService


class DocumentFetcher:
    """Fetch one documentation page and parse it into an `ArticleDoc`."""

    def __init__(self, http_service: HttpService, article_extractor: Optional[ArticleExtractor] = None):
        self.http_service = http_service
        self.article_extractor = article_extractor or ArticleExtractor()

    def fetch(self, url: str) -> ArticleDoc:
        try:
            response = self.http_service.fetch(url)
        except HttpFetchError as e:
            raise DocumentFetchError(url, str(e.original)) from e
        if not response.is_success:
            raise DocumentFetchError(url, f"HTTP status {response.status_code}")
        return self.article_extractor.extract(response.text, url)
