from typing import Callable, Optional

from bs4 import BeautifulSoup

from docscrawl.domain.article import ArticleDoc
from docscrawl.domain.config import SiteLayout
from docscrawl.exceptions import MissingArticleContainerError, MissingArticleTitleError


class ArticleExtractor:
    """Turn a fetched documentation page into an `ArticleDoc`.

    Pure transform: no I/O happens here.
    """

    def __init__(
        self,
        layout: Optional[SiteLayout] = None,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self.layout = layout or SiteLayout()
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, html: str, url: str) -> ArticleDoc:
        soup = self._soup_factory(html or "")
        article = soup.select_one(self.layout.article)
        if article is None:
            raise MissingArticleContainerError(url)

        title_elem = article.select_one(self.layout.article_title)
        if title_elem is None:
            raise MissingArticleTitleError(url)

        breadcrumbs = self.layout.breadcrumb_separator.join(
            item.get_text().strip() for item in article.select(self.layout.breadcrumb_item)
        )
        return ArticleDoc(
            url=url,
            title=title_elem.get_text().strip(),
            breadcrumbs=breadcrumbs,
            content=article.decode_contents(),
        )
