import logging
from typing import NamedTuple, Sequence

from docscrawl.domain.article import ArticleDoc
from docscrawl.domain.fetch_result import FetchResult

logger = logging.getLogger(__name__)


class AggregateResult(NamedTuple):
    index: dict[str, dict]
    """Combined index keyed by article title"""

    articles: list[ArticleDoc]
    """Successfully fetched articles in task order"""


class ResultAggregator:
    def aggregate(self, results: Sequence[FetchResult]) -> AggregateResult:
        """Merge successful fetch results into a title-keyed index.

        Failures are dropped. Two articles sharing a title keep only the later
        one in the index; both stay in `articles`.
        """
        index: dict[str, dict] = {}
        articles: list[ArticleDoc] = []
        for result in results:
            if not result.ok:
                continue
            article = result.article
            previous = index.get(article.title)
            if previous is not None:
                logger.debug("Index entry %r from %s replaced by %s", article.title, previous["url"], article.url)
            index[article.title] = article.index_entry()
            articles.append(article)
        return AggregateResult(index=index, articles=articles)
