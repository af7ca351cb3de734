"""Fetch task and result types used by the batch scheduler."""
from typing import NamedTuple, Union

from docscrawl.domain.article import ArticleDoc


class FetchTask(NamedTuple):
    """An absolute URL queued for document retrieval."""
    url: str


class FetchSuccess(NamedTuple):
    url: str
    article: ArticleDoc

    @property
    def ok(self) -> bool:
        return True


class FetchFailure(NamedTuple):
    url: str
    error: str

    @property
    def ok(self) -> bool:
        return False


FetchResult = Union[FetchSuccess, FetchFailure]
