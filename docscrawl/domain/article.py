from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ArticleDoc:
    """A parsed documentation page."""

    url: str
    title: str
    breadcrumbs: str
    content: str

    def to_dict(self) -> dict:
        return asdict(self)

    def index_entry(self) -> dict:
        """Entry stored under this article's title in the combined index."""
        return {"url": self.url, "breadcrumbs": self.breadcrumbs, "content": self.content}
