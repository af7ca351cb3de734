from typing import NamedTuple


class HttpResponse(NamedTuple):
    """Status and body of a single page GET, as seen by the crawl services."""
    status_code: int
    text: str

    @property
    def is_success(self) -> bool:
        return 200 <= int(self.status_code) < 300
