import logging
from typing import Optional

from docscrawl.domain.nav_node import NavNode
from docscrawl.exceptions import HttpFetchError, NavFetchError
from docscrawl.services.http_service import HttpService
from docscrawl.services.nav_tree_extractor import NavTreeExtractor
from docscrawl.services.tree_walker import resolve_links

logger = logging.getLogger(__name__)


class NavigationService:
    """Fetch a site's root page and return its resolved navigation tree.

    Any failure here is fatal for the run; there is no partial tree.
    """

    def __init__(
        self,
        http_service: HttpService,
        nav_tree_extractor: Optional[NavTreeExtractor] = None,
    ):
        self.http_service = http_service
        self.nav_tree_extractor = nav_tree_extractor or NavTreeExtractor()

    def load(self, base_url: str, root_depth: int = 1) -> NavNode:
        base_url = base_url.rstrip("/")
        logger.info("Fetching navigation from %s", base_url)
        try:
            response = self.http_service.fetch(base_url)
        except HttpFetchError as e:
            raise NavFetchError(base_url, str(e.original)) from e
        if not response.is_success:
            raise NavFetchError(base_url, f"HTTP status {response.status_code}")

        root = self.nav_tree_extractor.extract_tree(response.text, root_depth=root_depth, source_url=base_url)
        resolve_links(root, base_url)
        logger.info("Navigation tree extracted from %s", base_url)
        return root
