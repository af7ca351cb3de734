import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup, Tag

from docscrawl.domain.config import SiteLayout
from docscrawl.domain.nav_node import NavNode
from docscrawl.exceptions import MalformedNavNodeError, NavParseError

logger = logging.getLogger(__name__)


class NavTreeExtractor:
    """Build a `NavNode` tree from a documentation site's navigation menu.

    Items are matched by their depth marker (`data-depth` by default): the
    children of an item extracted at depth `d` are the nav items below it
    whose marker equals `d + 1`. The marker is trusted as-is.
    """

    def __init__(
        self,
        layout: Optional[SiteLayout] = None,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self.layout = layout or SiteLayout()
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract_tree(self, html: str, root_depth: int = 1, source_url: str = "") -> NavNode:
        """Parse a root page and return the synthetic root of its nav tree."""
        try:
            soup = self._soup_factory(html or "")
        except Exception as e:
            raise NavParseError(source_url, f"markup could not be parsed: {e}") from e

        nav_elem = soup.select_one(self.layout.nav_root)
        if nav_elem is None:
            raise NavParseError(source_url, f"no element matches {self.layout.nav_root!r}")

        root = NavNode.root(depth=root_depth)
        root.children = [self.extract(child, root_depth + 1) for child in self._child_items(nav_elem, root_depth)]
        logger.debug("Extracted %d top-level nav entries from %s", len(root.children), source_url)
        return root

    def extract(self, container: Tag, depth: int) -> NavNode:
        anchor = self._primary_anchor(container)
        if anchor is None:
            raise MalformedNavNodeError(
                f"nav item at depth {depth} has no anchor: {self._describe(container)}"
            )

        node = NavNode(
            title=anchor.get_text(strip=True),
            href=(anchor.get("href") or "").strip(),
            depth=depth,
            is_external=self.layout.external_class in (anchor.get("class") or []),
        )
        # No child items marked depth + 1 means a leaf.
        for child in self._child_items(container, depth):
            node.children.append(self.extract(child, depth + 1))
        return node

    def _child_items(self, container: Tag, depth: int) -> list[Tag]:
        marker = f'{self.layout.nav_item}[{self.layout.depth_attribute}="{depth + 1}"]'
        return container.select(marker)

    def _primary_anchor(self, container: Tag) -> Optional[Tag]:
        """First anchor anywhere inside `container`, nested items included."""
        return container.find("a")

    def _describe(self, container: Tag) -> str:
        text = container.get_text(" ", strip=True)
        return text[:80] if text else f"<{container.name}>"
