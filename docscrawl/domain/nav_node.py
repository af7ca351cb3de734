from typing import Optional


class NavNode:
    """One entry of a documentation site's navigation menu.

    `href` holds the raw link as found in the markup until the tree is
    resolved, after which in-domain entries carry absolute URLs. `depth` is
    the structural depth marker the entry was matched on.
    """

    def __init__(
        self,
        title: str,
        href: str,
        depth: int,
        is_external: bool = False,
        children: Optional[list["NavNode"]] = None,
    ):
        self.title = title
        self.href = href
        self.depth = depth
        self.is_external = is_external
        self.children: list[NavNode] = list(children or [])

    @classmethod
    def root(cls, depth: int = 1) -> "NavNode":
        """Synthetic root: empty title and href."""
        return cls(title="", href="", depth=depth)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "href": self.href,
            "external": self.is_external,
            "depth": self.depth,
            "children": [child.to_dict() for child in self.children],
        }

    def __repr__(self):
        return f"<NavNode depth={self.depth} title={self.title!r} href={self.href!r} children={len(self.children)}>"
