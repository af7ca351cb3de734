from typing import Callable

from docscrawl.domain.fetch_result import FetchTask
from docscrawl.domain.nav_node import NavNode
from docscrawl.services.link_resolver import resolve


def walk(node: NavNode, visit: Callable[[NavNode], None], order: str = "post") -> None:
    """Invoke `visit` on every node of the tree rooted at `node`.

    `order="post"` visits children (in source order) before their parent,
    `order="pre"` visits the parent first.
    """
    if order not in ("pre", "post"):
        raise ValueError(f"Unknown traversal order: {order!r}")
    if order == "pre":
        visit(node)
    for child in node.children:
        walk(child, visit, order)
    if order == "post":
        visit(node)


def resolve_links(root: NavNode, base_url: str) -> None:
    """Rewrite every node's href in place into an absolute URL."""

    def _resolve(node: NavNode) -> None:
        if node.href:
            node.href = resolve(node.href, base_url)

    walk(root, _resolve, order="post")


def collect_fetch_tasks(root: NavNode) -> list[FetchTask]:
    """Flatten the tree into fetch tasks for in-domain entries, in source order."""
    tasks: list[FetchTask] = []

    def _collect(node: NavNode) -> None:
        if node is root or node.is_external or not node.href:
            return
        tasks.append(FetchTask(node.href))

    walk(root, _collect, order="pre")
    return tasks


def count_nodes(root: NavNode) -> int:
    """Number of nodes below the synthetic root."""
    counter = [0]

    def _count(node: NavNode) -> None:
        counter[0] += 1

    walk(root, _count)
    return counter[0] - 1
