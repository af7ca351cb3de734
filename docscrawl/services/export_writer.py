import json
import logging
import re
from pathlib import Path
from typing import Sequence

from docscrawl.domain.article import ArticleDoc
from docscrawl.domain.nav_node import NavNode

logger = logging.getLogger(__name__)

NAV_TREE_FILENAME = "nav-data.json"
INDEX_FILENAME = "articles.json"
ARTICLES_DIRNAME = "articles"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w\s-]")


def safe_title(title: str) -> str:
    """Replace characters that are unsafe in file names with underscores."""
    return _UNSAFE_FILENAME_CHARS.sub("_", title)


class ExportWriter:
    """Write crawl outputs as JSON documents under `output_dir`.

    Layout:
      <output_dir>/nav-data.json
      <output_dir>/articles.json
      <output_dir>/articles/<n>_<safe title>.json   (n is 1-based)
    """

    def __init__(self, output_dir: str):
        self.output_dir = Path(output_dir)

    @property
    def articles_dir(self) -> Path:
        return self.output_dir / ARTICLES_DIRNAME

    def write_nav_tree(self, root: NavNode) -> Path:
        return self._write_json(self.output_dir / NAV_TREE_FILENAME, root.to_dict())

    def write_index(self, index: dict[str, dict]) -> Path:
        return self._write_json(self.output_dir / INDEX_FILENAME, index)

    def write_articles(self, articles: Sequence[ArticleDoc]) -> list[Path]:
        paths = []
        for number, article in enumerate(articles, start=1):
            path = self.articles_dir / f"{number}_{safe_title(article.title)}.json"
            paths.append(self._write_json(path, article.to_dict()))
        logger.info("Wrote %d article files to %s", len(paths), self.articles_dir)
        return paths

    def _write_json(self, path: Path, payload) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.debug("Wrote %s", path)
        return path
