import logging
import os
from typing import Optional

import yaml

from docscrawl.domain.config import CrawlConfig, SiteLayout
from docscrawl.exceptions import ConfigError

logger = logging.getLogger(__name__)

CRAWL_KEYS = ("base_url", "output_dir", "batch_size", "batch_delay_seconds", "nav_root_depth")


class CrawlConfigParser:
    """Parse crawl settings into a `CrawlConfig`.

    Values come from `defaults` (environment) and are overridden by a YAML
    document when one is given. A `layout:` mapping in the YAML overrides
    individual `SiteLayout` selectors.
    """

    def load_yaml_dict(self, config_file: str) -> dict:
        """Return the parsed YAML mapping in `config_file`."""
        if not os.path.isfile(config_file):
            raise ConfigError(f"Config file {config_file!r} not found")
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file {config_file!r} is not valid YAML: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_file!r} must contain a mapping")
        return data

    def parse(self, *, data: Optional[dict] = None, defaults: Optional[dict] = None) -> CrawlConfig:
        merged = {k: v for k, v in (defaults or {}).items() if k in CRAWL_KEYS and v is not None}
        data = data or {}
        merged.update({k: v for k, v in data.items() if k in CRAWL_KEYS and v is not None})

        if not merged.get("base_url"):
            raise ConfigError("base_url is required")
        if not merged.get("output_dir"):
            raise ConfigError("output_dir is required")

        return CrawlConfig(
            base_url=str(merged["base_url"]),
            output_dir=str(merged["output_dir"]),
            batch_size=self._coerce(merged, "batch_size", int, 5),
            batch_delay_seconds=self._coerce(merged, "batch_delay_seconds", float, 0.5),
            nav_root_depth=self._coerce(merged, "nav_root_depth", int, 0),
            layout=self._parse_layout(data.get("layout")),
        )

    def _coerce(self, values: dict, key: str, kind, default):
        if key not in values:
            return default
        try:
            return kind(values[key])
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid {key}: {values[key]!r}") from e

    def _parse_layout(self, layout: Optional[dict]) -> SiteLayout:
        if not layout:
            return SiteLayout()
        if not isinstance(layout, dict):
            raise ConfigError("layout must be a mapping of selector names to values")
        unknown = set(layout) - SiteLayout.field_names()
        if unknown:
            raise ConfigError(f"Unknown layout keys: {', '.join(sorted(unknown))}")
        return SiteLayout(**{k: str(v) for k, v in layout.items()})


def load_crawl_config(config_file: Optional[str] = None, defaults: Optional[dict] = None) -> CrawlConfig:
    parser = CrawlConfigParser()
    data = None
    if config_file:
        logger.info("Loading crawl config from %s", config_file)
        data = parser.load_yaml_dict(config_file)
    return parser.parse(data=data, defaults=defaults)
