"""
Tests for run.py main() with an injected container.
"""
import json
import os
from datetime import datetime, timezone

from run import default_output_dir, main
from docscrawl.container import Container
from docscrawl.services.http_service import HttpService

BASE = "https://docs.example.com/spring-boot"


def _container(http_client, output_dir=None, **values):
    container = Container()
    container.config.DOCSCRAWL_BASE_URL.from_value(BASE)
    container.config.DOCSCRAWL_OUTPUT_DIR.from_value(output_dir)
    container.config.DOCSCRAWL_BATCH_SIZE.from_value(values.get("batch_size", 2))
    container.config.DOCSCRAWL_BATCH_DELAY.from_value(0.0)
    container.config.DOCSCRAWL_NAV_ROOT_DEPTH.from_value(1)
    container.config.DOCSCRAWL_CONFIG_FILE.from_value(values.get("config_file"))
    container.http_service.override(HttpService(user_agent="TestBot/1.0", http_client=http_client))
    return container


def test_container_creates_services():
    container = Container()
    container.config.DOCSCRAWL_OUTPUT_DIR.from_value("out")
    container.config.DOCSCRAWL_CONFIG_FILE.from_value(None)

    assert container.http_service() is not None
    assert container.navigation_service() is not None
    assert container.document_fetcher() is not None
    assert container.docs_crawler() is not None
    assert container.nav_tree_extractor().layout is container.crawl_config().layout


def test_main_runs_full_crawl(tmp_path, nav_html, make_article_html, fake_http_client):
    client = fake_http_client({
        BASE: nav_html,
        "https://docs.example.com/guide/a.html": make_article_html("A page"),
        "https://docs.example.com/spring-boot/guide/c.html": make_article_html("C page"),
        "https://docs.example.com/guide/c/d.html": 404,
    })
    out = tmp_path / "export"

    assert main(container=_container(client, str(out))) == 0

    index = json.loads((out / "articles.json").read_text(encoding="utf-8"))
    assert sorted(index) == ["A page", "C page"]
    assert (out / "nav-data.json").exists()


def test_main_defaults_output_dir_to_timestamped_export(tmp_path, monkeypatch, nav_html, fake_http_client):
    monkeypatch.chdir(tmp_path)
    client = fake_http_client({BASE: nav_html})

    assert main(container=_container(client)) == 0

    runs = list((tmp_path / "export").iterdir())
    assert len(runs) == 1
    assert (runs[0] / "nav-data.json").exists()


def test_main_returns_error_code_on_fatal_nav_failure(tmp_path, fake_http_client):
    client = fake_http_client({BASE: 503})
    assert main(container=_container(client, str(tmp_path))) == 1
    assert client.call_count == 1


def test_main_returns_error_code_on_invalid_config(tmp_path, fake_http_client):
    client = fake_http_client({})
    assert main(container=_container(client, str(tmp_path), batch_size=0)) == 1
    assert client.call_count == 0


def test_main_reads_yaml_config_file(tmp_path, nav_html, fake_http_client):
    config_file = tmp_path / "crawl.yml"
    config_file.write_text("base_url: https://other.example.com/docs\n", encoding="utf-8")
    client = fake_http_client({"https://other.example.com/docs": nav_html})

    assert main(container=_container(client, str(tmp_path / "out"), config_file=str(config_file))) == 0
    assert client.call_args_list[0].args[0] == "https://other.example.com/docs"


def test_default_output_dir_is_filesystem_safe():
    now = datetime(2026, 10, 18, 12, 30, 45, 123000, tzinfo=timezone.utc)
    path = default_output_dir(now)
    assert path == os.path.join(os.getcwd(), "export", "2026-10-18T12-30-45-123_00-00")
