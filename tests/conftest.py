from unittest.mock import Mock

import pytest


NAV_HTML = """
<html><body>
<nav class="nav-menu">
  <h3 class="title"><a href="/spring-boot/index.html">Spring Boot</a></h3>
  <ul class="nav-list">
    <li class="nav-item" data-depth="2"><a class="nav-link" href="/guide/a.html">A</a></li>
    <li class="nav-item" data-depth="2"><a class="nav-link link-external" href="https://github.com/example/b">B</a></li>
    <li class="nav-item" data-depth="2">
      <button class="nav-item-toggle"></button>
      <a class="nav-link" href="guide/c.html">C</a>
      <ul class="nav-list">
        <li class="nav-item" data-depth="3"><a class="nav-link" href="/guide/c/d.html">D</a></li>
      </ul>
    </li>
  </ul>
</nav>
</body></html>
"""


def article_html(title: str, crumbs=("Reference", "Web"), body: str = "<p>Body</p>") -> str:
    items = "".join(f"<li><a href='#'>{c}</a></li>" for c in crumbs)
    return (
        "<html><body><article class=\"doc\">"
        f"<nav class=\"breadcrumbs\"><ul>{items}</ul></nav>"
        f"<h1 id=\"page-title\">  {title}  </h1>"
        f"{body}"
        "</article></body></html>"
    )


@pytest.fixture
def nav_html():
    return NAV_HTML


@pytest.fixture
def make_article_html():
    return article_html


@pytest.fixture
def fake_http_client():
    """Build a requests.get stand-in serving `pages` (url -> html or status int)."""

    def _factory(pages: dict):
        def _get(url, headers=None, timeout=None):
            page = pages.get(url, 404)
            resp = Mock()
            if isinstance(page, int):
                resp.status_code = page
                resp.text = "not found"
            else:
                resp.status_code = 200
                resp.text = page
            return resp

        return Mock(side_effect=_get)

    return _factory
