from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from dropblog.render import TEMPLATE_FILES, TemplateStore

TEMPLATES = {
    "header": "<html><body>\n",
    "footer": "</body></html>\n",
    "post_header": "<html><body class=\"post-page\">\n",
    "post_footer": "</body></html>\n",
    "nav": "<nav><a href=\"../../index.html\">index</a></nav>\n",
    "index": "<h1>Posts</h1>\n<!-- POSTS_LIST -->\n<hr>\n",
    "rss_header": "<rss version=\"2.0\"><channel><lastBuildDate>%s</lastBuildDate>\n",
    "rss_item": "<item><title>%s</title><link>%s</link><guid>%s</guid><pubDate>%s</pubDate>"
    "<description>%s</description></item>\n",
    "rss_footer": "</channel></rss>\n",
}

BASE_URL = "https://blog.example.org/weblog/"
NOW = dt.datetime(2024, 3, 5, 14, 7)


def write_templates(directory: Path, overrides: dict | None = None) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    texts = dict(TEMPLATES)
    texts.update(overrides or {})
    for key, filename in TEMPLATE_FILES.items():
        if texts.get(key) is not None:
            (directory / filename).write_text(texts[key], encoding="utf-8")
    return directory


@pytest.fixture
def templates(tmp_path: Path) -> TemplateStore:
    return TemplateStore(write_templates(tmp_path / "templates"))


@pytest.fixture
def site(tmp_path: Path) -> dict:
    drop = tmp_path / "generate"
    output = tmp_path / "public_html"
    drop.mkdir()
    (output / "posts").mkdir(parents=True)
    return {"drop": drop, "output": output, "posts": output / "posts"}


def publish(posts_dir: Path, category: str, name: str, title: str, body: str = "", date: str | None = None) -> Path:
    """Lay out a rendered post triple without going through the renderer."""
    category_dir = posts_dir / category
    category_dir.mkdir(parents=True, exist_ok=True)
    html_path = category_dir / f"{name}.html"
    html_path.write_text(f"<h1>{title}</h1>\n", encoding="utf-8")
    (category_dir / f"{name}.txt").write_text(f"{title}\n{body}", encoding="utf-8")
    if date is not None:
        (category_dir / f"{name}.date").write_text(date, encoding="utf-8")
    return html_path


@pytest.fixture
def now() -> dt.datetime:
    return NOW


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture(name="publish")
def publish_fixture():
    return publish
