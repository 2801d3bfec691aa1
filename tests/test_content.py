from __future__ import annotations

import datetime as dt

from dropblog.content import (
    DRAFT,
    PUBLISHED,
    collect_posts,
    load_post,
    order_posts,
    parse_source,
    read_body,
    read_first_line,
    render_body,
)


def test_parse_source_splits_title_and_body():
    title, lines = parse_source("My First Post\nLine one.\nLine two.")
    assert title == "My First Post"
    assert lines == ["Line one.", "Line two."]


def test_parse_source_empty_text():
    assert parse_source("") == ("", [])


def test_parse_source_handles_crlf():
    assert parse_source("Title\r\nBody\r\n") == ("Title", ["Body"])


def test_render_body_keeps_markup_unescaped():
    assert render_body(["<b>bold</b>", "a & b"]) == "<b>bold</b><br>\na & b<br>\n"


def test_read_body_skips_title(tmp_path):
    path = tmp_path / "post.txt"
    path.write_text("Title\nfirst\nsecond\n", encoding="utf-8")
    assert read_body(path) == "first\nsecond\n"
    assert read_body(tmp_path / "missing.txt") == ""


def test_load_post_published(site, publish):
    html_path = publish(site["posts"], "tech", "guide", "Guide", "Body", date="2024-03-05 14:07")
    post = load_post(html_path, "tech")
    assert post["title"] == "Guide"
    assert post["date"] == "2024-03-05 14:07"
    assert post["date_dt"] == dt.datetime(2024, 3, 5, 14, 7)
    assert post["link"] == "posts/tech/guide.html"
    assert post["txt_link"] == "posts/tech/guide.txt"
    assert post["status"] == PUBLISHED


def test_load_post_without_date_is_draft(site, publish):
    html_path = publish(site["posts"], "general", "hello", "Hello")
    post = load_post(html_path, "general")
    assert post["date"] == ""
    assert post["date_dt"] is None
    assert post["status"] == DRAFT


def test_load_post_without_txt_has_empty_title(site):
    category_dir = site["posts"] / "general"
    category_dir.mkdir()
    html_path = category_dir / "orphan.html"
    html_path.write_text("<h1>Orphan</h1>", encoding="utf-8")
    post = load_post(html_path, "general")
    assert post["title"] == ""
    assert post["status"] == DRAFT


def test_collect_posts_ignores_non_html(site, publish):
    publish(site["posts"], "general", "one", "One", date="2024-01-01 10:00")
    publish(site["posts"], "tech", "two", "Two", date="2024-01-02 10:00")
    (site["posts"] / "stray.html").write_text("", encoding="utf-8")
    posts = collect_posts(site["posts"])
    assert sorted(post["name"] for post in posts) == ["one", "two"]


def test_collect_posts_missing_root(tmp_path):
    assert collect_posts(tmp_path / "nope") == []


def test_order_posts_newest_puts_drafts_last():
    posts = [
        {"name": "old", "status": PUBLISHED, "date_dt": dt.datetime(2023, 1, 1)},
        {"name": "draft", "status": DRAFT, "date_dt": None},
        {"name": "new", "status": PUBLISHED, "date_dt": dt.datetime(2024, 1, 1)},
    ]
    assert [p["name"] for p in order_posts(posts, "newest")] == ["new", "old", "draft"]
    assert order_posts(posts, "scan") is posts


def test_parse_source_splits_on_newline_only():
    title, lines = parse_source("Price\x0clist\nbody\x0cmore\ncell\x1eend x\n")
    assert title == "Price\x0clist"
    assert lines == ["body\x0cmore", "cell\x1eend x"]


def test_parse_source_trailing_newline_adds_no_line():
    assert parse_source("Title\n") == ("Title", [])
    assert parse_source("Title\nBody\n\n") == ("Title", ["Body", ""])


def test_sidecar_readers_keep_form_feeds(tmp_path):
    path = tmp_path / "post.txt"
    path.write_text("Price\x0clist\nbody\x0cmore\n", encoding="utf-8")
    assert read_first_line(path) == "Price\x0clist"
    assert read_body(path) == "body\x0cmore\n"
