from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path
from typing import Optional

from .content import (
    DATE_EXT,
    SOURCE_EXT,
    collect_posts,
    order_posts,
    parse_source,
    read_body,
    render_body,
    sidecar,
)
from .render import POSTS_LIST_MARKER, TemplateStore, copy_static, fill_marker, fill_slots, write_text
from .scrape import extract_date, extract_link, extract_title, txt_path_for_link
from .utils import format_stamp, join_url, rfc822_date

FEED_LIMIT = 20


def render_post(
    src: Path,
    dst: Path,
    category: str,
    templates: TemplateStore,
    now: Optional[dt.datetime] = None,
) -> bool:
    try:
        raw = src.read_bytes()
    except OSError:
        return False
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        print(f"Skipping {src}: not valid UTF-8 ({exc})", file=sys.stderr)
        return False

    try:
        sidecar(dst, SOURCE_EXT).write_bytes(raw)
    except OSError as exc:
        print(f"Could not copy {src}: {exc}", file=sys.stderr)

    title, lines = parse_source(text)
    date_str = format_stamp(now or dt.datetime.now())
    category_html = f"<p>Category: {category}</p>\n" if category else ""
    html_doc = (
        f"{templates.load('post_header')}"
        f"<h1>{title}</h1>\n"
        f'<div class="date">Published: {date_str}</div>\n'
        f"{category_html}"
        f'<div class="post">\n{render_body(lines)}</div>\n'
        f"{templates.load('nav')}"
        f"{templates.load('post_footer')}"
    )
    try:
        dst.write_text(html_doc, encoding="utf-8")
    except OSError as exc:
        print(f"Could not write {dst}: {exc}", file=sys.stderr)
        return False
    try:
        sidecar(dst, DATE_EXT).write_text(date_str, encoding="utf-8")
    except OSError as exc:
        print(f"Could not write date for {dst}: {exc}", file=sys.stderr)

    print(f"Processed: {src}")
    return True


def build_fragment(post: dict) -> str:
    return (
        f'<p><a href="{post["link"]}">{post["title"]}</a> [{post["category"]}] '
        f'<a href="{post["txt_link"]}">[txt]</a> '
        f'<span class="date">{post["date"]}</span></p>\n'
    )


def build_listing(posts: list[dict]) -> str:
    return "".join(build_fragment(post) for post in posts)


def update_index(
    output_dir: Path,
    templates: TemplateStore,
    base_url: str,
    feed_limit: int = FEED_LIMIT,
    index_order: str = "scan",
    static: bool = True,
    now: Optional[dt.datetime] = None,
) -> Optional[str]:
    print("Updating index file...")
    if static:
        copy_static(templates.templates_dir, output_dir)
        print("Static assets copied")

    posts = order_posts(collect_posts(output_dir / "posts"), index_order)
    listing = build_listing(posts)
    index_html = fill_marker(templates.load("index"), POSTS_LIST_MARKER, listing)
    html_doc = f"{templates.load('header')}{index_html}{templates.load('footer')}"
    try:
        write_text(output_dir / "index.html", html_doc)
    except OSError as exc:
        print(f"Error: Could not create index.html ({exc})", file=sys.stderr)
        return None
    print("Index file updated")

    build_rss(listing, output_dir, templates, base_url, feed_limit, now=now)
    return listing


def feed_item(fragment: str, output_dir: Path, base_url: str) -> Optional[dict]:
    """Rebuild one feed item from an index fragment, or None when it is unusable."""
    title = extract_title(fragment)
    path = extract_link(fragment)
    date_dt = extract_date(fragment)
    if date_dt is None or not title or not path:
        return None
    return {
        "title": title,
        "link": join_url(base_url, path),
        "date": rfc822_date(date_dt),
        "content": read_body(txt_path_for_link(output_dir, path)),
    }


def build_rss(
    listing: str,
    output_dir: Path,
    templates: TemplateStore,
    base_url: str,
    feed_limit: int = FEED_LIMIT,
    now: Optional[dt.datetime] = None,
) -> bool:
    items = []
    for fragment in listing.split("\n"):
        if len(items) >= feed_limit:
            break
        if not fragment.strip():
            continue
        item = feed_item(fragment, output_dir, base_url)
        if item is None:
            continue
        items.append(
            fill_slots(
                templates.load("rss_item"),
                item["title"],
                item["link"],
                item["link"],
                item["date"],
                item["content"],
            )
        )
    generated = rfc822_date(now or dt.datetime.now())
    rss = f"{fill_slots(templates.load('rss_header'), generated)}{''.join(items)}{templates.load('rss_footer')}"
    try:
        write_text(output_dir / "rss.xml", rss)
    except OSError as exc:
        print(f"Could not create rss.xml: {exc}", file=sys.stderr)
        return False
    print("Generated RSS feed")
    return True
