from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Optional

from .utils import list_dir, parse_stamp

SOURCE_EXT = ".txt"
HTML_EXT = ".html"
DATE_EXT = ".date"
LINE_BREAK = "<br>\n"

DRAFT = "draft"
PUBLISHED = "published"


def split_lines(text: str) -> list[str]:
    """Split on newlines only; a trailing newline does not start a new line."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line.rstrip("\r") for line in lines]


def parse_source(text: str) -> tuple[str, list[str]]:
    """Split a source post into its title line and body lines."""
    lines = split_lines(text)
    if not lines:
        return "", []
    return lines[0], lines[1:]


def render_body(lines: list[str]) -> str:
    return "".join(f"{line}{LINE_BREAK}" for line in lines)


def sidecar(path: Path, ext: str) -> Path:
    return path.with_suffix(ext)


def read_first_line(path: Path) -> str:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""
    lines = split_lines(text)
    return lines[0] if lines else ""


def read_body(path: Path) -> str:
    """Everything after the title line, verbatim."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ""
    return text.partition("\n")[2]


def post_status(html_path: Path, date_dt: Optional[dt.datetime]) -> str:
    txt_path = sidecar(html_path, SOURCE_EXT)
    date_path = sidecar(html_path, DATE_EXT)
    if html_path.exists() and txt_path.exists() and date_path.exists() and date_dt is not None:
        return PUBLISHED
    return DRAFT


def load_post(html_path: Path, category: str) -> dict:
    name = html_path.stem
    date_str = read_first_line(sidecar(html_path, DATE_EXT))
    date_dt = parse_stamp(date_str) if date_str else None
    return {
        "name": name,
        "category": category,
        "title": read_first_line(sidecar(html_path, SOURCE_EXT)),
        "date": date_str,
        "date_dt": date_dt,
        "link": f"posts/{category}/{name}{HTML_EXT}",
        "txt_link": f"posts/{category}/{name}{SOURCE_EXT}",
        "status": post_status(html_path, date_dt),
    }


def collect_posts(posts_dir: Path) -> list[dict]:
    if not posts_dir.is_dir():
        return []
    posts = []
    for category_dir in list_dir(posts_dir):
        if not category_dir.is_dir():
            continue
        for entry in list_dir(category_dir):
            if entry.name.endswith(HTML_EXT) and entry.is_file():
                posts.append(load_post(entry, category_dir.name))
    return posts


def order_posts(posts: list[dict], order: str) -> list[dict]:
    if order != "newest":
        return posts
    published = [post for post in posts if post["status"] == PUBLISHED]
    drafts = [post for post in posts if post["status"] != PUBLISHED]
    published.sort(key=lambda p: p["date_dt"], reverse=True)
    return published + drafts
