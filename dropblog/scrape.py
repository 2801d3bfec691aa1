"""Pull post fields back out of index listing fragments.

A fragment looks like::

    <p><a href="posts/tech/guide.html">Guide</a> [tech] <a href="posts/tech/guide.txt">[txt]</a> <span class="date">2024-03-05 14:07</span></p>

Every function here is pure and works on a single fragment line.
"""
from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Optional

from .content import HTML_EXT, SOURCE_EXT
from .utils import parse_stamp

HREF_OPEN = 'href="'
DATE_OPEN = 'class="date">'
ANCHOR_CLOSE = "</a>"


def between(text: str, start_token: str, end_token: str) -> Optional[str]:
    start = text.find(start_token)
    if start == -1:
        return None
    start += len(start_token)
    end = text.find(end_token, start)
    if end == -1:
        return None
    return text[start:end]


def extract_title(fragment: str) -> str:
    title_start = fragment.find(">")
    title_end = fragment.find(ANCHOR_CLOSE)
    if title_start == -1 or title_end == -1:
        return ""
    start = title_start + 1
    nested = fragment.find("<", start)
    if nested != -1 and nested < title_end:
        # one level of markup such as the opening <a ...> tag
        close = fragment.find(">", nested)
        start = close + 1 if close != -1 else start
    if start > title_end:
        return ""
    return fragment[start:title_end]


def extract_link(fragment: str) -> str:
    return between(fragment, HREF_OPEN, '"') or ""


def extract_date(fragment: str) -> Optional[dt.datetime]:
    raw = between(fragment, DATE_OPEN, "<")
    if raw is None:
        return None
    return parse_stamp(raw)


def txt_path_for_link(output_dir: Path, link: str) -> Path:
    if link.endswith(HTML_EXT):
        link = link[: -len(HTML_EXT)]
    return output_dir / f"{link}{SOURCE_EXT}"
