from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path
from typing import Optional

from .content import HTML_EXT, SOURCE_EXT
from .pages import FEED_LIMIT, render_post, update_index
from .render import TemplateStore
from .utils import list_dir

DEFAULT_CATEGORY = "general"


def publish_file(
    src: Path,
    category_dir: Path,
    category: str,
    templates: TemplateStore,
    now: Optional[dt.datetime] = None,
) -> bool:
    """Render one source file and remove it once its page exists."""
    dst = category_dir / f"{src.name[: -len(SOURCE_EXT)]}{HTML_EXT}"
    if not render_post(src, dst, category, templates, now=now) or not dst.is_file():
        return False
    try:
        src.unlink()
    except OSError as exc:
        print(f"Could not remove {src}: {exc}", file=sys.stderr)
    return True


def is_source(path: Path) -> bool:
    return path.name.endswith(SOURCE_EXT) and len(path.name) > len(SOURCE_EXT) and path.is_file()


def ensure_category(posts_dir: Path, category: str) -> Optional[Path]:
    category_dir = posts_dir / category
    try:
        category_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Could not create category {category_dir}: {exc}", file=sys.stderr)
        return None
    return category_dir


def process_drop_dir(
    drop_dir: Path,
    output_dir: Path,
    templates: TemplateStore,
    base_url: str,
    feed_limit: int = FEED_LIMIT,
    index_order: str = "scan",
    static: bool = True,
    now: Optional[dt.datetime] = None,
) -> bool:
    if not drop_dir.is_dir():
        return False
    posts_dir = output_dir / "posts"
    general_dir = ensure_category(posts_dir, DEFAULT_CATEGORY)

    for entry in list_dir(drop_dir):
        if is_source(entry):
            if general_dir is not None:
                publish_file(entry, general_dir, DEFAULT_CATEGORY, templates, now=now)
        elif entry.is_dir():
            category_dir = ensure_category(posts_dir, entry.name)
            if category_dir is None:
                continue
            for post in list_dir(entry):
                if is_source(post):
                    publish_file(post, category_dir, entry.name, templates, now=now)

    update_index(
        output_dir,
        templates,
        base_url,
        feed_limit=feed_limit,
        index_order=index_order,
        static=static,
        now=now,
    )
    return True
