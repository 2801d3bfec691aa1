from __future__ import annotations

import shutil
import sys
from pathlib import Path

POSTS_LIST_MARKER = "<!-- POSTS_LIST -->"
SLOT = "%s"
STATIC_ASSETS = ("styles.css", "favicon.png")

TEMPLATE_FILES = {
    "header": "header.template.html",
    "footer": "footer.template.html",
    "post_header": "post.header.template.html",
    "post_footer": "post.footer.template.html",
    "nav": "nav.template.html",
    "index": "index.template.html",
    "rss_header": "rss.header.template.xml",
    "rss_item": "rss.item.template.xml",
    "rss_footer": "rss.footer.template.xml",
}


class TemplateStore:
    """Named template fragments read from a directory.

    Templates are read on every ``load`` so edits show up on the next cycle.
    A missing template is fatal.
    """

    def __init__(self, templates_dir: Path):
        self.templates_dir = Path(templates_dir)

    def path(self, name: str) -> Path:
        return self.templates_dir / TEMPLATE_FILES.get(name, name)

    def load(self, name: str) -> str:
        path = self.path(name)
        try:
            return read_template(path)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Template not found or unreadable: {path} ({exc})", file=sys.stderr)
            sys.exit(1)

    def require_all(self) -> None:
        for name in TEMPLATE_FILES:
            self.load(name)


def fill_marker(template: str, marker: str, value: str) -> str:
    before, found, after = template.partition(marker)
    if not found:
        return template
    return f"{before}{value}{after}"


def fill_slots(template: str, *values: str) -> str:
    parts = template.split(SLOT)
    output = [parts[0]]
    for idx, part in enumerate(parts[1:]):
        output.append(values[idx] if idx < len(values) else "")
        output.append(part)
    return "".join(output)


def read_template(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def copy_static(templates_dir: Path, output_dir: Path, names: tuple[str, ...] = STATIC_ASSETS) -> None:
    for name in names:
        src = templates_dir / name
        if not src.is_file():
            continue
        try:
            shutil.copy2(src, output_dir / name)
        except OSError as exc:
            print(f"Could not copy {src}: {exc}", file=sys.stderr)
