from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path
from typing import Optional

STAMP_FMT = "%Y-%m-%d %H:%M"
RFC822_FMT = "%a, %d %b %Y %H:%M:%S %z"


def parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return False


def parse_int(value: object, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def join_url(base: str, path: str) -> str:
    """Prefix a relative post path with the public base URL."""
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base + "/"
    return f"{base}/{path}"


def format_stamp(value: dt.datetime) -> str:
    return value.strftime(STAMP_FMT)


def parse_stamp(value: str) -> Optional[dt.datetime]:
    try:
        return dt.datetime.strptime(value.strip(), STAMP_FMT)
    except ValueError:
        return None


def rfc822_date(value: dt.datetime) -> str:
    # Naive stamps are local wall-clock time.
    return value.astimezone().strftime(RFC822_FMT)


def ensure_dirs(drop_dir: Path, output_dir: Path) -> None:
    for path in (drop_dir, output_dir, output_dir / "posts"):
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            print(f"Could not create directory {path}: {exc}", file=sys.stderr)


def list_dir(path: Path) -> list[Path]:
    try:
        return list(path.iterdir())
    except OSError as exc:
        print(f"Could not read directory {path}: {exc}", file=sys.stderr)
        return []
