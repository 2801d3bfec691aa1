from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

try:
    import tomllib as toml
except ImportError:
    try:
        import tomli as toml
    except ImportError:  # pragma: no cover - optional dependency
        toml = None

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

INDEX_ORDERS = ("scan", "newest")


def config_error(message: str) -> NoReturn:
    print(message, file=sys.stderr)
    sys.exit(1)


def parse_config_text(text: str, suffix: str, path: Path) -> object:
    if suffix == ".toml":
        if toml is None:
            config_error("TOML config requires tomllib (Python 3.11+) or tomli.")
        try:
            return toml.loads(text)
        except toml.TOMLDecodeError as exc:
            config_error(f"Invalid TOML in config file {path}: {exc}")
    if suffix in {".yml", ".yaml"}:
        if yaml is None:
            config_error("YAML config requires PyYAML.")
        try:
            return yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            config_error(f"Invalid YAML in config file {path}: {exc}")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        config_error(f"Invalid JSON in config file {path}: {exc}")


def load_config(path: Path) -> dict:
    """Read the site settings; a missing file means all defaults."""
    if not path.exists():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        config_error(f"Could not read config file {path}: {exc}")
    data = parse_config_text(text, path.suffix.lower(), path)
    if not isinstance(data, dict):
        config_error(f"Config file must hold a mapping of settings: {path}")
    return data


def resolve_index_order(value: object) -> str:
    order = str(value or "scan").strip().lower()
    if order not in INDEX_ORDERS:
        print(f"Unknown index order {order!r}, using 'scan'.", file=sys.stderr)
        return "scan"
    return order
