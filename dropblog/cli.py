from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Optional

from .config import INDEX_ORDERS, load_config, resolve_index_order
from .ingest import process_drop_dir
from .pages import FEED_LIMIT
from .render import TemplateStore, copy_static
from .utils import ensure_dirs, parse_bool, parse_int
from .watch import Scheduler

DEFAULT_BASE_URL = "https://example.com/weblog/"
DEFAULT_INTERVAL = 5


def run_cycle(args: argparse.Namespace, templates: TemplateStore) -> bool:
    return process_drop_dir(
        Path(args.drop),
        Path(args.output),
        templates,
        args.base_url,
        feed_limit=max(0, args.feed_limit),
        index_order=resolve_index_order(args.index_order),
        static=args.copy_static,
    )


def build_parser(config: dict, config_path: str) -> argparse.ArgumentParser:
    def cfg_value(key: str, default: object) -> object:
        value = config.get(key)
        return default if value is None else value

    def cfg_str(key: str, default: str) -> str:
        return str(cfg_value(key, default))

    def cfg_bool(key: str, default: bool) -> bool:
        return parse_bool(cfg_value(key, default))

    def cfg_int(key: str, default: int) -> int:
        return parse_int(cfg_value(key, default), default)

    parser = argparse.ArgumentParser(description="Watch a drop directory and publish plain-text posts.")
    parser.add_argument("--config", default=config_path, help="Path to config file (TOML/YAML/JSON).")
    parser.add_argument("--drop", default=cfg_str("drop", "generate"), help="Directory watched for new posts.")
    parser.add_argument("--output", default=cfg_str("output", "public_html"), help="Output directory for the site.")
    parser.add_argument(
        "--templates",
        default=cfg_str("templates", "templates"),
        help="Directory containing the page and feed templates.",
    )
    parser.add_argument(
        "--base-url",
        default=cfg_str("base_url", DEFAULT_BASE_URL),
        help="Public URL prefix used for absolute feed links.",
    )
    parser.add_argument(
        "--feed-limit",
        default=cfg_int("feed_limit", FEED_LIMIT),
        type=int,
        help="Maximum number of items in rss.xml.",
    )
    parser.add_argument(
        "--interval",
        default=cfg_int("interval", DEFAULT_INTERVAL),
        type=int,
        help="Seconds to wait between scans.",
    )
    parser.add_argument(
        "--index-order",
        default=cfg_str("index_order", "scan"),
        choices=INDEX_ORDERS,
        help="Order of the index listing: directory scan order or newest first.",
    )
    parser.add_argument(
        "--once",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("once", False),
        help="Run a single scan and exit.",
    )
    parser.add_argument(
        "--copy-static",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("copy_static", True),
        help="Copy styles.css and favicon.png from the templates directory.",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument(
        "--config",
        default="site.toml",
        help="Path to config file (TOML/YAML/JSON).",
    )
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(Path(pre_args.config))
    args = build_parser(config, pre_args.config).parse_args(argv)

    print("Starting blog generator...")
    templates = TemplateStore(Path(args.templates))
    templates.require_all()

    drop_dir = Path(args.drop)
    output_dir = Path(args.output)
    ensure_dirs(drop_dir, output_dir)
    if args.copy_static:
        copy_static(templates.templates_dir, output_dir)

    if args.once:
        start = time.perf_counter()
        run_cycle(args, templates)
        elapsed = time.perf_counter() - start
        print(f"Build completed in {elapsed:.2f}s.")
        return

    scheduler = Scheduler(lambda: run_cycle(args, templates), args.interval)
    scheduler.install_signal_handlers()
    scheduler.run_forever()
