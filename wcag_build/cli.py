"""Command line access to the site build helpers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

import requests

from wcag_build.fetch_json import fetch_json
from wcag_build.fetch_status_error import FetchStatusError
from wcag_build.fetch_text import fetch_text
from wcag_build.generate_id import generate_id
from wcag_build.load_config import load_config
from wcag_build.resolve_decimal_version import resolve_decimal_version
from wcag_build.wcag_item import WcagItem
from wcag_build.wcag_sort import sort_wcag_items


def _cmd_slug(args: argparse.Namespace, config: dict[str, Any]) -> int:
    for title in args.titles:
        print(generate_id(title))
    return 0


def _cmd_version(args: argparse.Namespace, config: dict[str, Any]) -> int:
    print(resolve_decimal_version(args.code))
    return 0


def _cmd_sort(args: argparse.Namespace, config: dict[str, Any]) -> int:
    for item in sort_wcag_items(WcagItem(num) for num in args.nums):
        print(item.num)
    return 0


def _cmd_fetch(args: argparse.Namespace, config: dict[str, Any]) -> int:
    fetch_cfg = config.get("fetch", {})
    request_kwargs: dict[str, Any] = {
        "headers": {"User-Agent": fetch_cfg.get("user_agent", "")},
    }
    # A null timeout keeps the fetch default rather than disabling it.
    if fetch_cfg.get("timeout") is not None:
        request_kwargs["timeout"] = fetch_cfg["timeout"]
    try:
        if not args.json:
            sys.stdout.write(fetch_text(args.url, **request_kwargs))
            return 0
        if args.default is not None:
            request_kwargs["default_response"] = json.loads(args.default)
        data = fetch_json(args.url, run_mode=config.get("run_mode"), **request_kwargs)
    except (FetchStatusError, requests.RequestException) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(data, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the wcag-build command."""
    ap = argparse.ArgumentParser(
        prog="wcag-build",
        description="Helpers used while building the WCAG documentation site.",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--run-mode",
        help="Override the configured run mode (e.g. 'build' or 'serve')",
    )
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    slug = sub.add_parser("slug", help="Print the permalink ID for each title")
    slug.add_argument("titles", nargs="+", help="Heading titles")
    slug.set_defaults(func=_cmd_slug)

    version = sub.add_parser("version", help="Format a compact version code")
    version.add_argument("code", help='Compact version, e.g. "22"')
    version.set_defaults(func=_cmd_version)

    sort = sub.add_parser("sort", help="Sort WCAG numbers ascending")
    sort.add_argument("nums", nargs="+", help='Dotted numbers, e.g. "1.4.10"')
    sort.set_defaults(func=_cmd_sort)

    fetch = sub.add_parser("fetch", help="Fetch a URL, failing on status >= 400")
    fetch.add_argument("url", help="URL to fetch")
    fetch.add_argument("--json", action="store_true", help="Decode the body as JSON")
    fetch.add_argument(
        "--default",
        help=(
            "JSON value to return if the fetch fails outside build mode "
            "(needs --json)"
        ),
    )
    fetch.set_defaults(func=_cmd_fetch)
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the wcag-build command."""
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.command == "fetch" and args.default is not None and not args.json:
        ap.error("--default requires --json")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = load_config(args.config)
    if args.run_mode:
        config["run_mode"] = args.run_mode
    return args.func(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
