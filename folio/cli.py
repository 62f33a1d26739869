"""CLI entry point for folio."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import CONTENT_DIR, OUT_DIR, STATIC_DIR
from .errors import BuildError, BuildFailed


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="folio",
        description="Build a static blog and portfolio site from markdown content.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"folio {__version__}",
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Generate the static site")
    p_build.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Content directory")
    p_build.add_argument("--out", "-o", type=Path, default=OUT_DIR, help="Site output directory")
    p_build.add_argument("--static", type=Path, default=STATIC_DIR, help="Files copied to the output root")
    p_build.add_argument("--no-listing", action="store_true", help="Skip the /blog index page")
    p_build.add_argument("--verbose", action="store_true", help="Log each step")

    p_routes = sub.add_parser("routes", help="List the routes a build would produce")
    p_routes.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Content directory")
    p_routes.add_argument("--no-listing", action="store_true", help="Skip the /blog index page")

    args = parser.parse_args(argv)

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "routes":
        return _cmd_routes(args)

    parser.print_help()
    return 2


def _cmd_build(args: Any) -> int:
    from .content.source import DirectorySource
    from .site.build import build_site

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        report = build_site(
            DirectorySource(args.content),
            args.out,
            with_listing=not args.no_listing,
            static_dir=args.static,
        )
    except BuildFailed as e:
        print(f"Error: {len(e.failures)} route(s) failed", file=sys.stderr)
        for path, err in e.failures:
            print(f"  {path}: {err}", file=sys.stderr)
        return 1
    except BuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Routes: {report.get('routes')}")
    print(f"  Posts: {report.get('posts')}")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")
    return 0


def _cmd_routes(args: Any) -> int:
    from .content.source import DirectorySource
    from .site.resolver import resolve_routes

    source = DirectorySource(args.content)
    try:
        routes = resolve_routes(source.site_metadata(), source.records(), with_listing=not args.no_listing)
    except BuildError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for r in routes:
        print(f"  {r.kind:8} {r.path:40} {r.output_path}")
    return 0


if __name__ == "__main__":
    app()
