"""Static site generator: renders every route and writes the output tree."""

from __future__ import annotations

import logging
import shutil
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..config import SUBSCRIBE_FORM_ID
from ..content.models import Document
from ..content.source import ContentSource, query_post, query_site
from ..errors import BuildError, BuildFailed, OutputError
from .manifest import Manifest, create_manifest, write_manifest
from .resolver import (
    ABOUT,
    HOME,
    LISTING,
    POST,
    Route,
    navigation_for,
    require_site,
    resolve_documents,
    routes_for,
)
from .templates import render_about, render_blog_post, render_home, render_listing

logger = logging.getLogger(__name__)


def build_site(
    source: ContentSource,
    out_dir: Path,
    year: int | None = None,
    with_listing: bool = True,
    static_dir: Path | None = None,
    subscribe_form_id: str | None = SUBSCRIBE_FORM_ID,
) -> dict[str, Any]:
    """Build the static site from a content source.

    Every route is rendered in memory before anything is written. If any
    route fails, BuildFailed lists all of them and the output directory is
    left untouched.

    Raises:
        MissingMetadata: Site metadata absent or malformed
        MalformedFrontmatter: A document lacks a required field
        DuplicateRoute: Two documents share a slug
        BuildFailed: One or more routes failed to render
        OutputError: The output directory could not be written
    """
    site = require_site(source.site_metadata())
    sequence = resolve_documents(source.records())
    routes = routes_for(sequence, with_listing=with_listing)
    if year is None:
        year = date.today().year

    pages: list[tuple[Route, str]] = []
    failures: list[tuple[str, BuildError]] = []
    for route in routes:
        try:
            html = render_route(route, source, sequence, year=year, subscribe_form_id=subscribe_form_id)
        except BuildError as e:
            logger.error("Failed to render %s: %s", route.path, e)
            failures.append((route.path, e))
            continue
        pages.append((route, html))

    if failures:
        raise BuildFailed(failures)

    out_dir = Path(out_dir).resolve()
    manifest = create_manifest(
        site.title,
        [(r.path, r.kind, r.output_path, html) for r, html in pages],
    )
    try:
        _write_output(out_dir, pages, sequence, manifest, static_dir)
    except OSError as e:
        raise OutputError(f"Failed to write site to {out_dir}: {e}") from e

    return {
        "routes": len(pages),
        "posts": len(sequence),
        "out_dir": str(out_dir),
        "total_bytes": _dir_size_bytes(out_dir),
    }


def render_route(
    route: Route,
    source: ContentSource,
    sequence: list[Document],
    year: int | None = None,
    subscribe_form_id: str | None = SUBSCRIBE_FORM_ID,
) -> str:
    """Render a single route to a complete HTML document."""
    if route.kind == HOME:
        return render_home(query_site(source), year=year)
    if route.kind == ABOUT:
        return render_about(query_site(source), year=year)
    if route.kind == LISTING:
        return render_listing(query_site(source), sequence, year=year)
    if route.kind == POST:
        nav = navigation_for(sequence, route.document_id)
        data = query_post(source, route.document_id, nav)
        return render_blog_post(data, year=year, subscribe_form_id=subscribe_form_id)
    raise ValueError(f"Unknown route kind: {route.kind}")


def _write_output(
    out_dir: Path,
    pages: list[tuple[Route, str]],
    sequence: list[Document],
    manifest: Manifest,
    static_dir: Path | None,
) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    _remove_stale_routes(out_dir, {r.output_path for r, _ in pages})
    by_id = {d.id: d for d in sequence}

    for route, html in pages:
        target = out_dir / route.output_path
        if route.kind == POST and target.parent.exists():
            # Post directories hold the page and its assets only.
            shutil.rmtree(target.parent)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")
        if route.kind == POST:
            _copy_post_assets(by_id[route.document_id], target.parent)
        logger.debug("Wrote %s", target)

    if static_dir is not None and Path(static_dir).is_dir():
        _copy_static_dir(Path(static_dir), out_dir)

    write_manifest(manifest, out_dir)


def _remove_stale_routes(out_dir: Path, keep: set[str]) -> None:
    """Delete pages listed in the previous manifest that this build no longer produces."""
    manifest_path = out_dir / "manifest.json"
    if not manifest_path.exists():
        return
    try:
        previous = Manifest.model_validate_json(manifest_path.read_text(encoding="utf-8"))
    except ValidationError as e:
        logger.warning("Ignoring unreadable manifest %s: %s", manifest_path, e)
        return

    for info in previous.routes:
        if info.file in keep:
            continue
        page = (out_dir / info.file).resolve()
        if not page.is_relative_to(out_dir):
            continue
        if info.kind == POST:
            if page.parent.is_dir() and page.parent != out_dir:
                shutil.rmtree(page.parent)
        else:
            page.unlink(missing_ok=True)
        logger.debug("Removed stale route %s", info.path)


def _copy_post_assets(doc: Document, page_dir: Path) -> None:
    img = doc.featured_image
    if img is None or img.file is None:
        return
    shutil.copy2(img.file, page_dir / img.file.name)


def _copy_static_dir(src: Path, dst: Path) -> None:
    def _ignore(path: str, names: list[str]) -> set[str]:
        ignored = {".DS_Store", "__pycache__", ".gitkeep"}
        return {n for n in names if n in ignored}

    shutil.copytree(src, dst, ignore=_ignore, dirs_exist_ok=True)


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
