"""Content sources and page queries.

A content source answers the page queries: site metadata, the raw document
records, and a single document by slug. Records are returned unvalidated;
the page resolver turns them into Documents and reports malformed ones.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from html import unescape
from pathlib import Path
from typing import Any, Protocol

import markdown
import yaml
from pydantic import ValidationError

from ..config import EXCERPT_LENGTH, MARKDOWN_EXTENSIONS, RESUME_HREF
from ..errors import MalformedFrontmatter, MissingDocument, MissingMetadata
from .models import Document, FeaturedImage, NavigationContext, SiteMetadata, check_slug

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\n(.*?)\n---[ \t]*(?:\n|\Z)", re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")

SITE_FILES = ("site.yaml", "site.yml")


class ContentSource(Protocol):
    def site_metadata(self) -> SiteMetadata: ...

    def records(self) -> list[Mapping[str, Any]]: ...

    def document(self, slug: str) -> Document: ...


@dataclass(frozen=True)
class SitePageData:
    """Query result for pages that only need site metadata."""

    site: SiteMetadata


@dataclass(frozen=True)
class PostPageData:
    """Query result for a blog post page."""

    site: SiteMetadata
    document: Document
    navigation: NavigationContext


def query_site(source: ContentSource) -> SitePageData:
    return SitePageData(site=source.site_metadata())


def query_post(source: ContentSource, slug: str, navigation: NavigationContext) -> PostPageData:
    """Fetch a post and bind it to its navigation context.

    Raises:
        MissingDocument: If the source has no document with this slug
    """
    return PostPageData(
        site=source.site_metadata(),
        document=source.document(slug),
        navigation=navigation,
    )


class MemorySource:
    """In-memory content source."""

    def __init__(
        self,
        site: SiteMetadata | Mapping[str, Any] | None,
        records: Iterable[Mapping[str, Any] | Document] = (),
    ):
        self._site = site
        self._records = list(records)

    def site_metadata(self) -> SiteMetadata:
        if self._site is None:
            raise MissingMetadata("Site metadata is absent")
        if isinstance(self._site, SiteMetadata):
            return self._site
        return _site_from_mapping(self._site)

    def records(self) -> list[Mapping[str, Any]]:
        out: list[Mapping[str, Any]] = []
        for r in self._records:
            out.append(r.model_dump() if isinstance(r, Document) else r)
        return out

    def document(self, slug: str) -> Document:
        for r in self._records:
            if isinstance(r, Document):
                if r.id == slug:
                    return r
            elif (r.get("id") or r.get("slug")) == slug:
                return Document.from_record(r)
        raise MissingDocument(slug)


class DirectorySource:
    """Content source backed by a directory.

    Layout::

        content/
          site.yaml
          posts/
            hello-world.md
            with-images/
              index.md
              cover.jpg
    """

    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)
        self.posts_dir = self.content_dir / "posts"
        self._site: SiteMetadata | None = None
        self._records: list[dict[str, Any]] | None = None

    def site_metadata(self) -> SiteMetadata:
        if self._site is None:
            self._site = self._load_site()
        return self._site

    def records(self) -> list[Mapping[str, Any]]:
        if self._records is None:
            self._records = self._load_records()
        return list(self._records)

    def document(self, slug: str) -> Document:
        for r in self.records():
            if r.get("id") == slug:
                return Document.from_record(r)
        raise MissingDocument(slug)

    def _load_site(self) -> SiteMetadata:
        path = next((self.content_dir / n for n in SITE_FILES if (self.content_dir / n).exists()), None)
        if path is None:
            raise MissingMetadata(f"Site metadata not found in {self.content_dir}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise MissingMetadata(f"Unreadable site metadata {path}: {e}") from e
        if not isinstance(data, Mapping):
            raise MissingMetadata(f"Site metadata in {path} is not a mapping")
        logger.debug("Loaded site metadata from %s", path)
        return _site_from_mapping(data)

    def _load_records(self) -> list[dict[str, Any]]:
        if not self.posts_dir.is_dir():
            logger.debug("No posts directory at %s", self.posts_dir)
            return []

        records: list[dict[str, Any]] = []
        for path in _post_files(self.posts_dir):
            record = _read_post(path)
            if record is None:
                logger.debug("Skipping draft %s", path)
                continue
            records.append(record)
        logger.debug("Loaded %d post record(s) from %s", len(records), self.posts_dir)
        return records


def _site_from_mapping(data: Mapping[str, Any]) -> SiteMetadata:
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise MissingMetadata("Site metadata has no title")
    about = data.get("about") or ""
    try:
        return SiteMetadata(
            title=title.strip(),
            author=data.get("author"),
            bio=data.get("bio"),
            description=data.get("description"),
            about_html=data.get("about_html") or (render_markdown(about) if about else ""),
            resume=data.get("resume") or RESUME_HREF,
        )
    except ValidationError as e:
        raise MissingMetadata(f"Malformed site metadata: {e}") from e


def _post_files(posts_dir: Path) -> list[Path]:
    files: list[Path] = []
    for entry in sorted(posts_dir.iterdir()):
        if entry.is_file() and entry.suffix == ".md":
            files.append(entry)
        elif entry.is_dir() and (entry / "index.md").is_file():
            files.append(entry / "index.md")
    return files


def _read_post(path: Path) -> dict[str, Any] | None:
    slug = path.parent.name if path.name == "index.md" else path.stem
    text = path.read_text(encoding="utf-8").replace("\r\n", "\n")

    meta, body_md = split_frontmatter(text, slug)
    slug = check_slug(str(meta.get("slug") or slug))
    if meta.get("draft") is True:
        return None

    body = render_markdown(body_md)
    return {
        "id": slug,
        "title": meta.get("title"),
        "date": meta.get("date"),
        "description": meta.get("description"),
        "excerpt": make_excerpt(body),
        "body": body,
        "featured_image": _local_image(
            meta.get("featuredImage") or meta.get("featured_image"),
            meta.get("featuredImageAlt") or meta.get("featured_image_alt"),
            path.parent,
            slug,
        ),
    }


def split_frontmatter(text: str, slug: str) -> tuple[dict[str, Any], str]:
    """Split a `---` delimited YAML header from the markdown body."""
    m = _FRONTMATTER_RE.match(text)
    if not m:
        return {}, text
    try:
        meta = yaml.safe_load(m.group(1)) or {}
    except yaml.YAMLError as e:
        raise MalformedFrontmatter(slug, "frontmatter", "is not valid YAML") from e
    if not isinstance(meta, dict):
        raise MalformedFrontmatter(slug, "frontmatter", "is not a mapping")
    return meta, text[m.end():]


def render_markdown(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def make_excerpt(html: str, length: int = EXCERPT_LENGTH) -> str:
    """Plain-text excerpt pruned to `length` characters at a word boundary."""
    text = _WS_RE.sub(" ", unescape(_TAG_RE.sub("", html))).strip()
    if len(text) <= length:
        return text
    cut = text[:length].rsplit(" ", 1)[0] if " " in text[:length] else text[:length]
    return cut.rstrip(" ,.;:") + "…"


def _local_image(value: Any, alt: Any, post_dir: Path, slug: str) -> FeaturedImage | None:
    if not value:
        return None
    src = str(value)
    if "://" in src or src.startswith("/"):
        return FeaturedImage(src=src, alt=str(alt) if alt else None)
    file = (post_dir / src).resolve()
    if file.name == "index.html":
        raise MalformedFrontmatter(slug, "featuredImage", "would overwrite the post page")
    if not file.is_file():
        raise MalformedFrontmatter(slug, "featuredImage", f"file not found ({src})")
    return FeaturedImage(src=f"/blog/{slug}/{file.name}", alt=str(alt) if alt else None, file=file)
