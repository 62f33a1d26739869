"""Content models: site metadata, documents and navigation context."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from ..config import DATE_FORMAT
from ..errors import MalformedFrontmatter


class SiteMetadata(BaseModel):
    """Site-wide metadata, loaded once per build and shared by every page."""

    model_config = {"frozen": True}

    title: str
    author: str | None = None
    bio: str | None = None
    description: str | None = None
    about_html: str = ""  # trusted markup
    resume: str | None = None


class FeaturedImage(BaseModel):
    """Hero image for a post.

    ``src`` is the href used in the page; ``file`` is the local asset to copy
    next to the page, or None for remote images.
    """

    model_config = {"frozen": True}

    src: str
    alt: str | None = None
    file: Path | None = None


class Document(BaseModel):
    """A single blog post.

    ``body`` is pre-rendered HTML from the markdown transform and is inserted
    into pages verbatim.
    """

    model_config = {"frozen": True}

    id: str
    title: str
    date: date
    excerpt: str = ""
    body: str = ""
    featured_image: FeaturedImage | None = None
    description: str | None = None

    @property
    def formatted_date(self) -> str:
        return self.date.strftime(DATE_FORMAT)

    @property
    def summary(self) -> str:
        return self.description or self.excerpt

    @property
    def sort_key(self) -> tuple[date, str]:
        return (self.date, self.id)

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | Document) -> Document:
        """Validate a raw content record into a Document.

        Raises:
            MalformedFrontmatter: If id, title or date is missing or invalid
        """
        if isinstance(record, Document):
            return record

        doc_id = record.get("id") or record.get("slug")
        if not isinstance(doc_id, str) or not doc_id.strip():
            raise MalformedFrontmatter(None, "id")
        doc_id = check_slug(doc_id.strip())

        title = record.get("title")
        if title is None or not str(title).strip():
            raise MalformedFrontmatter(doc_id, "title")

        raw_date = record.get("date")
        if raw_date is None or raw_date == "":
            raise MalformedFrontmatter(doc_id, "date")
        parsed_date = _coerce_date(raw_date)
        if parsed_date is None:
            raise MalformedFrontmatter(doc_id, "date", f"invalid ({raw_date!r})")

        image = _coerce_image(record.get("featured_image"), record.get("featured_image_alt"))

        try:
            return cls(
                id=doc_id,
                title=str(title).strip(),
                date=parsed_date,
                excerpt=str(record.get("excerpt") or ""),
                body=str(record.get("body") or ""),
                featured_image=image,
                description=record.get("description") or None,
            )
        except ValidationError as e:
            field = ".".join(str(p) for p in e.errors()[0]["loc"]) or "record"
            raise MalformedFrontmatter(doc_id, field, "invalid") from e


class NavigationContext(BaseModel):
    """Neighbouring documents in chronological order (None at the ends)."""

    model_config = {"frozen": True}

    previous: Document | None = None
    next: Document | None = None


def check_slug(slug: str) -> str:
    """Return `slug` if it is usable as a single URL path segment.

    Raises:
        MalformedFrontmatter: If it is empty, "." or "..", or contains a path separator
    """
    if not slug or slug in (".", "..") or "/" in slug or "\\" in slug:
        raise MalformedFrontmatter(slug, "slug", "invalid")
    return slug


def _coerce_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _coerce_image(value: Any, alt: Any = None) -> FeaturedImage | None:
    if not value:
        return None
    if isinstance(value, FeaturedImage):
        return value
    if isinstance(value, Mapping):
        if not value.get("src"):
            return None
        return FeaturedImage(
            src=str(value["src"]),
            alt=value.get("alt") or (str(alt) if alt else None),
            file=value.get("file"),
        )
    return FeaturedImage(src=str(value), alt=str(alt) if alt else None)
