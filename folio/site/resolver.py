"""Page resolver: binds content to routes and computes post navigation."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from ..content.models import Document, NavigationContext, SiteMetadata
from ..errors import DuplicateRoute, MissingDocument, MissingMetadata

logger = logging.getLogger(__name__)

HOME = "home"
ABOUT = "about"
LISTING = "listing"
POST = "post"


@dataclass(frozen=True)
class Route:
    path: str
    kind: str
    document_id: str | None = None

    @property
    def output_path(self) -> str:
        """File path relative to the output directory."""
        if self.path == "/":
            return "index.html"
        return f"{self.path.strip('/')}/index.html"


def post_path(document_id: str) -> str:
    return f"/blog/{document_id}"


def require_site(site: SiteMetadata | None) -> SiteMetadata:
    if site is None:
        raise MissingMetadata("Site metadata is absent")
    if not site.title.strip():
        raise MissingMetadata("Site metadata has no title")
    return site


def order_documents(documents: Iterable[Document]) -> list[Document]:
    """Chronological order, oldest first; ties broken by id."""
    return sorted(documents, key=lambda d: d.sort_key)


def navigation_for(sequence: Sequence[Document], document_id: str) -> NavigationContext:
    """Adjacent documents of `document_id` within an ordered sequence.

    Raises:
        MissingDocument: If the id is not in the sequence
    """
    for i, doc in enumerate(sequence):
        if doc.id == document_id:
            return NavigationContext(
                previous=sequence[i - 1] if i > 0 else None,
                next=sequence[i + 1] if i + 1 < len(sequence) else None,
            )
    raise MissingDocument(document_id)


def resolve_documents(records: Iterable[Mapping[str, Any] | Document]) -> list[Document]:
    """Validate raw records and return them in chronological order.

    Raises:
        MalformedFrontmatter: On the first record missing a required field
        DuplicateRoute: If two records share an id
    """
    seen: set[str] = set()
    docs: list[Document] = []
    for record in records:
        doc = Document.from_record(record)
        if doc.id in seen:
            raise DuplicateRoute(post_path(doc.id))
        seen.add(doc.id)
        docs.append(doc)
    return order_documents(docs)


def resolve_routes(
    site: SiteMetadata | None,
    records: Iterable[Mapping[str, Any] | Document],
    with_listing: bool = False,
) -> list[Route]:
    """Produce the full route set: home, about, optional listing, one per post."""
    require_site(site)
    return routes_for(resolve_documents(records), with_listing=with_listing)


def routes_for(sequence: Sequence[Document], with_listing: bool = False) -> list[Route]:
    routes = [Route("/", HOME), Route("/about", ABOUT)]
    if with_listing:
        routes.append(Route("/blog", LISTING))
    routes.extend(Route(post_path(d.id), POST, d.id) for d in sequence)

    logger.debug("Resolved %d route(s) for %d document(s)", len(routes), len(sequence))
    return routes
