"""Tests for the page resolver."""

from __future__ import annotations

import unittest
from datetime import date

from folio.content.models import Document, SiteMetadata
from folio.errors import DuplicateRoute, MalformedFrontmatter, MissingDocument, MissingMetadata
from folio.site.resolver import (
    Route,
    navigation_for,
    order_documents,
    require_site,
    resolve_documents,
    resolve_routes,
)

SITE = SiteMetadata(title="Example")


def _records() -> list[dict]:
    # Deliberately out of order.
    return [
        {"id": "c", "title": "Third", "date": "2021-06-01"},
        {"id": "a", "title": "First", "date": "2019-01-01"},
        {"id": "b", "title": "Second", "date": "2020-03-15"},
    ]


class TestOrdering(unittest.TestCase):
    def test_chronological_order(self) -> None:
        seq = resolve_documents(_records())
        self.assertEqual([d.id for d in seq], ["a", "b", "c"])

    def test_same_date_tie_broken_by_id(self) -> None:
        docs = [
            Document(id="z", title="Z", date=date(2020, 1, 1)),
            Document(id="m", title="M", date=date(2020, 1, 1)),
        ]
        self.assertEqual([d.id for d in order_documents(docs)], ["m", "z"])
        self.assertEqual(
            [d.id for d in order_documents(reversed(docs))],
            [d.id for d in order_documents(docs)],
        )


class TestNavigation(unittest.TestCase):
    def test_boundaries_and_neighbours(self) -> None:
        seq = resolve_documents(_records())

        first = navigation_for(seq, "a")
        self.assertIsNone(first.previous)
        self.assertEqual(first.next.id, "b")

        middle = navigation_for(seq, "b")
        self.assertEqual(middle.previous.id, "a")
        self.assertEqual(middle.next.id, "c")

        last = navigation_for(seq, "c")
        self.assertEqual(last.previous.id, "b")
        self.assertIsNone(last.next)

    def test_single_document_has_no_neighbours(self) -> None:
        seq = resolve_documents([{"id": "p1", "title": "Hello", "date": "2020-01-01"}])
        nav = navigation_for(seq, "p1")
        self.assertIsNone(nav.previous)
        self.assertIsNone(nav.next)

    def test_unknown_id(self) -> None:
        with self.assertRaises(MissingDocument) as ctx:
            navigation_for(resolve_documents(_records()), "nope")
        self.assertEqual(ctx.exception.document_id, "nope")


class TestResolveRoutes(unittest.TestCase):
    def test_cardinality_and_uniqueness(self) -> None:
        routes = resolve_routes(SITE, _records())
        self.assertEqual(len(routes), 2 + 3)
        paths = [r.path for r in routes]
        self.assertEqual(len(paths), len(set(paths)))
        self.assertEqual(paths[:2], ["/", "/about"])
        self.assertEqual(paths[2:], ["/blog/a", "/blog/b", "/blog/c"])

    def test_no_documents(self) -> None:
        routes = resolve_routes(SITE, [])
        self.assertEqual([r.path for r in routes], ["/", "/about"])

    def test_with_listing(self) -> None:
        routes = resolve_routes(SITE, _records(), with_listing=True)
        self.assertEqual(len(routes), 3 + 3)
        self.assertIn(Route("/blog", "listing"), routes)

    def test_missing_title_produces_no_routes(self) -> None:
        records = _records() + [{"id": "bad", "date": "2020-01-01"}]
        with self.assertRaises(MalformedFrontmatter) as ctx:
            resolve_routes(SITE, records)
        self.assertEqual(ctx.exception.document_id, "bad")

    def test_duplicate_ids(self) -> None:
        records = _records() + [{"id": "a", "title": "Again", "date": "2022-01-01"}]
        with self.assertRaises(DuplicateRoute) as ctx:
            resolve_routes(SITE, records)
        self.assertEqual(ctx.exception.path, "/blog/a")

    def test_missing_site(self) -> None:
        with self.assertRaises(MissingMetadata):
            resolve_routes(None, _records())

    def test_require_site_rejects_blank_title(self) -> None:
        with self.assertRaises(MissingMetadata):
            require_site(SiteMetadata(title="  "))


class TestRouteOutputPath(unittest.TestCase):
    def test_output_paths(self) -> None:
        self.assertEqual(Route("/", "home").output_path, "index.html")
        self.assertEqual(Route("/about", "about").output_path, "about/index.html")
        self.assertEqual(Route("/blog", "listing").output_path, "blog/index.html")
        self.assertEqual(Route("/blog/p1", "post", "p1").output_path, "blog/p1/index.html")


if __name__ == "__main__":
    unittest.main()
