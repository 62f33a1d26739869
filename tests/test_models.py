"""Tests for content models and record validation."""

from __future__ import annotations

import unittest
from datetime import date, datetime

from folio.content.models import Document, FeaturedImage
from folio.errors import MalformedFrontmatter


class TestDocumentFromRecord(unittest.TestCase):
    def test_valid_record(self) -> None:
        doc = Document.from_record(
            {"id": "p1", "title": " Hello ", "date": "2020-01-01", "body": "<p>x</p>"}
        )
        self.assertEqual(doc.id, "p1")
        self.assertEqual(doc.title, "Hello")
        self.assertEqual(doc.date, date(2020, 1, 1))
        self.assertEqual(doc.body, "<p>x</p>")
        self.assertIsNone(doc.featured_image)

    def test_accepts_slug_and_datetime(self) -> None:
        doc = Document.from_record(
            {"slug": "p2", "title": "T", "date": datetime(2021, 3, 4, 10, 30)}
        )
        self.assertEqual(doc.id, "p2")
        self.assertEqual(doc.date, date(2021, 3, 4))

    def test_missing_title_names_document(self) -> None:
        with self.assertRaises(MalformedFrontmatter) as ctx:
            Document.from_record({"id": "p1", "date": "2020-01-01"})
        self.assertEqual(ctx.exception.document_id, "p1")
        self.assertEqual(ctx.exception.field, "title")
        self.assertIn("p1", str(ctx.exception))

    def test_blank_title_is_missing(self) -> None:
        with self.assertRaises(MalformedFrontmatter):
            Document.from_record({"id": "p1", "title": "   ", "date": "2020-01-01"})

    def test_missing_id(self) -> None:
        with self.assertRaises(MalformedFrontmatter) as ctx:
            Document.from_record({"title": "T", "date": "2020-01-01"})
        self.assertEqual(ctx.exception.field, "id")

    def test_invalid_date(self) -> None:
        with self.assertRaises(MalformedFrontmatter) as ctx:
            Document.from_record({"id": "p1", "title": "T", "date": "yesterday"})
        self.assertEqual(ctx.exception.field, "date")

    def test_malformed_frontmatter_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            Document.from_record({"id": "p1", "title": "T"})

    def test_featured_image_forms(self) -> None:
        doc = Document.from_record(
            {
                "id": "p1",
                "title": "T",
                "date": "2020-01-01",
                "featured_image": "https://img.test/a.png",
                "featured_image_alt": "A",
            }
        )
        self.assertEqual(doc.featured_image, FeaturedImage(src="https://img.test/a.png", alt="A"))

        doc = Document.from_record(
            {"id": "p1", "title": "T", "date": "2020-01-01", "featured_image": {"src": "/x.png"}}
        )
        self.assertEqual(doc.featured_image.src, "/x.png")
        self.assertIsNone(doc.featured_image.alt)

    def test_document_passthrough(self) -> None:
        doc = Document(id="p1", title="T", date=date(2020, 1, 1))
        self.assertIs(Document.from_record(doc), doc)


class TestDocumentProperties(unittest.TestCase):
    def test_formatted_date(self) -> None:
        doc = Document(id="p1", title="T", date=date(2020, 1, 1))
        self.assertEqual(doc.formatted_date, "January 01, 2020")

    def test_summary_prefers_description(self) -> None:
        doc = Document(id="p1", title="T", date=date(2020, 1, 1), excerpt="ex", description="desc")
        self.assertEqual(doc.summary, "desc")
        doc = Document(id="p1", title="T", date=date(2020, 1, 1), excerpt="ex")
        self.assertEqual(doc.summary, "ex")

    def test_rejects_path_like_ids(self) -> None:
        for bad in ("../x", "a/b", ".", "..", "a\\b"):
            with self.subTest(id=bad):
                with self.assertRaises(MalformedFrontmatter) as ctx:
                    Document.from_record({"id": bad, "title": "T", "date": "2020-01-01"})
                self.assertEqual(ctx.exception.field, "slug")

    def test_documents_are_frozen(self) -> None:
        doc = Document(id="p1", title="T", date=date(2020, 1, 1))
        with self.assertRaises(Exception):
            doc.title = "changed"


if __name__ == "__main__":
    unittest.main()
