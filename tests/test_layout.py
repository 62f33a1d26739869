"""Tests for the site shell."""

from __future__ import annotations

import re
import unittest
from datetime import date

from folio.site.layout import html_doc, link, render_layout


class TestRenderLayout(unittest.TestCase):
    def test_single_root_link_with_site_title(self) -> None:
        html = render_layout("Example", "<p>child</p>", year=2024)
        root_links = re.findall(r'<a href="/"[^>]*>([^<]*)</a>', html)
        self.assertEqual(root_links, ["Example"])

    def test_fixed_navigation(self) -> None:
        html = render_layout("Example", "", year=2024)
        self.assertIn('<a href="/blog">Blog</a>', html)
        self.assertIn('<a href="/about">About</a>', html)
        self.assertNotIn("CV", html)

    def test_resume_link_when_configured(self) -> None:
        html = render_layout("Example", "", year=2024, resume_href="/resume.pdf")
        self.assertIn('<a href="/resume.pdf" download>CV</a>', html)

    def test_children_inside_main_verbatim(self) -> None:
        child = '<section><script>x()</script><b>raw</b></section>'
        html = render_layout("Example", child, year=2024)
        main = html.split("<main>", 1)[1].split("</main>", 1)[0]
        self.assertIn(child, main)

    def test_footer_year(self) -> None:
        self.assertIn("© 2019, Built with", render_layout("t", "", year=2019))
        self.assertIn(f"© {date.today().year},", render_layout("t", ""))

    def test_missing_title_renders_empty(self) -> None:
        html = render_layout(None, "<p>x</p>", year=2024)
        self.assertIn('<a href="/" class="site-title"></a>', html)

    def test_title_is_escaped(self) -> None:
        html = render_layout("A & <B>", "", year=2024)
        self.assertIn("A &amp; &lt;B&gt;", html)


class TestPrimitives(unittest.TestCase):
    def test_link_attrs(self) -> None:
        self.assertEqual(
            link("/blog/a", "← A", rel="prev"),
            '<a href="/blog/a" rel="prev">← A</a>',
        )

    def test_html_doc(self) -> None:
        doc = html_doc("Title <x>", "<div>body</div>")
        self.assertTrue(doc.startswith("<!doctype html>"))
        self.assertIn("<title>Title &lt;x&gt;</title>", doc)
        self.assertIn("<div>body</div>", doc)
        self.assertTrue(doc.endswith("</html>\n"))


if __name__ == "__main__":
    unittest.main()
