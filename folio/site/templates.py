"""Page templates: home, about, blog listing and blog post.

Each template is a pure function of its query data and returns a complete
HTML document. Markup coming from the content source (post bodies, about
prose) is trusted: it was produced by the markdown transform and is inserted
as-is, without escaping or sanitising.
"""

from __future__ import annotations

from collections.abc import Iterable
from html import escape

from ..config import SUBSCRIBE_FORM_ID
from ..content.models import Document, NavigationContext, SiteMetadata
from ..content.source import PostPageData, SitePageData
from .layout import h1, html_doc, link, para, render_layout, rule
from .resolver import post_path
from .widgets import subscription_form


def _page(site: SiteMetadata, page_title: str, body: str, year: int | None) -> str:
    shell = render_layout(site.title, body, year=year, resume_href=site.resume)
    return html_doc(page_title, shell)


def _site_name(site: SiteMetadata) -> str:
    return site.author or site.title


def render_home(data: SitePageData, year: int | None = None) -> str:
    site = data.site
    lines = ['<div class="bio">']
    lines.append(f"<p><strong>{escape(_site_name(site))}</strong></p>")
    if site.bio:
        lines.append(para(site.bio))
    lines.append("</div>")
    return _page(site, _site_name(site), "\n".join(lines), year)


def render_about(data: SitePageData, year: int | None = None) -> str:
    site = data.site
    body = "\n".join([h1("About"), site.about_html])
    return _page(site, f"{_site_name(site)} | About", body, year)


def render_listing(
    data: SitePageData,
    documents: Iterable[Document],
    year: int | None = None,
) -> str:
    """Blog index, newest first."""
    site = data.site
    newest_first = sorted(documents, key=lambda d: d.sort_key, reverse=True)
    lines = [h1("Blog"), '<ul class="posts">']
    for d in newest_first:
        lines.append(
            "<li>"
            f"<h3>{link(post_path(d.id), d.title)}</h3>"
            f"{para(d.formatted_date, cls='muted')}"
            f"{para(d.summary) if d.summary else ''}"
            "</li>"
        )
    lines.append("</ul>")
    return _page(site, f"{_site_name(site)} | Blog", "\n".join(lines), year)


def _featured_image(doc: Document) -> str:
    img = doc.featured_image
    if img is None:
        return ""
    return (
        f'<img class="featured-image" src="{escape(img.src, quote=True)}"'
        f' alt="{escape(img.alt or "", quote=True)}">'
    )


def _post_nav(nav: NavigationContext) -> str:
    prev_html = link(post_path(nav.previous.id), f"← {nav.previous.title}", rel="prev") if nav.previous else ""
    next_html = link(post_path(nav.next.id), f"{nav.next.title} →", rel="next") if nav.next else ""
    return "\n".join(
        [
            "<nav>",
            '<ul class="post-nav">',
            f"<li>{prev_html}</li>",
            f"<li>{next_html}</li>",
            "</ul>",
            "</nav>",
        ]
    )


def render_blog_post(
    data: PostPageData,
    year: int | None = None,
    subscribe_form_id: str | None = SUBSCRIBE_FORM_ID,
) -> str:
    doc = data.document
    parts = [
        "<article>",
        "<header>",
        h1(doc.title),
        para(doc.formatted_date, cls="post-date"),
        "</header>",
    ]
    image = _featured_image(doc)
    if image:
        parts.append(image)
    parts.extend(
        [
            f"<section>{doc.body}</section>",
            rule(),
            "</article>",
        ]
    )
    widget = subscription_form(subscribe_form_id)
    if widget:
        parts.append(widget)
    parts.append(_post_nav(data.navigation))
    return _page(data.site, doc.title, "\n".join(parts), year)
