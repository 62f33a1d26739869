"""Site shell and HTML primitives."""

from __future__ import annotations

from datetime import date
from html import escape

from .styles import CSS

NAV_ITEMS: tuple[tuple[str, str], ...] = (
    ("/blog", "Blog"),
    ("/about", "About"),
)


def html_doc(title: str, body: str) -> str:
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{CSS}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{body}\n"
        "</body>\n"
        "</html>\n"
    )


def link(href: str, text: str, rel: str | None = None, cls: str | None = None) -> str:
    attrs = f'href="{escape(href, quote=True)}"'
    if rel:
        attrs += f' rel="{escape(rel, quote=True)}"'
    if cls:
        attrs += f' class="{escape(cls, quote=True)}"'
    return f"<a {attrs}>{escape(text)}</a>"


def h1(text: str) -> str:
    return f"<h1>{escape(text)}</h1>"


def para(text: str, cls: str | None = None) -> str:
    if cls:
        return f'<p class="{escape(cls, quote=True)}">{escape(text)}</p>'
    return f"<p>{escape(text)}</p>"


def rule() -> str:
    return "<hr>"


def render_layout(
    title: str | None,
    children: str,
    year: int | None = None,
    resume_href: str | None = None,
) -> str:
    """Wrap page content in the header/main/footer shell.

    `children` is already-rendered markup and goes in unchanged.
    """
    if year is None:
        year = date.today().year

    nav = [link(href, text) for href, text in NAV_ITEMS]
    if resume_href:
        nav.append(f'<a href="{escape(resume_href, quote=True)}" download>CV</a>')

    return "\n".join(
        [
            '<div class="layout">',
            "<header>",
            link("/", title or "", cls="site-title"),
            f"<nav>{' '.join(nav)}</nav>",
            "</header>",
            "<main>",
            children,
            "</main>",
            f"<footer>© {year}, Built with ❤️ at 🌍</footer>",
            "</div>",
        ]
    )
