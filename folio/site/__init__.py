"""Page resolution, rendering and static output."""

from .build import build_site, render_route
from .layout import render_layout
from .resolver import Route, navigation_for, order_documents, resolve_routes
from .templates import render_about, render_blog_post, render_home, render_listing

__all__ = [
    "build_site",
    "render_route",
    "render_layout",
    "Route",
    "navigation_for",
    "order_documents",
    "resolve_routes",
    "render_home",
    "render_about",
    "render_listing",
    "render_blog_post",
]
