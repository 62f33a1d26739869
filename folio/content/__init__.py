"""Content models and sources."""

from .models import Document, FeaturedImage, NavigationContext, SiteMetadata
from .source import (
    ContentSource,
    DirectorySource,
    MemorySource,
    PostPageData,
    SitePageData,
    query_post,
    query_site,
)

__all__ = [
    "ContentSource",
    "DirectorySource",
    "MemorySource",
    "Document",
    "FeaturedImage",
    "NavigationContext",
    "SiteMetadata",
    "PostPageData",
    "SitePageData",
    "query_post",
    "query_site",
]
