"""Route manifest written alongside the generated site."""

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel

from ..config import GENERATOR_VERSION, SCHEMA_VERSION


class RouteInfo(BaseModel):
    """One generated page."""

    path: str
    kind: str
    file: str
    sha256: str


class Manifest(BaseModel):
    """All routes of a build, in route order."""

    schema_version: int = SCHEMA_VERSION
    generator_version: str = GENERATOR_VERSION
    site_title: str
    routes: list[RouteInfo]


def compute_sha256(content: bytes | str) -> str:
    """Compute SHA256 hash of content.

    Args:
        content: Bytes or string to hash

    Returns:
        Hex-encoded SHA256 hash
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    return hashlib.sha256(content).hexdigest()


def create_manifest(site_title: str, pages: list[tuple[str, str, str, str]]) -> Manifest:
    """Build a manifest from rendered pages.

    Args:
        site_title: Site title from metadata
        pages: (route path, route kind, output file, html) tuples

    Returns:
        Populated Manifest object
    """
    return Manifest(
        site_title=site_title,
        routes=[
            RouteInfo(path=path, kind=kind, file=file, sha256=compute_sha256(html))
            for path, kind, file, html in pages
        ],
    )


def write_manifest(manifest: Manifest, output_dir: Path) -> Path:
    """Write manifest to JSON file.

    Args:
        manifest: Manifest object
        output_dir: Directory to write to

    Returns:
        Path to written manifest file
    """
    manifest_path = output_dir / "manifest.json"
    payload = manifest.model_dump(mode="json")
    manifest_path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return manifest_path
