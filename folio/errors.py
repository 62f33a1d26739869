"""Build errors.

Every input defect surfaces as one of these. Nothing in the rendering layer
recovers from them; the CLI turns them into an exit status.
"""

from __future__ import annotations


class BuildError(Exception):
    """Base class for all build-time failures."""


class MissingMetadata(BuildError):
    """Site metadata is absent or malformed. Aborts the entire build."""


class MissingDocument(BuildError, LookupError):
    """A route references a document id the content source does not have."""

    def __init__(self, document_id: str):
        self.document_id = document_id
        super().__init__(f"Document not found: {document_id!r}")


class MalformedFrontmatter(BuildError, ValueError):
    """A document lacks a required frontmatter field or has an invalid one."""

    def __init__(self, document_id: str | None, field: str, reason: str = "missing"):
        self.document_id = document_id
        self.field = field
        self.reason = reason
        doc = document_id if document_id else "<unknown>"
        super().__init__(f"Malformed frontmatter in {doc}: {field} {reason}")


class DuplicateRoute(BuildError):
    """Two documents resolve to the same route path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Duplicate route: {path}")


class BuildFailed(BuildError):
    """One or more routes failed to render.

    ``failures`` is a list of ``(route_path, error)`` pairs in route order.
    """

    def __init__(self, failures: list[tuple[str, BuildError]]):
        self.failures = failures
        summary = "; ".join(f"{path}: {err}" for path, err in failures)
        super().__init__(f"{len(failures)} route(s) failed: {summary}")


class OutputError(BuildError):
    """The rendered site could not be written to the output directory."""
