"""folio: a static blog and portfolio site generator."""

__version__ = "0.1.0"
