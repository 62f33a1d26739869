"""Configuration constants and paths for folio."""

import os
from pathlib import Path

# Content directory: site.yaml plus posts/
CONTENT_DIR = Path(os.getenv("FOLIO_CONTENT_DIR", "./content"))

# Generated site output
OUT_DIR = Path(os.getenv("FOLIO_OUT_DIR", "./public"))

# Files copied verbatim to the output root (resume.pdf, favicon, ...)
STATIC_DIR = Path(os.getenv("FOLIO_STATIC_DIR", "./static"))

# Newsletter form rendered under each post; empty disables it
SUBSCRIBE_FORM_ID = os.getenv("FOLIO_SUBSCRIBE_FORM_ID", "1418889")
SUBSCRIBE_SCRIPT_URL = "https://f.convertkit.com/ckjs/ck.5.js"
SUBSCRIBE_ACTION_BASE = "https://app.convertkit.com/forms"

# CV link in the header nav; site.yaml `resume` takes precedence
RESUME_HREF = os.getenv("FOLIO_RESUME_HREF") or None

# Post dates render as "January 01, 2020"
DATE_FORMAT = "%B %d, %Y"

# Plain-text excerpt length (characters)
EXCERPT_LENGTH = 160

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

# Manifest versioning for determinism tracking
GENERATOR_VERSION = "0.1.0"
SCHEMA_VERSION = 1
