"""
Helpers that prepare a finished document for upload to a static-site host.

Public API:
  - repo_slug(title: str, *, max_length: int = 96) -> str
  - add_badge(html: str, badge: str = DEFAULT_BADGE) -> str
  - space_readme(title: str) -> str
  - build_upload(html, title, username, path=None, *, badge=DEFAULT_BADGE) -> UploadPlan

Only the payload is built here; the network calls belong to the caller.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional

__all__ = ["repo_slug", "add_badge", "space_readme", "build_upload", "UploadPlan", "DEFAULT_BADGE"]

MAX_SLUG_LENGTH = 96

DEFAULT_BADGE = (
    '<p style="border-radius: 8px; text-align: center; font-size: 12px; color: #fff; '
    "margin-top: 16px; position: fixed; left: 8px; bottom: 8px; z-index: 10; "
    'background: rgba(0, 0, 0, 0.8); padding: 4px 8px;">Made with diffsmith</p>'
)

_README_TEMPLATE = """---
title: {title}
emoji: 🐳
colorFrom: blue
colorTo: blue
sdk: static
pinned: false
tags:
  - diffsmith
---

Check out the configuration reference at https://huggingface.co/docs/hub/spaces-config-reference
"""


def repo_slug(title: str, *, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Lowercase, dash-separated repository name derived from a page title."""
    parts = re.sub(r"[^a-z0-9]+", "-", title.lower()).split("-")
    return "-".join(p for p in parts if p)[:max_length]


def add_badge(html: str, badge: str = DEFAULT_BADGE) -> str:
    """Insert `badge` right before the first closing body tag; unchanged if there is none."""
    return html.replace("</body>", f"{badge}</body>", 1)


def space_readme(title: str) -> str:
    return _README_TEMPLATE.format(title=title)


@dataclass
class UploadPlan:
    repo_id: str
    files: Dict[str, str] = field(default_factory=dict)
    created: bool = False  # True when the repository has to be created first


def build_upload(
    html: str,
    title: str,
    username: str,
    path: Optional[str] = None,
    *,
    badge: str = DEFAULT_BADGE,
) -> UploadPlan:
    """
    Files to upload for a document.

    A new space (no `path`) is named `<username>/<slug>`, gets the badge and a
    README. Updating an existing `path` uploads the document as-is.
    """
    if not html or not title:
        raise ValueError("html and title are required")

    if path:
        return UploadPlan(repo_id=path, files={"index.html": html}, created=False)

    slug = repo_slug(title)
    if not slug:
        raise ValueError(f"title {title!r} does not contain any usable characters")
    return UploadPlan(
        repo_id=f"{username}/{slug}",
        files={"index.html": add_badge(html, badge), "README.md": space_readme(slug)},
        created=True,
    )
