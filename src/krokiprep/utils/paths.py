# src/krokiprep/utils/paths.py
"""
paths – Reference classification and path helpers for krokiprep.

Provides:
  • is_library_reference(str)  – '<stdlib/...>' style references
  • is_remote_url(str)         – absolute, non-file URL check
  • classify_reference(str)    – LIBRARY / REMOTE / LOCAL
  • join_reference(dir, ref)   – normalized local join
  • parent_dir(path)           – base directory for nested includes
"""

from __future__ import annotations

import os
from urllib.parse import urlparse

from krokiprep.core.models import ReferenceKind

# Schemes that are only meaningful with an authority part ('https://host').
_AUTHORITY_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def is_library_reference(ref: str) -> bool:
    """Return True for built-in library references such as '<C4/C4_Context>'."""
    return (ref or "").startswith("<")


def is_remote_url(ref: str) -> bool:
    """Return True if *ref* is an absolute URL whose scheme is not 'file'.

    Bare relative paths and Windows drive paths ('C:\\diagrams\\a.puml')
    are local.
    """
    try:
        parsed = urlparse((ref or "").strip())
    except ValueError:
        return False
    scheme = parsed.scheme.lower()
    if len(scheme) < 2 or scheme == "file":
        return False
    if scheme in _AUTHORITY_SCHEMES and not parsed.netloc:
        return False
    return True


def classify_reference(ref: str) -> ReferenceKind:
    if is_library_reference(ref):
        return ReferenceKind.LIBRARY
    if is_remote_url(ref):
        return ReferenceKind.REMOTE
    return ReferenceKind.LOCAL


def join_reference(base_dir: str, ref: str) -> str:
    """Join *ref* onto *base_dir* and normalize ('./a/../b.puml' → 'b.puml')."""
    return os.path.normpath(os.path.join(base_dir or ".", ref))


def parent_dir(path: str) -> str:
    """Return the directory containing *path*, '.' for bare file names."""
    return os.path.dirname(path) or "."
