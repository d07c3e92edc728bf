# Path helpers for storage-relative paths and URL base matching.
# Created: 2026-10-19
#
# Storage paths are "/"-delimited, never start or end with "/", and the root
# is the empty string.

from __future__ import annotations

from urllib.parse import unquote, urlsplit


def normalize_path(path: str | None) -> str:
    """Canonicalize a storage path: drop edge and duplicate slashes."""
    if not path:
        return ""
    return "/".join(part for part in path.split("/") if part)


def parent_path(path: str) -> str:
    """Return *path* with its last segment removed.

    The parent of a single-segment path is the root (``""``). The root has no
    parent and raises ``ValueError``.
    """
    if not path:
        raise ValueError("The root path has no parent")
    return "/".join(path.split("/")[:-1])


def join_path(base: str, name: str) -> str:
    """Join a storage path and a child name."""
    return normalize_path(f"{base}/{name}")


def basename(path: str) -> str:
    """Last segment of *path* (``""`` for the root)."""
    return path.rstrip("/").split("/")[-1]


def url_path(url: str) -> str:
    """Path component of *url*, percent-decoded, without query or fragment."""
    return unquote(urlsplit(url).path) or "/"


def relative_to_base(url: str, base: str) -> str | None:
    """Path remaining after *base* in *url*, or ``None`` if outside *base*.

    ``/download/abc/docs/sub`` under ``/download/abc`` gives ``docs/sub``;
    ``/download/abc`` itself gives ``""``. ``/download/abcdef`` is not under
    ``/download/abc``.
    """
    path = url_path(url)
    base = base.rstrip("/")
    if path == base:
        return ""
    if not path.startswith(base + "/"):
        return None
    rest = path[len(base):]
    if rest.startswith("/"):
        rest = rest[1:]
    return normalize_path(rest)
