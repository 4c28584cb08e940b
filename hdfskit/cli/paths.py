"""Path handling for the command line: URL parsing, cleaning and globs."""

from __future__ import annotations

import re
from collections.abc import Iterable
from urllib.parse import unquote, urlsplit

_GLOB_RE = re.compile(r"([^\\]|^)[[*?]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class MultipleNamenodeUrlsError(ValueError):
    """Paths name more than one namenode host."""

    def __init__(self) -> None:
        super().__init__("Multiple namenode URLs specified")


def has_glob(fragment: str) -> bool:
    """Return True if the fragment holds an unescaped glob character."""
    return _GLOB_RE.search(fragment) is not None


def clean_path(path: str) -> str:
    """Return the shortest equivalent slash-separated path, lexically."""
    if not path:
        return "."

    rooted = path.startswith("/")
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if parts and parts[-1] != "..":
                parts.pop()
            elif not rooted:
                parts.append("..")
            continue
        parts.append(part)

    joined = "/".join(parts)
    if rooted:
        return "/" + joined
    return joined or "."


def join_path(*parts: str) -> str:
    """Join non-empty parts with slashes and clean the result."""
    nonempty = [part for part in parts if part]
    if not nonempty:
        return ""
    return clean_path("/".join(nonempty))


def _parse(raw: str) -> tuple[str, str]:
    if raw.startswith(":"):
        raise ValueError(f"parse {raw!r}: missing protocol scheme")
    if _BAD_ESCAPE_RE.search(raw):
        raise ValueError(f"parse {raw!r}: invalid URL escape")
    parts = urlsplit(raw)
    host = parts.netloc.rpartition("@")[2]
    return host, unquote(parts.path)


def normalize_paths(paths: Iterable[str]) -> tuple[list[str], str]:
    """Split HDFS URLs into cleaned paths and the single namenode they name.

    Returns the cleaned paths and the namenode host (empty if none was
    given). Raises MultipleNamenodeUrlsError if different hosts appear, and
    ValueError for an unparseable URL.
    """
    namenode = ""
    cleaned: list[str] = []

    for raw in paths:
        host, path = _parse(raw)
        if host:
            if namenode and namenode != host:
                raise MultipleNamenodeUrlsError()
            namenode = host
        cleaned.append(clean_path(path))

    return cleaned, namenode


def user_dir(user: str) -> str:
    """Return the HDFS home directory of a user."""
    return join_path("/user", user)


def absolute_path(path: str, user: str) -> str:
    """Resolve a relative path against the user's home directory."""
    if path.startswith("/"):
        return path
    return join_path(user_dir(user), path)