"""Parsing of permission-changing command arguments."""

from __future__ import annotations

import re

_OCTAL_RE = re.compile(r"[0-7]+")
_MAX_MODE = (1 << 32) - 1


class ArgumentError(ValueError):
    """A command argument could not be parsed."""


def parse_octal_mode(text: str) -> int:
    """Parse an octal permission mode that fits in 32 bits."""
    if not _OCTAL_RE.fullmatch(text):
        raise ArgumentError(f"invalid octal mode: {text}")
    mode = int(text, 8)
    if mode > _MAX_MODE:
        raise ArgumentError(f"invalid octal mode: {text}")
    return mode


def parse_owner(spec: str) -> tuple[str, str]:
    """Split OWNER[:GROUP] into owner and group; the group defaults to the owner."""
    owner, sep, group = spec.partition(":")
    if not sep:
        return owner, owner
    return owner, group