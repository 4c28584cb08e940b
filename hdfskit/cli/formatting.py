"""Human-readable formatting helpers for command output."""

from __future__ import annotations

_UNITS = (
    (1024**4, "T"),
    (1024**3, "G"),
    (1024**2, "M"),
    (1024, "K"),
)


def format_bytes(size: int) -> str:
    """Format a byte count with a binary unit suffix and one decimal place.

    Counts of 1024 or less are printed as a plain number of bytes.
    """
    for threshold, suffix in _UNITS:
        if size > threshold:
            return f"{size / threshold:.1f}{suffix}"
    return f"{size}B"