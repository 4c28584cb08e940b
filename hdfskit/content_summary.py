"""Summary information about a file or directory tree in HDFS."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_FIELD_KEYS = {
    "size": ("length",),
    "size_after_replication": ("spaceConsumed", "space_consumed"),
    "file_count": ("fileCount", "file_count"),
    "directory_count": ("directoryCount", "directory_count"),
    "name_quota": ("quota",),
    "space_quota": ("spaceQuota", "space_quota"),
}


def _as_int64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= (1 << 63) else value


@dataclass(frozen=True)
class ContentSummary:
    """Totals for the tree rooted at ``name``, as reported by the namenode.

    ``size`` is the logical size; ``size_after_replication`` the on-disk
    footprint. ``directory_count`` includes the root directory itself and is
    0 for a file. Quotas are -1 when unset.
    """

    name: str
    size: int = 0
    size_after_replication: int = 0
    file_count: int = 0
    directory_count: int = 0
    name_quota: int = 0
    space_quota: int = 0

    @classmethod
    def from_mapping(cls, name: str, fields: Mapping[str, Any]) -> ContentSummary:
        """Build a summary from the fields of a content summary response.

        Missing fields count as zero. Unsigned wire values are read as signed
        64-bit integers.
        """
        values = {}
        for attr, keys in _FIELD_KEYS.items():
            raw = next((fields[key] for key in keys if key in fields), 0)
            values[attr] = _as_int64(int(raw or 0))
        return cls(name=name, **values)