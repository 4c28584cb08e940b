"""Locating kerberos configuration and credential caches."""

from __future__ import annotations

import os
from collections.abc import Mapping

DEFAULT_KRB5_CONFIG = "/etc/krb5.conf"


class UnusableCCacheError(ValueError):
    """The credential cache named by the environment is not a file cache."""


def krb5_config_path(environ: Mapping[str, str] | None = None) -> str:
    """Return the krb5.conf path from KRB5_CONFIG, or the default location."""
    env = os.environ if environ is None else environ
    return env.get("KRB5_CONFIG", "") or DEFAULT_KRB5_CONFIG


def resolve_ccache_path(
    environ: Mapping[str, str] | None = None, uid: int | str | None = None
) -> str:
    """Return the credential cache path from KRB5CCNAME.

    Only ``FILE:`` caches (or bare paths) are usable; other cache types raise
    UnusableCCacheError. Without KRB5CCNAME the default per-user cache under
    /tmp is used, for ``uid`` or the current user.
    """
    env = os.environ if environ is None else environ
    ccache = env.get("KRB5CCNAME", "")

    if ":" in ccache:
        if ccache.startswith("FILE:"):
            return ccache.split(":", 1)[1]
        raise UnusableCCacheError(f"unusable ccache: {ccache}")

    if not ccache:
        if uid is None:
            uid = os.getuid()
        return f"/tmp/krb5cc_{uid}"

    return ccache