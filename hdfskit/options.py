"""Client options and their derivation from a Hadoop configuration."""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from hdfskit.hadoopconf import HadoopConf


class DataTransferProtection(str, enum.Enum):
    """Protection level for datanode traffic, ordered from weakest to strongest."""

    AUTHENTICATION = "authentication"
    INTEGRITY = "integrity"
    PRIVACY = "privacy"


class OptionsError(ValueError):
    """Client options are inconsistent."""


@dataclass
class _UncredentialedKerberosClient:
    """Placeholder signalling that kerberos is required but not yet configured."""

    credentials: Any = None


@dataclass
class ClientOptions:
    """Configurable options for connecting to an HDFS cluster."""

    addresses: list[str] = field(default_factory=list)
    user: str = ""
    use_datanode_hostname: bool = False
    namenode_dial_func: Callable[..., Any] | None = None
    datanode_dial_func: Callable[..., Any] | None = None
    kerberos_client: Any = None
    kerberos_service_principal_name: str = ""
    data_transfer_protection: DataTransferProtection | None = None

    def validate(self) -> None:
        """Raise OptionsError if kerberos is enabled but incompletely configured."""
        if self.kerberos_client is None:
            return
        if getattr(self.kerberos_client, "credentials", None) is None:
            raise OptionsError("kerberos enabled, but kerberos client is missing credentials")
        if not self.kerberos_service_principal_name:
            raise OptionsError("kerberos enabled, but kerberos namenode SPN is not provided")


def client_options_from_conf(conf: Mapping[str, str] | None) -> ClientOptions:
    """Build ClientOptions from a Hadoop configuration.

    If the configuration demands kerberos, ``kerberos_client`` is set to a
    placeholder without credentials that must be replaced (or cleared) before
    the options validate.
    """
    conf = HadoopConf(conf or {})
    options = ClientOptions(addresses=conf.namenodes())

    options.use_datanode_hostname = conf.get("dfs.client.use.datanode.hostname") == "true"

    if conf.get("hadoop.security.authentication", "").lower() == "kerberos":
        options.kerberos_client = _UncredentialedKerberosClient()

    principal = conf.get("dfs.namenode.kerberos.principal", "")
    if principal:
        options.kerberos_service_principal_name = principal.split("@")[0]

    # The levels sort alphabetically from weakest to strongest, so the last
    # recognised one is the highest requested.
    levels = sorted(conf.get("dfs.data.transfer.protection", "").lower().split(","))
    for level in levels:
        try:
            options.data_transfer_protection = DataTransferProtection(level)
        except ValueError:
            continue

    if conf.get("dfs.encrypt.data.transfer", "").lower() == "true":
        options.data_transfer_protection = DataTransferProtection.PRIVACY

    return options