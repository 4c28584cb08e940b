"""Reading and interpreting Hadoop XML configuration files."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path
from urllib.parse import urlsplit

CONF_FILES = ("core-site.xml", "hdfs-site.xml", "mapred-site.xml")

_RPC_ADDRESS_PREFIX = "dfs.namenode.rpc-address."
_HA_NAMENODES_PREFIX = "dfs.ha.namenodes."


class ConfigParseError(ValueError):
    """A configuration file exists but is not valid XML."""


def _url_host(value: str) -> str | None:
    try:
        netloc = urlsplit(value).netloc
    except ValueError:
        return None
    return netloc.rpartition("@")[2]


class HadoopConf(dict):
    """All key/value pairs found in a set of Hadoop configuration files."""

    def namenodes(self) -> list[str]:
        """Return the sorted, deduplicated namenode addresses in the configuration.

        Addresses come from ``fs.defaultFS`` (or the deprecated
        ``fs.default.name``) and from keys starting with
        ``dfs.namenode.rpc-address.``. Logical cluster names declared through
        ``dfs.ha.namenodes.<cluster>`` are left out.
        """
        found: set[str] = set()
        cluster_names: list[str] = []

        for key, value in self.items():
            if "fs.default" in key:
                host = _url_host(value)
                if host is not None:
                    found.add(host)
            elif key.startswith(_RPC_ADDRESS_PREFIX):
                found.add(value)
            elif key.startswith(_HA_NAMENODES_PREFIX):
                cluster_names.append(key[len(_HA_NAMENODES_PREFIX):])

        found.difference_update(cluster_names)
        return sorted(found)


def _parse_properties(data: bytes, path: str | os.PathLike) -> dict[str, str]:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ConfigParseError(f"{path}: {exc}") from exc

    return {
        prop.findtext("name", ""): prop.findtext("value", "")
        for prop in root.findall("property")
    }


def load(path: str | os.PathLike) -> HadoopConf | None:
    """Load core-site.xml, hdfs-site.xml and mapred-site.xml from a directory.

    Later files override earlier ones. Returns None if none of the files
    exist; raises OSError or ConfigParseError if one cannot be read or parsed.
    """
    directory = Path(path)
    conf: HadoopConf | None = None

    for name in CONF_FILES:
        try:
            data = (directory / name).read_bytes()
        except FileNotFoundError:
            continue

        properties = _parse_properties(data, path)
        if conf is None:
            conf = HadoopConf()
        conf.update(properties)

    return conf


def load_from_environment(environ: Mapping[str, str] | None = None) -> HadoopConf | None:
    """Locate and load the Hadoop configuration named by the environment.

    HADOOP_CONF_DIR is tried first, then $HADOOP_HOME/conf. Returns None if
    no configuration is found.
    """
    env = os.environ if environ is None else environ

    conf_dir = env.get("HADOOP_CONF_DIR", "")
    if conf_dir:
        conf = load(conf_dir)
        if conf is not None:
            return conf

    hadoop_home = env.get("HADOOP_HOME", "")
    if hadoop_home:
        conf = load(os.path.join(hadoop_home, "conf"))
        if conf is not None:
            return conf

    return None