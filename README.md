# hdfskit

Building blocks for working with an HDFS cluster from Python: reading Hadoop's
XML configuration, deriving client options from it, turning namenode
exceptions into Python exceptions, summarising content-summary responses, and
the helpers behind an `ls`/`cat`/`head`/`tail`/`chmod`/`chown` style
command-line tool.

## Installing

```
pip install .
```

To run the tests:

```
pip install '.[test]'
pytest
```

## Hadoop configuration

`hdfskit.hadoopconf` reads `core-site.xml`, `hdfs-site.xml` and
`mapred-site.xml` from a directory and merges their properties into a
`HadoopConf` mapping (a `dict`); later files override earlier ones.

```python
import os
from hdfskit.hadoopconf import load, load_from_environment

conf = load("/etc/hadoop/conf")          # None if none of the files are present
conf = load_from_environment(os.environ)  # HADOOP_CONF_DIR, then HADOOP_HOME/conf
if conf is not None:
    print(conf.namenodes())               # sorted, de-duplicated host:port list
```

`namenodes()` reads `fs.defaultFS` (or the older `fs.default.name`) and every
`dfs.namenode.rpc-address.*` key, and leaves out logical cluster names declared
with `dfs.ha.namenodes.<cluster>`. A file that is present but is not valid XML
raises `ConfigParseError`; other read failures raise `OSError`.

## Client options

```python
from hdfskit.options import client_options_from_conf

options = client_options_from_conf(conf)
options.user = "hdfs"
options.validate()
```

`client_options_from_conf` fills in `addresses`, `use_datanode_hostname`
(from `dfs.client.use.datanode.hostname`), `kerberos_service_principal_name`
(from `dfs.namenode.kerberos.principal`, with everything after `@` removed)
and `data_transfer_protection`: the strongest `DataTransferProtection` level
listed in `dfs.data.transfer.protection`, or `PRIVACY` when
`dfs.encrypt.data.transfer` is `true`.

When `hadoop.security.authentication` is `kerberos`, `kerberos_client` is set
to a placeholder without credentials. Replace it with a client that has a
`credentials` attribute, or set it to `None`; otherwise `validate()` raises
`OptionsError`. It also raises `OptionsError` if a Kerberos client is set but
no service principal name is.

## Errors from the namenode

`hdfskit.errors.RemoteError` carries the RPC `method`, the error `desc`, the
Java `exception` class name and the full `message`. `interpret_exception`
maps the well-known exceptions onto Python ones: `FileNotFoundError`,
`PermissionError`, `FileExistsError`, and an `OSError` with
`errno.ENOTEMPTY` for a non-empty directory. Anything else, including `None`,
is returned unchanged. `interpret_create_exception` additionally treats a file
that is already being created as existing (`FileExistsError`).

## Content summaries

```python
from hdfskit.content_summary import ContentSummary

summary = ContentSummary.from_mapping("/data", {"length": 4, "fileCount": 1})
summary.size, summary.file_count, summary.directory_count
```

`ContentSummary` is a frozen dataclass with `size`, `size_after_replication`,
`file_count`, `directory_count`, `name_quota` and `space_quota`.
`from_mapping` accepts both camelCase and snake_case field names, counts
missing fields as zero, and reads values as signed 64-bit integers.

## Command-line helpers

The `hdfskit.cli` package holds the pieces a command-line client is built from:

- `formatting.format_bytes` renders sizes as `512B`, `1.5K`, `2.0G` and so on;
  1024 bytes or fewer are shown as plain bytes.
- `paths.normalize_paths` splits `hdfs://host:port/path` URLs into cleaned
  paths and a single namenode host, raising `MultipleNamenodeUrlsError` if
  hosts differ and `ValueError` for an unparseable URL. `has_glob` detects
  unescaped `*`, `?` or `[`; `clean_path` and `join_path` work lexically on
  slash-separated paths; `user_dir` and `absolute_path` resolve paths against
  `/user/<name>`.
- `complete.complete(args, complete_path, out)` writes shell completions for
  the known sub-commands. You supply `complete_path`, a callable returning
  remote path candidates for a fragment (or `None`). `is_known_command`,
  `count_position` and `complete_arg` are available on their own.
- `kerberos.krb5_config_path` returns `KRB5_CONFIG` or `/etc/krb5.conf`;
  `kerberos.resolve_ccache_path` resolves `KRB5CCNAME`, falling back to
  `/tmp/krb5cc_<uid>`, and raises `UnusableCCacheError` for a non-`FILE:`
  cache.
- `sections` implements `head` and `tail` by lines or bytes over any seekable
  binary file (`head_lines`, `tail_lines`, `copy_bytes`, `print_section`),
  writing to a binary stream or standard output. Asking for both lines and
  bytes raises `SectionError`; with neither, 10 lines are written.
- `args.parse_octal_mode` and `args.parse_owner` parse `chmod` modes and
  `chown` `OWNER[:GROUP]` specifications; a bad mode raises `ArgumentError`.

## What this package does not do

hdfskit does not speak the HDFS wire protocol. It has no namenode or datanode
connection, cannot open, read, write, list, rename or delete files on a
cluster, does not fetch content summaries itself, and does not authenticate
with Kerberos. It ships no command-line program; the `hdfskit.cli` modules
are helpers for building one.