"""Remote exceptions reported by HDFS and their mapping to OS errors."""

from __future__ import annotations

import errno
import os

FILE_NOT_FOUND_EXCEPTION = "java.io.FileNotFoundException"
PERMISSION_DENIED_EXCEPTION = "org.apache.hadoop.security.AccessControlException"
PATH_IS_NOT_EMPTY_DIR_EXCEPTION = "org.apache.hadoop.fs.PathIsNotEmptyDirectoryException"
FILE_ALREADY_EXISTS_EXCEPTION = "org.apache.hadoop.fs.FileAlreadyExistsException"
ALREADY_BEING_CREATED_EXCEPTION = (
    "org.apache.hadoop.hdfs.protocol.AlreadyBeingCreatedException"
)


class RemoteError(Exception):
    """A Java exception raised by a namenode or datanode."""

    def __init__(self, method: str, desc: str, exception: str, message: str) -> None:
        super().__init__(message or exception)
        self.method = method
        self.desc = desc
        self.exception = exception
        self.message = message


def _os_error(cls: type[OSError], code: int) -> OSError:
    return cls(code, os.strerror(code))


_EXCEPTION_MAP = {
    FILE_NOT_FOUND_EXCEPTION: (FileNotFoundError, errno.ENOENT),
    PERMISSION_DENIED_EXCEPTION: (PermissionError, errno.EACCES),
    PATH_IS_NOT_EMPTY_DIR_EXCEPTION: (OSError, errno.ENOTEMPTY),
    FILE_ALREADY_EXISTS_EXCEPTION: (FileExistsError, errno.EEXIST),
}


def interpret_exception(err: BaseException | None) -> BaseException | None:
    """Translate well-known remote exceptions into the matching OSError.

    Anything else, including None, is returned unchanged.
    """
    if isinstance(err, RemoteError) and err.exception in _EXCEPTION_MAP:
        cls, code = _EXCEPTION_MAP[err.exception]
        return _os_error(cls, code)
    return err


def interpret_create_exception(err: BaseException | None) -> BaseException | None:
    """Like interpret_exception, also treating a file still being created as existing."""
    if isinstance(err, RemoteError) and err.exception == ALREADY_BEING_CREATED_EXCEPTION:
        return _os_error(FileExistsError, errno.EEXIST)
    return interpret_exception(err)