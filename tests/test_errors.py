import errno

import pytest

from hdfskit.errors import (
    ALREADY_BEING_CREATED_EXCEPTION,
    FILE_ALREADY_EXISTS_EXCEPTION,
    FILE_NOT_FOUND_EXCEPTION,
    PATH_IS_NOT_EMPTY_DIR_EXCEPTION,
    PERMISSION_DENIED_EXCEPTION,
    RemoteError,
    interpret_create_exception,
    interpret_exception,
)


def _remote(exception):
    return RemoteError("getFileInfo", "ERROR_APPLICATION", exception, "trace")


@pytest.mark.parametrize(
    "exception, cls, code",
    [
        (FILE_NOT_FOUND_EXCEPTION, FileNotFoundError, errno.ENOENT),
        (PERMISSION_DENIED_EXCEPTION, PermissionError, errno.EACCES),
        (PATH_IS_NOT_EMPTY_DIR_EXCEPTION, OSError, errno.ENOTEMPTY),
        (FILE_ALREADY_EXISTS_EXCEPTION, FileExistsError, errno.EEXIST),
    ],
)
def test_known_exceptions_map_to_os_errors(exception, cls, code):
    result = interpret_exception(_remote(exception))
    assert isinstance(result, cls)
    assert result.errno == code


def test_unknown_remote_exception_is_unchanged():
    err = _remote("java.lang.NullPointerException")
    assert interpret_exception(err) is err


def test_non_remote_error_is_unchanged():
    err = ValueError("boom")
    assert interpret_exception(err) is err


def test_none_passes_through():
    assert interpret_exception(None) is None
    assert interpret_create_exception(None) is None


def test_already_being_created_only_in_create():
    err = _remote(ALREADY_BEING_CREATED_EXCEPTION)
    assert interpret_exception(err) is err
    result = interpret_create_exception(err)
    assert isinstance(result, FileExistsError)
    assert result.errno == errno.EEXIST


def test_create_falls_back_to_general_mapping():
    result = interpret_create_exception(_remote(FILE_NOT_FOUND_EXCEPTION))
    assert result.errno == errno.ENOENT


def test_remote_error_attributes():
    err = RemoteError("create", "ERROR_APPLICATION", FILE_NOT_FOUND_EXCEPTION, "")
    assert err.method == "create"
    assert err.desc == "ERROR_APPLICATION"
    assert str(err) == FILE_NOT_FOUND_EXCEPTION