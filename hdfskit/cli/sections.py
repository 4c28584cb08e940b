"""Printing parts of a file: whole contents, heads and tails."""

from __future__ import annotations

import sys
from typing import BinaryIO

TAIL_SEARCH_SIZE = 16384
DEFAULT_LINES = 10
_CHUNK_SIZE = 64 * 1024


class SectionError(ValueError):
    """The requested section is specified inconsistently."""


def _stdout() -> BinaryIO:
    return sys.stdout.buffer


def _copy(file: BinaryIO, out: BinaryIO, limit: int | None = None) -> None:
    remaining = limit
    while remaining is None or remaining > 0:
        size = _CHUNK_SIZE if remaining is None else min(_CHUNK_SIZE, remaining)
        chunk = file.read(size)
        if not chunk:
            return
        out.write(chunk)
        if remaining is not None:
            remaining -= len(chunk)


def _read_up_to(file: BinaryIO, size: int) -> bytes:
    parts = []
    remaining = size
    while remaining > 0:
        chunk = file.read(remaining)
        if not chunk:
            break
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def head_lines(file: BinaryIO, num_lines: int, out: BinaryIO | None = None) -> None:
    """Write the first ``num_lines`` lines of the file, or all of it if shorter."""
    out = _stdout() if out is None else out

    file.seek(0)
    end: int | None = 0
    remaining = num_lines
    while remaining > 0:
        chunk = file.read(_CHUNK_SIZE)
        if not chunk:
            end = None
            break
        pos = 0
        while remaining > 0:
            index = chunk.find(b"\n", pos)
            if index < 0:
                break
            remaining -= 1
            pos = index + 1
        if remaining == 0:
            end += pos
            break
        end += len(chunk)

    file.seek(0)
    _copy(file, out, end)


def tail_lines(
    file: BinaryIO, size: int, num_lines: int, out: BinaryIO | None = None
) -> None:
    """Write the last ``num_lines`` lines of a file of ``size`` bytes.

    A newline ending the file does not start a new line. The file is scanned
    backwards in windows of TAIL_SEARCH_SIZE bytes.
    """
    out = _stdout() if out is None else out
    if num_lines <= 0:
        return

    search_point = max(size - TAIL_SEARCH_SIZE, 0)
    read_size = min(TAIL_SEARCH_SIZE, size)
    print_offset = 0

    while search_point >= 0:
        file.seek(search_point)
        section = _read_up_to(file, read_size)

        newlines = []
        index = section.find(b"\n")
        while index >= 0:
            offset = search_point + index
            if offset + 1 != size:
                newlines.append(offset)
            index = section.find(b"\n", index + 1)

        if len(newlines) >= num_lines:
            print_offset = newlines[len(newlines) - num_lines] + 1
            break

        num_lines -= len(newlines)
        search_point -= TAIL_SEARCH_SIZE

    file.seek(print_offset)
    _copy(file, out)


def copy_bytes(
    file: BinaryIO,
    size: int,
    num_bytes: int,
    from_end: bool,
    out: BinaryIO | None = None,
) -> None:
    """Write ``num_bytes`` bytes from the start, or ending at the end, of the file.

    When counting from the end of a file shorter than ``num_bytes``, the
    start lies before the file and nothing is written.
    """
    out = _stdout() if out is None else out
    offset = size - num_bytes if from_end else 0
    if offset < 0 or num_bytes <= 0:
        return
    file.seek(offset)
    _copy(file, out, num_bytes)


def print_section(
    file: BinaryIO,
    size: int,
    num_lines: int | None = None,
    num_bytes: int | None = None,
    from_end: bool = False,
    out: BinaryIO | None = None,
) -> None:
    """Write the head or tail of a file, by lines or by bytes.

    At most one of ``num_lines`` and ``num_bytes`` may be given; with
    neither, DEFAULT_LINES lines are written.
    """
    if num_lines is not None and num_bytes is not None:
        raise SectionError("You can't specify both -n and -c.")
    if num_lines is None and num_bytes is None:
        num_lines = DEFAULT_LINES

    if num_lines is not None:
        if from_end:
            tail_lines(file, size, num_lines, out)
        else:
            head_lines(file, num_lines, out)
    else:
        copy_bytes(file, size, num_bytes, from_end, out)