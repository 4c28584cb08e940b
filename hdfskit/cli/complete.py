"""Shell completion for the command line tool."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

KNOWN_COMMANDS = (
    "ls",
    "rm",
    "mv",
    "mkdir",
    "touch",
    "chmod",
    "chown",
    "cat",
    "head",
    "tail",
    "du",
    "checksum",
    "get",
    "getmerge",
    "put",
    "df",
)

# The shell side of completion knows this marker means "complete local files".
FILE_MARKER = "_FILE_"

PathCompleter = Callable[[str], "Iterable[str] | None"]


def is_known_command(command: str) -> bool:
    """Return True if the command is one the tool accepts."""
    return command in KNOWN_COMMANDS


def count_position(words: Sequence[str]) -> int:
    """Return the argument position of the last word, ignoring flags."""
    return sum(1 for word in words if not word.startswith("-")) - 1


def _print_commands(out: TextIO) -> None:
    print(" ".join(KNOWN_COMMANDS), file=out)


def complete_arg(
    command: str,
    fragment: str,
    position: int,
    complete_path: PathCompleter,
    out: TextIO | None = None,
) -> None:
    """Write completions for one argument of a known command.

    ``complete_path`` returns remote path candidates for a fragment, or None
    if none can be determined, in which case nothing is written.
    """
    out = sys.stdout if out is None else out

    if (command == "put" and position == 1) or (
        command in ("get", "getmerge") and position == 2
    ):
        print(FILE_MARKER, file=out)
    elif command in ("chmod", "chown") and position == 1:
        return
    elif not fragment.startswith("-"):
        candidates = complete_path(fragment)
        if candidates is None:
            return
        out.write("".join(" " + candidate for candidate in candidates))
        out.write("\n")


def complete(
    args: Sequence[str],
    complete_path: PathCompleter,
    out: TextIO | None = None,
) -> None:
    """Answer a completion request.

    ``args`` are the tool's arguments starting at the command name; the
    second one, if present, is the whole command line being completed.
    """
    out = sys.stdout if out is None else out

    if len(args) != 2:
        _print_commands(out)
        return

    words = args[1].split(" ")[1:]
    if len(words) <= 1:
        _print_commands(out)
    elif is_known_command(words[0]):
        complete_arg(words[0], words[-1], count_position(words), complete_path, out)