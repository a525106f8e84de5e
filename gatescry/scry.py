"""Print ownership, permission, size and time information for files and directories."""

from __future__ import annotations

import os
import stat
import sys
import time
from typing import Any

try:
    import grp
    import pwd
except ImportError:  # platforms without a user database
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]

SEPARATOR = "-" * 34

_PERMISSION_GROUPS = (
    ((stat.S_IRUSR, "r"), (stat.S_IWUSR, "w"), (stat.S_IXUSR, "x")),
    ((stat.S_IRGRP, "r"), (stat.S_IWGRP, "w"), (stat.S_IXGRP, "x")),
    ((stat.S_IROTH, "r"), (stat.S_IWOTH, "w"), (stat.S_IXOTH, "x")),
)


class ScryError(Exception):
    """Raised when a directory cannot be read."""


def _pad(depth: int) -> str:
    return " ".rjust(depth * 2)


def usage() -> str:
    """Return the short usage message."""
    return (
        "Scry::\n"
        " File information system\n"
        " View information on a given file or set of files within a directory\n"
        " usage: $ scry -[flags] [filepath]\n\n"
    )


def help_text() -> str:
    """Return the full help message."""
    return (
        "SCRY::\n"
        "\tPrints file information to the console. "
        "Describes information for files and directories.\n"
        "\tVisualize file tree information in an easy manner.\n"
        " Flags::\n"
        "\t-h : prints help information for scry\n"
        "\t-s : prints file information in short format\n"
        "\t-t : visualizes a directory in a tree format. Default depth is 2\n"
        "\n\n"
    )


def permissions(mode: int) -> str:
    """Render permission bits as ``rwx rwx rwx`` groups."""
    return " ".join(
        "".join(char if mode & bit else "-" for bit, char in group)
        for group in _PERMISSION_GROUPS
    )


def _user_name(uid: int) -> str | None:
    if pwd is None:
        return None
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return None


def _group_name(gid: int) -> str | None:
    if grp is None:
        return None
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return None


def owner_group(stats: Any) -> str:
    """Return the owner and group names of a stat result."""
    owner = _user_name(stats.st_uid)
    group = _group_name(stats.st_gid)
    owner_part = f"{owner}  " if owner else "NO OWNR  "
    return owner_part + (group if group else "NO GRP")


def file_size(stats: Any) -> str:
    """Return the size field, in bytes."""
    return f"  {stats.st_size}b"


def _stamp(moment: float) -> str:
    tm = time.gmtime(moment)
    # The month is shown zero-based, as the tool has always shown it.
    return (
        f"{tm.tm_mday}-{tm.tm_mon - 1}-{tm.tm_year}  "
        f"{tm.tm_hour}:{tm.tm_min}:{tm.tm_sec}"
    )


def datetime_info(atime: float, mtime: float, depth: int = 1) -> str:
    """Return access and modification time lines in UTC."""
    pad = _pad(depth)
    return f"{pad}ACC: {_stamp(atime)}\n{pad}MOD: {_stamp(mtime)}\n"


def file_props(name: str, stats: Any, depth: int = 1) -> str:
    """Return the long description of a file."""
    pad = _pad(depth)
    return (
        f"{pad}{name}:: {owner_group(stats)}\n"
        f"{pad}{permissions(stats.st_mode)}{file_size(stats)}\n"
        + datetime_info(stats.st_atime, stats.st_mtime, depth)
    )


def file_props_short(name: str, stats: Any, depth: int = 1) -> str:
    """Return the one-line description of a file."""
    return (
        f"{_pad(depth)}{name}:: {owner_group(stats)}  "
        f"{permissions(stats.st_mode)}{file_size(stats)}\n"
    )


def handle_file(path: str, stats: Any, short: bool = False) -> str:
    """Describe a regular file, in long or short form."""
    return file_props_short(path, stats) if short else file_props(path, stats)


def _names(path: str) -> list[str]:
    try:
        return sorted(os.listdir(path))
    except OSError as exc:
        raise ScryError(f"unable to open directory {path}") from exc


def _stat_error(name: str) -> str:
    return f"Error: unable to obtain file properties\n\tEnsure file {name} exists\n"


def dir_tree(path: str, branch: int, depth: int = 1) -> str:
    """Return the entries of a directory as a tree, ``branch`` levels deep."""
    pad = _pad(depth)
    parts: list[str] = []
    for name in _names(path):
        full = os.path.join(path, name)
        try:
            stats = os.stat(full)
        except OSError:
            parts.append(_stat_error(name))
            continue
        if stat.S_ISDIR(stats.st_mode):
            if branch > 1:
                parts.append(f"{pad}{name}::\n")
                parts.append(dir_tree(full, branch - 1, depth + 1))
            else:
                parts.append(f"{pad}{name}\n")
        elif stat.S_ISREG(stats.st_mode):
            parts.append(f"{pad}{name}\n")
        else:
            parts.append(f"Unsupported file type: {name}\n")
    return "".join(parts)


def handle_dir(path: str, tree: bool = False) -> str:
    """Describe every entry of a directory, or draw it as a tree."""
    names = _names(path)
    if tree:
        return dir_tree(path, 2, 1)
    parts: list[str] = []
    for name in names:
        try:
            stats = os.stat(os.path.join(path, name))
        except OSError:
            parts.append(_stat_error(name))
            continue
        parts.append(f"{SEPARATOR}\n{file_props_short(name, stats, 1)}")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Run the scry command line tool."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(usage(), end="")
        return 1

    short = tree = False
    for arg in args:
        if not arg.startswith("-"):
            continue
        for flag in arg[1:]:
            if flag == "h":
                print(help_text(), end="")
                return 0
            if flag == "s":
                short = True
            elif flag == "t":
                tree = True
            else:
                print(f"Unknown flag: {flag}")

    target = args[-1]
    if target.startswith("-"):
        print(usage(), end="")
        return 1

    try:
        stats = os.stat(target)
    except OSError:
        print(f"Error: unable to obtain file properties\n  Ensure {target} exists\n")
        return 1

    if stat.S_ISDIR(stats.st_mode):
        try:
            print(handle_dir(target, tree), end="")
        except ScryError as exc:
            print(f"Error: {exc}\n\tMake sure path to directory exists\n")
            return 1
    elif stat.S_ISREG(stats.st_mode):
        print(handle_file(target, stats, short), end="")
    else:
        print(f"Unsupported file type: {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())