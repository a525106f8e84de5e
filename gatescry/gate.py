"""Gate points: tagged directory bookmarks kept in a gate file."""

from __future__ import annotations

import os
import random
import sys
from dataclasses import dataclass
from pathlib import Path

GATE_FILE = ".gatefile"
SCRATCH_FILE = ".new_gates"
TAG_LENGTH = 3


class GateError(Exception):
    """Raised when the gate file cannot be read or written."""


@dataclass(frozen=True)
class Gate:
    """A single gate: a short tag bound to a filesystem path."""

    tag: str
    path: str

    @classmethod
    def from_line(cls, line: str) -> Gate:
        """Parse a ``tag,path`` line from the gate file."""
        return cls(line[:TAG_LENGTH], line[TAG_LENGTH + 1 :].rstrip("\n"))

    def to_line(self) -> str:
        """Render the gate as a gate file line."""
        return f"{self.tag},{self.path}\n"


def generate_letter(rng: random.Random) -> str:
    """Return a random lower-case ASCII letter."""
    return chr(ord("a") + rng.randrange(26))


def generate_tag(rng: random.Random) -> str:
    """Return a random three-letter tag."""
    return "".join(generate_letter(rng) for _ in range(TAG_LENGTH))


class GateFile:
    """The file that stores registered gates, one ``tag,path`` per line."""

    def __init__(self, path: str | os.PathLike[str] = GATE_FILE) -> None:
        self.path = Path(path)

    def list_lines(self) -> list[str]:
        """Return the raw lines of the gate file."""
        try:
            with self.path.open(encoding="utf-8") as handle:
                return handle.readlines()
        except OSError as exc:
            raise GateError("no gatefile exists") from exc

    def gates(self) -> list[Gate]:
        """Return every gate in the file, in file order."""
        return [Gate.from_line(line) for line in self.list_lines()]

    def has_tag(self, tag: str) -> bool:
        """Tell whether a gate with this tag is already registered."""
        try:
            lines = self.list_lines()
        except GateError as exc:
            raise GateError("unable to open gatefile to read") from exc
        return any(line[:TAG_LENGTH] == tag for line in lines)

    def create(self, target: str | os.PathLike[str], rng: random.Random | None = None) -> Gate:
        """Register a new gate for ``target`` under a fresh random tag."""
        if rng is None:
            rng = random.Random()
        try:
            self.path.touch(exist_ok=True)
        except OSError as exc:
            raise GateError("unable to create and open the gatefile") from exc

        tag = generate_tag(rng)
        while self.has_tag(tag):
            tag = generate_tag(rng)

        gate = Gate(tag, os.fspath(target))
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(gate.to_line())
        except OSError as exc:
            raise GateError("unable to create and open the gatefile") from exc
        return gate

    def delete(self, tag: str) -> None:
        """Remove every gate with ``tag``; other gates are kept unchanged."""
        try:
            lines = self.list_lines()
        except GateError as exc:
            raise GateError("unable to open gatefile; ensure gate file exists") from exc

        scratch = self.path.with_name(SCRATCH_FILE)
        try:
            with scratch.open("w", encoding="utf-8") as handle:
                handle.writelines(line for line in lines if line[:TAG_LENGTH] != tag)
        except OSError as exc:
            raise GateError("unable to create new gate file") from exc
        os.replace(scratch, self.path)

    def clear(self) -> None:
        """Wipe all gates, leaving an empty gate file."""
        self.path.unlink(missing_ok=True)
        try:
            self.path.write_text("", encoding="utf-8")
        except OSError as exc:
            raise GateError("unable to initialize gate file after wipe") from exc


def usage() -> str:
    """Return the short usage message."""
    return (
        "GATE::\n"
        " Filesystem movement tool\n"
        " Create gates within file systems that allow you to maneuver"
        " between different gate points quickly\n"
        "\t$ gate -[flags] [filepath]\n\n"
    )


def help_text() -> str:
    """Return the full help message."""
    return (
        "GATE::\n"
        "\tDictates gate points within the file system.\n"
        " Flags::\n"
        "\t-h : prints help information for gate\n"
        "\t-l : lists all gate endpoints within the gate file\n"
        "\t-c : creates a new gate point in the specified directory\n"
        "\t-d : takes a gate tag and deletes it from the gate list\n"
        "\t-x : delete all gate tags from the gate list\n"
        "\n\n"
    )


def _list_gates(gate_file: GateFile) -> None:
    try:
        lines = gate_file.list_lines()
    except GateError:
        print("Error: no gatefile exists")
        print("\tAdd a gate using the -c flag")
        return
    for line in lines:
        print(line, end="")
        print("----")


def _no_delete_tag() -> None:
    print("Error: no delete tag provided")
    print("\tusage: $ gate -d abc\n")


def main(argv: list[str] | None = None) -> int:
    """Run the gate command line tool."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(usage(), end="")
        return 0

    gate_file = GateFile()
    for index, arg in enumerate(args):
        if not arg.startswith("-"):
            continue
        following = args[index + 1] if index + 1 < len(args) else None
        has_operand = following is not None and not following.startswith("-")

        for flag in arg[1:]:
            if flag == "h":
                print(help_text(), end="")
                return 0
            if flag == "l":
                _list_gates(gate_file)
            elif flag == "c":
                if has_operand:
                    target = following
                else:
                    try:
                        target = os.getcwd()
                    except OSError:
                        print("Error: Unable to obtain current working directory\n")
                        return 1
                try:
                    gate_file.create(target)
                except GateError as exc:
                    print(f"Error: {exc}\n")
                    return 1
                if has_operand:
                    print(f"path given: {target}")
                    break
                print(target)
            elif flag == "d":
                if following is None:
                    _no_delete_tag()
                    return 0
                if not has_operand:
                    _no_delete_tag()
                    break
                try:
                    gate_file.delete(following)
                except GateError as exc:
                    print(f"Error: {exc}")
                    print(f"\tUnable to delete tag: {following}")
                break
            elif flag == "x":
                try:
                    gate_file.clear()
                except GateError as exc:
                    print(f"Error: {exc}")
                break
            else:
                print(f"Error: unknown flag {flag}")
    return 0


if __name__ == "__main__":
    sys.exit(main())