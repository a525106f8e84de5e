# gatescry

A handful of small command-line tools for getting around a filesystem.

- `gate` keeps a list of "gates": paths you want to come back to, each
  given a random three-letter tag.
- `scry` shows information about a file, or about the entries of a
  directory, with an optional tree view.
- `blink` is meant to be the companion tool for moving between gates. For
  now it only prints its usage (see "What is not here" below).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## gate

Gates are stored in a file named `.gatefile` in the current directory, one
`tag,path` line per gate. Tags are three random lower-case letters, chosen so
that they do not clash with a tag already in the file.

```
gate -c              # add a gate for the current directory and print it
gate -c /some/path   # add a gate for the given path
gate -l              # print every gate line, each followed by "----"
gate -d abc          # delete the gate tagged "abc"
gate -x              # delete every gate, leaving an empty .gatefile
gate -h              # show help
```

Flags can be combined, as in `gate -lc`. Run with no arguments, `gate`
prints its usage. Unknown flags are reported and skipped.

## scry

```
scry path/to/file        # owner, group, permissions, size, access and modification times
scry -s path/to/file     # owner, group, permissions and size on one line
scry path/to/dir         # one short line for each entry in the directory
scry -t path/to/dir      # the directory as a tree, two levels deep
scry -h                  # show help
```

The path must be the last argument. Permissions are shown as three groups,
for example `rwx r-x r--`, and sizes in bytes, for example `1024b`. Where the
owner or group cannot be looked up, `NO OWNR` or `NO GRP` is shown instead.
Times are shown in UTC as `day-month-year  hour:minute:second`, with the
month counted from zero (January is `0`). Directory entries are listed in
sorted order.

## blink

```
blink
```

Prints usage information. Given any arguments, it prints nothing and exits.

## Use from Python

The gate list can be managed directly:

```python
import random
from gatescry.gate import GateFile

gates = GateFile(".gatefile")
gate = gates.create("/tmp", random.Random())
for entry in gates.gates():
    print(entry.tag, entry.path)
gates.delete(gate.tag)
```

`GateFile` raises `gatescry.gate.GateError` when the gate file cannot be read
or written.

The helpers in `gatescry.scry`, such as `permissions`, `file_props`,
`file_props_short`, `handle_dir` and `dir_tree`, return strings rather than
printing them. `handle_dir` and `dir_tree` raise `gatescry.scry.ScryError`
when a directory cannot be read.

## What is not here

`blink` does not move you to a gate: it does not read the gate file or change
directory. Registered gates can be listed with `gate -l`, but going to one is
left to you.