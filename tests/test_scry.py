import os
from types import SimpleNamespace

import pytest

from gatescry.scry import (
    SEPARATOR,
    ScryError,
    datetime_info,
    dir_tree,
    file_props,
    file_props_short,
    file_size,
    handle_dir,
    handle_file,
    help_text,
    main,
    owner_group,
    permissions,
    usage,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "f.txt").write_text("hello")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "g.txt").write_text("x")
    inner = sub / "inner"
    inner.mkdir()
    (inner / "deep.txt").write_text("y")
    return tmp_path


@pytest.mark.parametrize(
    "mode, expected",
    [
        (0o754, "rwx r-x r--"),
        (0o000, "--- --- ---"),
        (0o777, "rwx rwx rwx"),
    ],
)
def test_permissions(mode, expected):
    assert permissions(mode) == expected


def test_file_size(tmp_path):
    path = tmp_path / "f"
    path.write_text("hello")
    assert file_size(os.stat(path)) == "  5b"


def test_owner_group_unknown_ids():
    stats = SimpleNamespace(st_uid=2**31 - 2, st_gid=2**31 - 2)
    assert owner_group(stats) == "NO OWNR  NO GRP"


def test_datetime_info_epoch():
    assert datetime_info(0, 0, 1) == "  ACC: 1-0-1970  0:0:0\n  MOD: 1-0-1970  0:0:0\n"


def test_datetime_info_indents_by_depth():
    lines = datetime_info(0, 0, 3).splitlines()
    assert len(lines) == 2
    assert all(line.startswith("      ACC") or line.startswith("      MOD") for line in lines)


def test_file_props_short(tmp_path):
    path = tmp_path / "f"
    path.write_text("abc")
    os.chmod(path, 0o640)
    stats = os.stat(path)
    out = file_props_short("f", stats, 1)
    assert out.startswith("  f:: ")
    assert out.endswith("  rw- r-- ---  3b\n")
    assert out.count("\n") == 1


def test_file_props_long(tmp_path):
    path = tmp_path / "f"
    path.write_text("abcd")
    os.chmod(path, 0o600)
    stats = os.stat(path)
    lines = file_props("f", stats, 1).splitlines()
    assert len(lines) == 4
    assert lines[0] == f"  f:: {owner_group(stats)}"
    assert lines[1] == "  rw- --- ---  4b"
    assert lines[2].startswith("  ACC: ")
    assert lines[3].startswith("  MOD: ")


def test_handle_file_short_and_long(tmp_path):
    path = tmp_path / "f"
    path.write_text("a")
    stats = os.stat(path)
    assert handle_file(str(path), stats, True) == file_props_short(str(path), stats)
    assert handle_file(str(path), stats, False) == file_props(str(path), stats)


def test_dir_tree(tree):
    assert dir_tree(str(tree), 2, 1) == "  f.txt\n  sub::\n    g.txt\n    inner\n"


def test_dir_tree_single_level(tree):
    assert dir_tree(str(tree), 1, 1) == "  f.txt\n  sub\n"


def test_handle_dir_tree_uses_two_levels(tree):
    assert handle_dir(str(tree), True) == dir_tree(str(tree), 2, 1)


def test_handle_dir_lists_each_entry(tree):
    out = handle_dir(str(tree), False)
    assert out.count(SEPARATOR + "\n") == 2
    assert "  f.txt:: " in out
    assert "  sub:: " in out


def test_handle_dir_missing_raises(tmp_path):
    with pytest.raises(ScryError):
        handle_dir(str(tmp_path / "missing"))


def test_dir_tree_missing_raises(tmp_path):
    with pytest.raises(ScryError):
        dir_tree(str(tmp_path / "missing"), 2, 1)


def test_main_help(capsys):
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == help_text()


def test_main_trailing_flag_prints_usage(capsys):
    assert main(["-s"]) == 1
    assert capsys.readouterr().out == usage()


def test_main_missing_file(capsys, tmp_path):
    missing = str(tmp_path / "missing")
    assert main([missing]) == 1
    assert "Error: unable to obtain file properties" in capsys.readouterr().out


def test_main_file_short(capsys, tmp_path):
    path = tmp_path / "f"
    path.write_text("abc")
    assert main(["-s", str(path)]) == 0
    assert capsys.readouterr().out == file_props_short(str(path), os.stat(path))


def test_main_dir_tree(capsys, tree):
    assert main(["-t", str(tree)]) == 0
    assert capsys.readouterr().out == dir_tree(str(tree), 2, 1)


def test_main_unknown_flag(capsys, tmp_path):
    path = tmp_path / "f"
    path.write_text("a")
    assert main(["-q", str(path)]) == 0
    assert capsys.readouterr().out.startswith("Unknown flag: q\n")