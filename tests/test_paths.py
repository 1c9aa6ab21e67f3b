import pytest

from parser import SkipSection
from splitter import clean_path, metadata_to_path


@pytest.mark.parametrize("metadata, expected", [
    ("# /etc/hosts", "etc/hosts"),
    ("# some/path - 42 Lines", "some/path"),
    ("# /var/log/messages - 1520 Lines", "var/log/messages"),
    ("# /etc/a - b/c - 7 Lines", "etc/a - b/c"),
    ("# /etc//sysconfig/./network", "etc/sysconfig/network"),
    ("# relative/../file", "file"),
])
def test_metadata_to_path(metadata, expected):
    assert metadata_to_path(metadata) == expected


@pytest.mark.parametrize("metadata", [
    "#/etc/hosts",
    "/etc/hosts",
    "",
    "# /etc/foo.conf - File not found",
    "# File not found: /etc/bar",
    "# /",
    "# .",
    "# ../..",
])
def test_metadata_skips(metadata):
    with pytest.raises(SkipSection):
        metadata_to_path(metadata)


def test_lines_suffix_without_separator_is_kept():
    assert metadata_to_path("# /tmp/Lines") == "tmp/Lines"
    assert metadata_to_path("# /tmp/10 Lines") == "tmp/10 Lines"


@pytest.mark.parametrize("path, expected", [
    ("", ""),
    ("/", ""),
    ("a/b", "a/b"),
    ("/a/b/", "a/b"),
    ("//a", "a"),
    ("../../etc/passwd", "etc/passwd"),
    ("/etc/../../../root", "root"),
    ("a/./b/../c", "a/c"),
])
def test_clean_path_never_escapes(path, expected):
    assert clean_path(path) == expected
