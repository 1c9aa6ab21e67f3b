from splitter import build_path_handler


def test_nothing_configured_returns_none():
    assert build_path_handler() is None
    assert build_path_handler([""], [], "") is None


def test_include_filters_paths():
    h = build_path_handler(include=["etc/*"])
    assert h("etc/hosts") == "etc/hosts"
    assert h("etc/sysconfig/network") == "etc/sysconfig/network"
    assert h("var/log/messages") == ""


def test_exclude_wins_over_include():
    h = build_path_handler(include=["var/log/*"], exclude=["*.gz"])
    assert h("var/log/messages") == "var/log/messages"
    assert h("var/log/messages-2024.gz") == ""


def test_leading_slash_in_pattern_is_accepted():
    h = build_path_handler(exclude=["/proc/*"])
    assert h("proc/cpuinfo") == ""
    assert h("etc/hosts") == "etc/hosts"


def test_suffix_is_appended():
    h = build_path_handler(suffix=".txt")
    assert h("etc/hosts") == "etc/hosts.txt"
