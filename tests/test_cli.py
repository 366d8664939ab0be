import sys

import pytest

from cssbuilder.__main__ import main


def _run(monkeypatch, capsys, *argv):
    monkeypatch.setattr(sys, "argv", ["cssbuilder", *argv])
    code = 0
    try:
        main()
    except SystemExit as e:
        code = e.code
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_builds_compound_selector(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "--id", "main", "--class", "container", "--class", "editable")

    assert code == 0
    assert out == "#main.container.editable\n"


def test_parts_keep_command_line_order(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "-e", "a", "-a", 'href$=".png"', "-p", "focus")

    assert code == 0
    assert out == 'a[href$=".png"]:focus\n'


def test_combinators_join_left_to_right(monkeypatch, capsys):
    code, out, _ = _run(
        monkeypatch, capsys, "-e", "div", "-i", "main", "-C", "+", "-e", "table", "-i", "data", "-C", ">", "-e", "tr"
    )

    assert code == 0
    assert out == "div#main + table#data > tr\n"


def test_ordering_error_exits_2(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, "--id", "x", "--element", "div")

    assert code == 2
    assert out == ""
    assert "element must not follow id" in err


def test_duplicate_error_exits_2(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "-P", "before", "-P", "after")

    assert code == 2
    assert "pseudo-element selector may occur at most once" in err


def test_unknown_combinator(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "-e", "a", "-C", "|", "-e", "b")

    assert code == 2
    assert "Unknown combinator '|'" in err


def test_unknown_combinator_allowed(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "--no-validate-combinator", "-e", "a", "-C", "||", "-e", "b")

    assert code == 0
    assert out == "a || b\n"


@pytest.mark.parametrize(
    "argv",
    [
        ("-C", "+", "-e", "a"),
        ("-e", "a", "-C", "+"),
        ("-e", "a", "-C", "+", "-C", "~", "-e", "b"),
    ],
)
def test_dangling_combinator(monkeypatch, capsys, argv):
    code, _, err = _run(monkeypatch, capsys, *argv)

    assert code == 2
    assert "combinator must sit between two compound selectors" in err


def test_no_parts_prints_help(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys)

    assert code == 1
    assert out == ""
    assert "usage: cssbuilder" in err


def test_verbose_logs_to_stderr(monkeypatch, capsys):
    code, out, err = _run(monkeypatch, capsys, "-v", "-i", "a", "-i", "b")

    assert code == 2
    assert out == ""
    assert "selector_part_rejected" in err


def test_version(monkeypatch, capsys):
    code, out, _ = _run(monkeypatch, capsys, "--version")

    assert code == 0
    assert out.startswith("cssbuilder ")
