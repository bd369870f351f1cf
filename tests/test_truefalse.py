import pytest

from liliumtools.truefalse import false_main, help_version, true_main


def test_true_succeeds(capsys):
    assert true_main(["true"]) == 0
    assert capsys.readouterr().out == ""


def test_false_fails(capsys):
    assert false_main(["false", "anything"]) == 1
    assert capsys.readouterr().out == ""


def test_true_version(capsys):
    assert true_main(["true", "--version"]) == 0
    assert capsys.readouterr().out == "true (lilium-tools) v0.1.0\n"


def test_false_help_exits_zero(capsys):
    assert false_main(["false", "--help"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Usage: false [OPTIONS...] [--] [ARGS...]"
    assert lines[1] == "Trivially exits unsuccesfully"


def test_options_after_argument_ignored(capsys):
    assert false_main(["false", "x", "--help"]) == 1
    assert capsys.readouterr().out == ""


def test_double_dash_stops_scanning(capsys):
    assert true_main(["true", "--", "--version"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("option", ["--help", "--version"])
def test_help_version_handles(option, capsys):
    assert help_version("true", "succesfully", ["prog", option]) == 0
    assert capsys.readouterr().out != ""


def test_help_version_nothing_to_do(capsys):
    assert help_version("true", "succesfully", ["prog", "arg"]) is None
    assert capsys.readouterr().out == ""