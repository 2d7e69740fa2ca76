import sys
from pathlib import Path

import pytest

from main import build_parser, main


def test_expr(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(build_parser().parse_args(["--expr", "3^3^2"])) == 0
    assert capsys.readouterr().out.strip() == "19683"


def test_expr_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(build_parser().parse_args(["--expr", "(1+2"])) == 1
    assert "mismatched parentheses" in capsys.readouterr().err


def test_plot(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "curve.png"
    args = build_parser().parse_args(
        ["--plot", "1/x", "--output", str(out), "--width", "21", "--height", "40"]
    )
    assert main(args) == 0
    assert out.exists()
    assert "(2 segments)" in capsys.readouterr().out


def test_plot_error(tmp_path: Path) -> None:
    args = build_parser().parse_args(
        ["--plot", "x+", "--output", str(tmp_path / "bad.png")]
    )
    assert main(args) == 1


class _FakeReadline:
    def __init__(self) -> None:
        self.lines = []
        self.auto_history = True

    def set_auto_history(self, enabled: bool) -> None:
        self.auto_history = enabled

    def add_history(self, line: str) -> None:
        self.lines.append(line)


def test_interactive_loop_feeds_readline_history(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    fake_readline = _FakeReadline()
    monkeypatch.setitem(sys.modules, "readline", fake_readline)
    inputs = iter(["1+1", "", "2^(-3)", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))

    args = build_parser().parse_args(["--prefs_path", str(tmp_path / "prefs.json")])
    assert main(args) == 0

    assert fake_readline.auto_history is False
    assert fake_readline.lines == ["1+1", "2^(-3)"]
    out = capsys.readouterr().out
    assert "calc> 2" in out
    assert "calc> 0.125" in out
