"""Unit tests for the fzf picker and interactive mode; fzf is never run."""

from __future__ import annotations

import subprocess

import pytest
from rich.prompt import Prompt

from i3bind.config.errors import PickerError, PickerUnavailableError
from i3bind.config.models import Binding, escape_preview
from i3bind.ui import picker as picker_module
from i3bind.ui.console import Output
from i3bind.ui.interactive import run_interactive
from i3bind.ui.picker import FzfPicker


class FakePicker(FzfPicker):
    def __init__(self, choice_key=None):
        super().__init__()
        self.choice_key = choice_key

    def select(self, bindings):
        for binding in bindings:
            if binding.key == self.choice_key:
                return binding
        return None


def _fake_iterfzf(result=None, raises=None):
    calls = []

    def iterfzf(iterable, **kwargs):
        calls.append((list(iterable), kwargs))
        if raises is not None:
            raise raises
        return result

    return iterfzf, calls


def test_escape_preview() -> None:
    assert escape_preview('a\\b"c$d') == 'a\\\\b\\"c\\$d'


def test_fzf_record_columns() -> None:
    binding = Binding(key="$mod+Return", action='exec "term"', comment="")

    assert binding.to_fzf_record().split("\t") == [
        "$mod+Return",
        'exec "term"',
        "",
        "\\$mod+Return",
        'exec \\"term\\"',
        "",
    ]


def test_select_returns_chosen_binding(monkeypatch) -> None:
    bindings = [Binding(key="a", action="exec a"), Binding(key="b", action="exec b")]
    fake, calls = _fake_iterfzf(bindings[1].to_fzf_record())
    monkeypatch.setattr(picker_module, "iterfzf", fake)

    assert FzfPicker().select(bindings) is bindings[1]

    records, kwargs = calls[0]
    assert records == ["a\texec a\t\ta\texec a\t", "b\texec b\t\tb\texec b\t"]
    assert kwargs["preview"] == picker_module.PREVIEW_COMMAND
    assert "--with-nth=1,2" in kwargs["__extra__"]
    assert "--delimiter=\t" in kwargs["__extra__"]


def test_closing_fzf_means_no_selection(monkeypatch) -> None:
    fake, _ = _fake_iterfzf(None)
    monkeypatch.setattr(picker_module, "iterfzf", fake)

    assert FzfPicker().select([Binding(key="a", action="b")]) is None


def test_ctrl_c_means_no_selection(monkeypatch) -> None:
    fake, _ = _fake_iterfzf(raises=KeyboardInterrupt())
    monkeypatch.setattr(picker_module, "iterfzf", fake)

    assert FzfPicker().select([Binding(key="a", action="b")]) is None


def test_missing_fzf_raises(monkeypatch) -> None:
    fake, _ = _fake_iterfzf(raises=FileNotFoundError("fzf"))
    monkeypatch.setattr(picker_module, "iterfzf", fake)

    with pytest.raises(PickerUnavailableError):
        FzfPicker().select([Binding(key="a", action="b")])


def test_fzf_failure_raises(monkeypatch) -> None:
    fake, _ = _fake_iterfzf(raises=subprocess.CalledProcessError(2, ["fzf"]))
    monkeypatch.setattr(picker_module, "iterfzf", fake)

    with pytest.raises(PickerError):
        FzfPicker().select([Binding(key="a", action="b")])


def test_unknown_selection_raises(monkeypatch) -> None:
    fake, _ = _fake_iterfzf("zzz\tnothing\t\tzzz\tnothing\t")
    monkeypatch.setattr(picker_module, "iterfzf", fake)

    with pytest.raises(PickerError):
        FzfPicker().select([Binding(key="a", action="b")])


def test_interactive_remove(editor, monkeypatch, capsys) -> None:
    monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: "1")

    run_interactive(editor, Output(color=False), picker=FakePicker("$mod+d"))

    assert "$mod+d" not in {b.key for b in editor.bindings()}
    assert "Removed keybinding" in capsys.readouterr().out


def test_interactive_comment(editor, monkeypatch) -> None:
    answers = iter(["2", "launcher"])
    monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: next(answers))

    run_interactive(editor, Output(color=False), picker=FakePicker("$mod+d"))

    assert editor.get("$mod+d").comment == "launcher"


def test_interactive_details_and_cancel(editor, config_path, monkeypatch, capsys) -> None:
    before = config_path.read_bytes()
    answers = iter(["3", "4"])
    monkeypatch.setattr(Prompt, "ask", lambda *args, **kwargs: next(answers))

    run_interactive(editor, Output(color=False), picker=FakePicker("$mod+Return"))
    run_interactive(editor, Output(color=False), picker=FakePicker("$mod+Return"))

    out = capsys.readouterr().out
    assert "Action: exec alacritty" in out
    assert "Comment: open terminal" in out
    assert "Line: 8" in out
    assert "Cancelled" in out
    assert config_path.read_bytes() == before


def test_interactive_nothing_selected(editor, config_path, monkeypatch) -> None:
    before = config_path.read_bytes()

    def fail(*args, **kwargs):
        raise AssertionError("no prompt expected")

    monkeypatch.setattr(Prompt, "ask", fail)

    run_interactive(editor, Output(color=False), picker=FakePicker(None))

    assert config_path.read_bytes() == before


@pytest.mark.parametrize("answers", [[], ["2"]])
def test_interactive_closed_stdin_cancels(
    editor, config_path, monkeypatch, capsys, answers
) -> None:
    before = config_path.read_bytes()
    remaining = iter(answers)

    def ask(*args, **kwargs):
        for answer in remaining:
            return answer
        raise EOFError

    monkeypatch.setattr(Prompt, "ask", ask)

    run_interactive(editor, Output(color=False), picker=FakePicker("$mod+d"))

    assert "Cancelled" in capsys.readouterr().out
    assert config_path.read_bytes() == before
