import dataclasses

import pytest

from dreamdex.script_ids import Cmd, Cond, Dia
from dreamdex.script_obj import ScriptObj


def test_text_line():
    line = ScriptObj.text_line("Hello|there", Cmd.END_SCRIPT)
    assert line.text == "Hello|there"
    assert line.has_text is True
    assert line.true_index == Cmd.END_SCRIPT
    assert line.cond_id == 0
    assert line.false_index == 0


def test_command_goes_to_same_line_either_way():
    line = ScriptObj.command(Cmd.SET_TUTOR_TRUE, Cmd.END_SCRIPT)
    assert line.cond_id == Cmd.SET_TUTOR_TRUE
    assert line.true_index == line.false_index == Cmd.END_SCRIPT
    assert line.has_text is False
    assert line.text == ""


def test_conditional_branches():
    line = ScriptObj.conditional(Cond.BEAT_E4, Cond.MG_ENABLED, Dia.E4)
    assert line.cond_id == Cond.BEAT_E4
    assert line.true_index == Cond.MG_ENABLED
    assert line.false_index == Dia.E4
    assert line.text == ""


def test_default_line_is_empty():
    line = ScriptObj()
    assert (line.text, line.true_index, line.cond_id, line.false_index) == ("", 0, 0, 0)
    assert line.has_text is False


def test_lines_are_immutable():
    line = ScriptObj.text_line("Hi", 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.text = "Bye"
    assert line.text == "Hi"
    assert line.true_index == 3


def test_equal_lines_compare_equal():
    assert ScriptObj.command(Cmd.HIDE_PROF, 5) == ScriptObj.conditional(
        Cmd.HIDE_PROF, 5, 5
    )