"""One line of a script: a piece of dialogue, a command or a conditional."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScriptObj:
    """A script line and the indices of the lines that may follow it.

    ``cond_id`` is 0 for plain dialogue; otherwise it names the command or
    conditional to run, whose result picks ``true_index`` or ``false_index``.
    """

    text: str = ""
    true_index: int = 0
    cond_id: int = 0
    false_index: int = 0
    has_text: bool = False

    @classmethod
    def text_line(cls, text: str, next_index: int) -> ScriptObj:
        """A dialogue line shown before moving on to ``next_index``."""
        return cls(
            text=str(text),
            true_index=next_index,
            cond_id=0,
            false_index=0,
            has_text=True,
        )

    @classmethod
    def command(cls, run: int, next_index: int) -> ScriptObj:
        """A command whose result does not change where the script goes."""
        return cls(true_index=next_index, cond_id=run, false_index=next_index)

    @classmethod
    def conditional(
        cls, run: int, next_if_true: int, next_if_false: int
    ) -> ScriptObj:
        """A conditional that branches on its result."""
        return cls(true_index=next_if_true, cond_id=run, false_index=next_if_false)