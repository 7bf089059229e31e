"""Plays a script: shows its dialogue page by page and follows its branches.

Pages of a dialogue line are separated by ``|``.  Lines without text are
passed straight through after their command or conditional has run.  A
command ends the script by calling :meth:`ScriptPlayer.exit`.
"""

from __future__ import annotations

from typing import Callable, Iterator, Sequence

from dreamdex.script_obj import ScriptObj
from dreamdex.scripts import next_line_id

H_MAX = 240
V_MAX = 160
LEFT = 8
RIGHT = H_MAX - LEFT
TOP = 120
BOTTOM = V_MAX

PAGE_BREAK = "|"


def split_pages(text: str) -> list[str]:
    """Split a dialogue line into its pages; an empty line has none."""
    if not text:
        return []
    return text.split(PAGE_BREAK)


class ScriptPlayer:
    """Walks a script table from a start line until a command ends it."""

    def __init__(
        self,
        script: Sequence[ScriptObj],
        start: int,
        run_conditional: Callable[[int], bool],
    ) -> None:
        self.script = script
        self.start = start
        self.run_conditional = run_conditional
        self.current_index = start
        self._exit = False

    def exit(self) -> None:
        """End the script once the current line has been left."""
        self._exit = True

    def pages(self) -> Iterator[str]:
        """Yield every page shown, in order, until the script is ended."""
        self._exit = False
        self.current_index = self.start
        line = self.script[self.current_index]
        while True:
            yield from split_pages(line.text if line.has_text else "")
            self.current_index = next_line_id(line, self.run_conditional)
            line = self.script[self.current_index]
            if self._exit:
                self._exit = False
                return