"""
Line-oriented terminal front-end.

Reads commands from a text stream, forwards them to the game controller
and writes the rendered board back. Streams are injectable so sessions
can be driven from tests.
"""
import sys
from typing import Optional, TextIO

from .controller import GameController, GameStatus
from .render import render_board, render_status


PROMPT = (
    "Please enter where you would like to target in the format "
    "'x y command', or exit"
)
USAGE = "Where command is reveal or flag"
QUIT_WORDS = {"exit", "quit"}


class TerminalSession:
    """Interactive play loop over a controller."""

    def __init__(
        self,
        controller: GameController,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.controller = controller
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _read_line(self) -> Optional[str]:
        """Next input line without its newline, or None at end of input."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def _show(self) -> None:
        self._write(render_board(self.controller.board))
        self._write(render_status(self.controller))

    def run(self) -> GameController:
        """
        Play games until the player quits or input runs out.

        Returns:
            The controller, for inspecting the final counters.
        """
        while True:
            self.play_one()
            if self.controller.status == GameStatus.STOPPED:
                break
            if not self._ask_play_again():
                break
            self.controller.new_game()

        self._write("Exiting...")
        return self.controller

    def play_one(self) -> GameStatus:
        """Run the command loop for the current game until it ends."""
        while self.controller.running:
            self._show()
            self._write(PROMPT)
            self._write(USAGE)

            line = self._read_line()
            if line is None or line.lower() in QUIT_WORDS:
                self.controller.quit()
                break
            if not line:
                continue

            result = self.controller.submit(line.split())
            if result.rejected:
                self._write(f"The command you entered was incorrect: {result.error}")

        if self.controller.status in (GameStatus.WON, GameStatus.LOST):
            self._show()
            if self.controller.status == GameStatus.WON:
                self._write("You cleared the board!")
            else:
                self._write("Game Over!")
        return self.controller.status

    def _ask_play_again(self) -> bool:
        self._write("Play again? (y/n)")
        line = self._read_line()
        return line is not None and line.lower() in ("y", "yes")
