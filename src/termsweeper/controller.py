"""
Game controller for Minesweeper.

Turns already-tokenized player commands into board operations and tracks
the per-game state machine plus the session counters.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence, Union

from .board import Board, BoardConfig, FlagResult, RevealOutcome, RevealResult
from .errors import IllegalTransitionError, MalformedCommandError, MinesweeperError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()
    STOPPED = auto()


class Action(Enum):
    """Gameplay actions a command can carry."""

    REVEAL = "reveal"
    FLAG = "flag"


# Keywords accepted in the action position; "mark" is the older name for flag
ACTION_KEYWORDS = {
    "reveal": Action.REVEAL,
    "flag": Action.FLAG,
    "mark": Action.FLAG,
}


# ============================================================================
# Commands and Results
# ============================================================================

@dataclass(frozen=True)
class Command:
    """
    A single gameplay command.

    Attributes:
        x: Target column.
        y: Target row.
        action: What to do at (x, y).
    """

    x: int
    y: int
    action: Action

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "Command":
        """
        Interpret an `x y action` token triple.

        Raises:
            MalformedCommandError: On wrong token count, non-integer
                coordinates or an unknown action keyword.
        """
        if isinstance(tokens, str) or len(tokens) != 3:
            raise MalformedCommandError(
                "Expected three tokens: 'x y action'"
            )
        raw_x, raw_y, raw_action = tokens
        try:
            x = int(raw_x)
            y = int(raw_y)
        except (TypeError, ValueError):
            raise MalformedCommandError(
                f"Coordinates must be integers, got {raw_x!r} {raw_y!r}"
            ) from None
        action = ACTION_KEYWORDS.get(str(raw_action).lower())
        if action is None:
            raise MalformedCommandError(
                f"Unknown action {raw_action!r} (use reveal or flag)"
            )
        return cls(x, y, action)


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of GameController.submit.

    A rejected result carries the error and guarantees nothing was mutated.
    """

    accepted: bool
    status: GameStatus
    reveal: Optional[RevealResult] = None
    flag: Optional[FlagResult] = None
    error: Optional[MinesweeperError] = None

    @property
    def rejected(self) -> bool:
        return not self.accepted


# ============================================================================
# Game Controller
# ============================================================================

class GameController:
    """
    Per-game state machine that owns the board.

    Starts in PLAYING. A revealed mine moves it to LOST, revealing every
    safe cell moves it to WON, and quit() moves it to STOPPED. No gameplay
    command is accepted in any of those terminal states.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        board: Optional[Board] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            config: Configuration for boards created by this controller.
            board: Pre-built board for the first game (mainly for tests).
            rng: Random source shared by every board this controller builds.
        """
        self.config = config or (board.config if board else BoardConfig())
        self._rng = rng or random.Random()
        self.board = board or Board(self.config, rng=self._rng)
        self.status = GameStatus.PLAYING
        self.score = 0
        self.wins = 0
        self.losses = 0

    @property
    def running(self) -> bool:
        """Check if gameplay commands are still accepted."""
        return self.status == GameStatus.PLAYING

    def new_game(self, board: Optional[Board] = None) -> None:
        """Start a fresh board; wins, losses and score carry over."""
        self.board = board or Board(self.config, rng=self._rng)
        self.status = GameStatus.PLAYING
        logger.debug("New game started")

    def quit(self) -> None:
        """Stop the game regardless of board condition."""
        self.status = GameStatus.STOPPED
        logger.info("Game stopped by player")

    def submit(self, command: Union[Command, Sequence[str]]) -> CommandResult:
        """
        Apply one command to the board.

        Args:
            command: A Command, or the raw `x y action` tokens.

        Returns:
            CommandResult; rejected results leave all state untouched.
        """
        try:
            if not isinstance(command, Command):
                command = Command.from_tokens(command)
            if not self.running:
                raise IllegalTransitionError(
                    f"Game is {self.status.name.lower()}; no moves accepted"
                )
            if command.action == Action.REVEAL:
                return self._reveal(command.x, command.y)
            return self._flag(command.x, command.y)
        except MinesweeperError as error:
            logger.debug("Rejected %r: %s", command, error)
            return CommandResult(False, self.status, error=error)

    def _reveal(self, x: int, y: int) -> CommandResult:
        """Dispatch a reveal and apply the resulting transition."""
        result = self.board.reveal(x, y)
        logger.debug("reveal (%d, %d) -> %s", x, y, result.outcome.name)

        if result.outcome == RevealOutcome.HIT_MINE:
            self.status = GameStatus.LOST
            self.losses += 1
            self.board.reveal_mines()
            logger.info("Mine hit at (%d, %d); game lost", x, y)
        elif result.outcome == RevealOutcome.REVEALED:
            self.score += len(result.revealed)
            if self.board.is_won():
                self.status = GameStatus.WON
                self.wins += 1
                logger.info("All safe cells revealed; game won")

        return CommandResult(True, self.status, reveal=result)

    def _flag(self, x: int, y: int) -> CommandResult:
        """Dispatch a flag toggle; never changes status."""
        result = self.board.flag(x, y)
        logger.debug("flag (%d, %d) -> %s", x, y, result.name)
        return CommandResult(True, self.status, flag=result)
