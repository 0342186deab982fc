"""
Error types raised by the board and reported by the game controller.

Every error here is recoverable: the controller turns them into rejected
command results instead of letting them escape to the terminal loop.
"""


class MinesweeperError(Exception):
    """Base class for all game errors."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y


class InvalidConfigError(MinesweeperError, ValueError):
    """Board dimensions or mine count are impossible."""


class MalformedCommandError(MinesweeperError, ValueError):
    """Command tokens could not be interpreted."""


class IllegalTransitionError(MinesweeperError):
    """Gameplay command submitted after the game has ended."""
