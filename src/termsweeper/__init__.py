"""
Terminal Minesweeper.

Provides the board model with flood-fill reveal, the game controller
state machine, text rendering and a Gymnasium environment.
"""
from .cell import MINE, Cell, CellState, CellView
from .errors import (
    MinesweeperError,
    OutOfBoundsError,
    InvalidConfigError,
    MalformedCommandError,
    IllegalTransitionError,
)
from .board import Board, BoardConfig, FlagResult, RevealOutcome, RevealResult
from .controller import Action, Command, CommandResult, GameController, GameStatus
from .render import render_board, render_status
from .terminal import TerminalSession
from .environment import MinesweeperEnv

__all__ = [
    "MINE",
    "Cell",
    "CellState",
    "CellView",
    "MinesweeperError",
    "OutOfBoundsError",
    "InvalidConfigError",
    "MalformedCommandError",
    "IllegalTransitionError",
    "Board",
    "BoardConfig",
    "FlagResult",
    "RevealOutcome",
    "RevealResult",
    "Action",
    "Command",
    "CommandResult",
    "GameController",
    "GameStatus",
    "render_board",
    "render_status",
    "TerminalSession",
    "MinesweeperEnv",
]
