"""Per-tick decision engine for a population of cooperating snakes."""

from .address import Address
from .config import StrategySettings
from .diagnostics import DiagnosticSink, LoggingSink, RecordingSink
from .food import FoodManager
from .grid import Grid
from .messages import CellUpdate, StateMessage, UpdateMessage
from .models import Action, ActionType, Cell, MoveAction, Snake, SplitAction
from .state import GameState
from .strategy import MainStrategy

__all__ = [
    "Action",
    "ActionType",
    "Address",
    "Cell",
    "CellUpdate",
    "DiagnosticSink",
    "FoodManager",
    "GameState",
    "Grid",
    "LoggingSink",
    "MainStrategy",
    "MoveAction",
    "RecordingSink",
    "Snake",
    "SplitAction",
    "StateMessage",
    "StrategySettings",
    "UpdateMessage",
]
