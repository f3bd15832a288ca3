"""Game session layer — screen state and click-driven move entry.

Quick start::

    from sandchess.game import GameController

    ctrl = GameController()
    ctrl.start_game()
    ctrl.click(Square.from_algebraic("e2"))
    ctrl.click(Square.from_algebraic("e4"))
"""

from sandchess.game.controller import GameController, GameEvents
from sandchess.game.state import ClickResult, GameState, MoveRecord

__all__ = [
    "ClickResult",
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
]
