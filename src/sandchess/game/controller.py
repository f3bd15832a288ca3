"""GameController — owns the board and screen state of one session.

Translates board clicks into selections and moves, and emits events via
simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from sandchess.core.board import Board
from sandchess.core.setup import STANDARD_LAYOUT, Layout
from sandchess.core.square import Square
from sandchess.game.state import ClickResult, GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
StateCallback = Callable[[GameState], None]
SelectionCallback = Callable[[Square | None, set[Square]], None]  # square, targets


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_board_reset: list[Callable[[], None]] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Session context for the driving layer.

    Either side may move at any time; there is no side-to-move, check or
    game-over logic.

    Thread-safety: every board mutation runs under one re-entrant lock.
    Readers on another thread (e.g. a repaint) must wrap their reads in
    :meth:`locked`.
    """

    __slots__ = (
        "_board",
        "_layout",
        "_state",
        "_selected",
        "_targets",
        "_history",
        "_lock",
        "events",
    )

    def __init__(self, layout: Layout = STANDARD_LAYOUT) -> None:
        self._board = Board()
        self._layout = layout
        self._state = GameState.MENU
        self._selected: Square | None = None
        self._targets: set[Square] = set()
        self._history: list[MoveRecord] = []
        self._lock = threading.RLock()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Square | None:
        return self._selected

    @property
    def targets(self) -> set[Square]:
        """Legal destinations of the selected piece."""
        return set(self._targets)

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def layout(self) -> Layout:
        return self._layout

    @contextmanager
    def locked(self) -> Iterator[Board]:
        """Hold the board lock for the duration of the block."""
        with self._lock:
            yield self._board

    # ── State transitions ────────────────────────────────────────────────

    def start_game(self, layout: Layout | None = None) -> None:
        """Set up a fresh board and switch to the playing screen."""
        if layout is not None:
            self._layout = layout
        with self._lock:
            self._board.place_initial_setup(self._layout)
            self._history.clear()
            self._clear_selection()
        self._set_state(GameState.PLAYING)
        for cb in self.events.on_board_reset:
            cb()

    def show_menu(self) -> None:
        """Return to the menu; the board is kept as it is."""
        with self._lock:
            self._clear_selection()
        self._set_state(GameState.MENU)

    # ── Interaction ──────────────────────────────────────────────────────

    def click(self, sq: Square | None) -> ClickResult:
        """Handle one click on *sq* (``None`` = outside the board).

        First click on a piece selects it, a second click on one of its
        legal destinations plays the move.
        """
        if self._state != GameState.PLAYING:
            _LOGGER.debug("Click ignored in state %s", self._state.name)
            return ClickResult.IGNORED
        if sq is None:
            with self._lock:
                had_selection = self._selected is not None
                self._clear_selection()
            return ClickResult.CLEARED if had_selection else ClickResult.IGNORED

        with self._lock:
            if self._selected is not None and sq in self._targets:
                record = self._play(self._selected, sq)
            elif self._board.piece_at(sq) is not None and sq != self._selected:
                self._select(sq)
                return ClickResult.SELECTED
            else:
                had_selection = self._selected is not None
                self._clear_selection()
                return ClickResult.CLEARED if had_selection else ClickResult.IGNORED

        for cb in self.events.on_move:
            cb(record)
        return ClickResult.MOVED

    def possible_moves(self, sq: Square) -> set[Square]:
        with self._lock:
            return self._board.possible_moves(sq)

    # ── Internal ─────────────────────────────────────────────────────────

    def _play(self, origin: Square, target: Square) -> MoveRecord:
        captured = self._board.make_move(origin, target)
        piece = self._board.piece_at(target)
        assert piece is not None
        side, kind = piece.side, piece.kind
        record = MoveRecord(
            origin=origin,
            target=target,
            side=side,
            kind=kind,
            captured=captured.kind if captured is not None else None,
        )
        self._history.append(record)
        _LOGGER.info("Move %d: %s %s %s", len(self._history), side, kind, record)
        self._clear_selection()
        return record

    def _select(self, sq: Square) -> None:
        self._selected = sq
        self._targets = self._board.possible_moves(sq)
        self._emit_selection()

    def _clear_selection(self) -> None:
        if self._selected is None and not self._targets:
            return
        self._selected = None
        self._targets = set()
        self._emit_selection()

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._selected, set(self._targets))

    def _set_state(self, state: GameState) -> None:
        if state == self._state:
            return
        _LOGGER.info("Game state %s -> %s", self._state.name, state.name)
        self._state = state
        for cb in self.events.on_state_changed:
            cb(state)
