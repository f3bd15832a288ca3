"""Tests for BoardScene click mapping and redraw behaviour."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from sandchess.core.square import parse_square
from sandchess.game.controller import GameController
from sandchess.game.state import ClickResult
from sandchess.ui.board.board_scene import BoardScene


def _scene() -> tuple[GameController, BoardScene]:
    controller = GameController()
    controller.start_game()
    return controller, BoardScene(controller)


def test_pos_to_square_respects_orientation() -> None:
    _, scene = _scene()
    assert scene.pos_to_square(scene.sceneRect().topLeft()) == parse_square("a8")

    scene.set_flipped(True)
    assert scene.is_flipped()
    assert scene.pos_to_square(scene.sceneRect().topLeft()) == parse_square("h1")


def test_pos_to_square_outside_board_is_none() -> None:
    _, scene = _scene()
    assert scene.pos_to_square(QPointF(-5, 10)) is None
    assert scene.pos_to_square(QPointF(10, 8 * BoardScene.TILE + 1)) is None


def test_square_center_round_trips() -> None:
    _, scene = _scene()
    for name in ("a1", "e4", "h8"):
        sq = parse_square(name)
        assert scene.pos_to_square(scene.square_center(sq)) == sq


def test_pieces_drawn_from_board() -> None:
    _, scene = _scene()
    assert scene.piece_item_at(parse_square("e2")) is not None
    assert scene.piece_item_at(parse_square("e4")) is None


def test_two_clicks_move_a_piece() -> None:
    controller, scene = _scene()
    recorded: list[object] = []
    scene.move_made.connect(recorded.append)

    e2, e4 = parse_square("e2"), parse_square("e4")
    assert scene.click_at(scene.square_center(e2)) == ClickResult.SELECTED
    assert scene.click_at(scene.square_center(e4)) == ClickResult.MOVED

    assert controller.board.piece_at(e4) is not None
    assert scene.piece_item_at(e4) is not None
    assert scene.piece_item_at(e2) is None
    assert [str(r) for r in recorded] == ["e2-e4"]


def test_selection_draws_destination_dots() -> None:
    _, scene = _scene()
    scene.click_at(scene.square_center(parse_square("b1")))
    # selection highlight + a3, c3
    assert len(scene._highlight_items) == 3

    scene.set_show_legal_moves(False)
    assert len(scene._highlight_items) == 1


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    _, scene = _scene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_restart_clears_last_move_highlight() -> None:
    controller, scene = _scene()
    scene.click_at(scene.square_center(parse_square("e2")))
    scene.click_at(scene.square_center(parse_square("e4")))
    assert len(scene._last_move_highlights) == 2

    controller.start_game()
    assert scene._last_move_highlights == []
    assert scene.piece_item_at(parse_square("e2")) is not None
