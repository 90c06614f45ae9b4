# Area: Input Tests
"""Tests for ClickToClaimBridge — pointer samples to cell claims."""

import logging

from tictac_cube import Player
from tictac_cube._input.bridge import ClickToClaimBridge
from tictac_cube._input.gesture import PointerGestureClassifier


def _grid_picker(position):
    """Map a 27-pixel strip to cells; anything else misses."""
    x, y = position
    if y != 0 or not 0 <= x < 27:
        return None
    return int(x)


class TestClickToClaimBridge:
    """Unit tests for ClickToClaimBridge."""

    def test_click_claims_picked_cell(self, engine):
        bridge = engine.input_bridge(_grid_picker)
        bridge.pointer_down((4, 0), 0)
        snapshot = bridge.pointer_up((4, 0), 100)
        assert snapshot.occupant_at(4) is Player.ONE
        assert engine.current_player is Player.TWO

    def test_drag_claims_nothing(self, engine):
        bridge = engine.input_bridge(_grid_picker)
        bridge.pointer_down((4, 0), 0)
        bridge.pointer_move((12, 0), 50)
        assert bridge.pointer_up((12, 0), 100) is None
        assert engine.snapshot().board == (None,) * 27

    def test_long_press_claims_nothing(self, engine):
        bridge = engine.input_bridge(_grid_picker)
        bridge.pointer_down((4, 0), 0)
        assert bridge.pointer_up((4, 0), 500) is None
        assert engine.occupant_at(4) is None

    def test_miss_claims_nothing(self, engine):
        bridge = engine.input_bridge(_grid_picker)
        bridge.pointer_down((4, 9), 0)
        assert bridge.pointer_up((4, 9), 50) is None

    def test_rejected_claim_is_logged_and_ignored(self, engine, caplog):
        bridge = engine.input_bridge(_grid_picker)
        bridge.pointer_down((4, 0), 0)
        bridge.pointer_up((4, 0), 50)

        with caplog.at_level(logging.INFO, logger="tictac_cube.input"):
            bridge.pointer_down((4, 0), 100)
            assert bridge.pointer_up((4, 0), 150) is None
        assert engine.occupant_at(4) is Player.ONE
        assert "Click on cell 4 ignored" in caplog.text

    def test_click_on_centre_is_rejected(self, engine):
        bridge = engine.input_bridge(_grid_picker)
        bridge.pointer_down((13, 0), 0)
        assert bridge.pointer_up((13, 0), 50) is None
        assert engine.occupant_at(13) is None

    def test_classifier_uses_engine_config(self, make_engine):
        engine = make_engine(drag_threshold=50, click_max_duration_ms=1000)
        bridge = engine.input_bridge(_grid_picker)
        assert bridge.classifier.drag_threshold == 50
        assert bridge.classifier.max_click_duration == 1000

        bridge.pointer_down((4, 0), 0)
        bridge.pointer_move((30, 0), 100)
        assert bridge.pointer_up((4, 0), 800) is not None

    def test_custom_classifier(self, engine):
        classifier = PointerGestureClassifier(drag_threshold=1)
        bridge = ClickToClaimBridge(engine, _grid_picker, classifier=classifier)
        bridge.pointer_down((4, 0), 0)
        bridge.pointer_move((6, 0), 10)
        assert bridge.pointer_up((6, 0), 20) is None
