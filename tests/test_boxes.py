"""
Tests for box absorption and scoring.
"""

import math

import pytest

from boxgame.core.config_loader import BoxConfig, load_config
from boxgame.core.boxes import (
    BlueBox,
    BoxKind,
    GreenBox,
    cantor_pairing,
    make_box,
    make_boxes,
    select_lightest,
)


@pytest.fixture
def config():
    return load_config()


class TestGreenBox:
    """Test square-of-recent-mean scoring."""

    def test_reference_sequence(self):
        """Green(0.0) absorbing 3, 12, 15 scores 9, 56.25, 100."""
        box = GreenBox(0.0)

        assert box.absorb(3) == 9.0
        assert box.absorb(12) == 56.25
        assert box.absorb(15) == 100.0

    def test_empty_history_scores_zero(self):
        """A fresh box has nothing to average."""
        assert GreenBox(0.1).calculate_score() == 0.0

    def test_single_absorption_is_square(self):
        """One absorption of w scores w squared."""
        box = GreenBox(0.0)
        assert box.absorb(7) == 49.0

    def test_two_absorptions_use_both(self):
        """Two absorptions score the squared mean of both."""
        box = GreenBox(0.0)
        box.absorb(2)
        assert box.absorb(4) == 9.0

    def test_only_last_three_count(self):
        """Older history does not affect the score."""
        a = GreenBox(0.0)
        b = GreenBox(0.0)
        for w in (100, 1, 2, 3):
            a.absorb(w)
        for w in (0, 1, 2, 3):
            b.absorb(w)

        assert a.calculate_score() == 4.0
        assert b.calculate_score() == 4.0

    def test_configured_window(self):
        """A window of 1 scores only the latest weight."""
        box = GreenBox(0.0, window=1)
        box.absorb(3)
        assert box.absorb(12) == 144.0

    @pytest.mark.parametrize("window", [0, -1])
    def test_window_below_one_rejected(self, window):
        """A window must hold at least one weight."""
        with pytest.raises(ValueError):
            GreenBox(0.0, window=window)

    def test_negative_weight_accepted(self):
        """Weights are not validated."""
        box = GreenBox(0.0)
        assert box.absorb(-2) == 4.0
        assert box.current_weight == -2.0


class TestBlueBox:
    """Test Cantor pairing scoring."""

    def test_reference_sequence(self):
        """Blue(0.2) absorbing 1, 7, 23 scores 4, 43, 323."""
        box = BlueBox(0.2)

        assert box.absorb(1) == 4.0
        assert box.absorb(7) == 43.0
        assert box.absorb(23) == 323.0

    def test_pairing_definition(self):
        """pairing(0, 1) == 2 with min first and max second."""
        assert cantor_pairing(0, 1) == 2.0
        assert cantor_pairing(1, 0) == 1.0

    def test_min_max_pair_from_history(self):
        """Absorbing 0 then 1 yields pairing(0, 1)."""
        box = BlueBox(0.0)
        box.absorb(0)
        assert box.absorb(1) == 2.0

    def test_order_of_extremes_irrelevant(self):
        """Same min and max in any absorption order give the same score."""
        a = BlueBox(0.2)
        b = BlueBox(0.2)
        for w in (1, 5, 3):
            a.absorb(w)
        for w in (5, 3, 1):
            b.absorb(w)

        assert a.calculate_score() == b.calculate_score() == cantor_pairing(1, 5)

    def test_interior_values_ignored(self):
        """Only the extremes of the full history matter."""
        box = BlueBox(0.0)
        for w in (2, 9, 4, 6):
            box.absorb(w)
        assert box.calculate_score() == cantor_pairing(2, 9)

    def test_empty_history_scores_zero(self):
        assert BlueBox(0.3).calculate_score() == 0.0

    def test_nan_propagates(self):
        """Floating-point specials are not guarded."""
        box = BlueBox(0.0)
        box.absorb(1)
        assert math.isnan(box.absorb(float("nan")))


class TestBoxWeight:
    """Test running weight bookkeeping."""

    @pytest.mark.parametrize("box_cls", [GreenBox, BlueBox])
    def test_weight_is_initial_plus_history(self, box_cls):
        """current_weight equals initial weight plus all absorbed weights."""
        box = box_cls(0.1)
        for w in (1, 1, 2, 3, 5, 8, 13, 21):
            box.absorb(w)

        expected = box.initial_weight
        for w in box.absorbed_history:
            expected += w

        assert box.current_weight == expected
        assert box.absorb_count == 8

    def test_history_preserves_order(self):
        box = GreenBox(0.0)
        for w in (3, 1, 2):
            box.absorb(w)
        assert box.absorbed_history == (3.0, 1.0, 2.0)

    def test_boxes_compare_by_weight(self):
        light = BlueBox(0.2)
        heavy = GreenBox(0.0)
        heavy.absorb(1)

        assert light < heavy
        assert not heavy < light


class TestBoxSelection:
    """Test lightest-box selection."""

    def test_picks_smallest_weight(self):
        boxes = [GreenBox(0.5), GreenBox(0.1), BlueBox(0.2)]
        assert select_lightest(boxes) == 1

    def test_tie_goes_to_first(self):
        """Equal weights resolve to the earliest box."""
        boxes = [BlueBox(2.0), GreenBox(1.0), BlueBox(1.0)]
        assert select_lightest(boxes) == 1

    def test_single_box(self):
        assert select_lightest([BlueBox(9.0)]) == 0


class TestBoxFactory:
    """Test config-driven construction."""

    def test_default_layout(self, config):
        """Default session: Green(0.0), Green(0.1), Blue(0.2), Blue(0.3)."""
        boxes = make_boxes(config)

        assert [b.kind for b in boxes] == [
            BoxKind.GREEN, BoxKind.GREEN, BoxKind.BLUE, BoxKind.BLUE
        ]
        assert [b.current_weight for b in boxes] == [0.0, 0.1, 0.2, 0.3]

    def test_make_box_kinds(self, config):
        assert isinstance(make_box(BoxConfig("green", 0.0), config), GreenBox)
        assert isinstance(make_box(BoxConfig("blue", 0.0), config), BlueBox)

    def test_green_window_from_config(self, config):
        box = make_box(BoxConfig("green", 0.0), config)
        assert box.window == config.scoring.green_window
