"""
Tests for box scoring rules.
"""

import pytest
import numpy as np

from boxgame.core.boxes import (
    TOKEN_MAX,
    BlueBox,
    GreenBox,
    cantor_pairing,
    make_blue_box,
    make_box,
    make_green_box,
    validate_token,
)


class TestGreenBox:
    """Test square-of-mean scoring."""

    def test_first_absorb_scores_token_squared(self):
        box = make_green_box(0.0)
        assert box.absorb(7) == 49.0

    def test_mean_of_all_absorbed_tokens(self):
        """Fourth absorb of 10, 20, 30, 40 scores the squared overall mean."""
        box = make_green_box(0.0)

        box.absorb(10)
        box.absorb(20)
        box.absorb(30)

        assert box.absorb(40) == pytest.approx(625.0)

    def test_window_keeps_most_recent_tokens(self):
        """With a window of 3, the oldest token drops out."""
        box = make_green_box(0.0, window=3)

        box.absorb(10)
        box.absorb(20)
        box.absorb(30)

        assert box.absorb(40) == pytest.approx(900.0)
        assert box.history == (20, 30, 40)

    def test_window_uses_all_tokens_while_short(self):
        """Fewer than window tokens averages everything absorbed."""
        box = make_green_box(0.0, window=3)

        box.absorb(1)
        assert box.absorb(8) == 20.25

    def test_weight_accumulates(self):
        box = make_green_box(0.1)
        for token in (1, 2, 3):
            box.absorb(token)

        assert box.weight == pytest.approx(6.1)
        assert box.absorbed == 3

    def test_window_weight_counts_dropped_tokens(self):
        """Weight tracks every token, not just the averaged ones."""
        box = make_green_box(0.0, window=2)
        for token in (5, 5, 5, 5):
            box.absorb(token)

        assert box.weight == 20.0
        assert len(box.history) == 2

    def test_invalid_window(self):
        with pytest.raises(ValueError):
            GreenBox(0.0, window=0)


class TestBlueBox:
    """Test Cantor pairing scoring."""

    def test_pairing_of_min_and_max(self):
        box = make_blue_box(0.0)

        box.absorb(5)
        box.absorb(10)
        box.absorb(15)

        min_weight, max_weight = 5, 20
        expected = ((min_weight + max_weight) * (min_weight + max_weight + 1) // 2) + max_weight

        assert box.absorb(20) == expected

    def test_single_token_pairs_with_itself(self):
        box = make_blue_box(0.2)
        assert box.absorb(2) == 12.0
        assert box.min_token == 2
        assert box.max_token == 2

    def test_min_and_max_track_history(self):
        box = make_blue_box(0.0)
        for token in (8, 3, 12, 5):
            box.absorb(token)

        assert box.min_token == 3
        assert box.max_token == 12
        assert box.weight == 28.0

    def test_extreme_tokens(self):
        """Full 32-bit tokens pair without overflow."""
        box = make_blue_box(0.0)
        box.absorb(0)

        assert box.absorb(TOKEN_MAX) == float(cantor_pairing(0, TOKEN_MAX))
        assert box.absorb(TOKEN_MAX) >= 0.0

    def test_untouched_box_has_no_range(self):
        box = BlueBox(0.3)
        assert box.min_token is None
        assert box.max_token is None
        assert box.absorbed == 0


class TestCantorPairing:
    """Test the pairing function itself."""

    def test_known_values(self):
        assert cantor_pairing(0, 0) == 0
        assert cantor_pairing(0, 1) == 2
        assert cantor_pairing(1, 0) == 1
        assert cantor_pairing(2, 2) == 12
        assert cantor_pairing(2, 13) == 133

    def test_no_overflow_at_32_bit_limit(self):
        m = TOKEN_MAX
        assert cantor_pairing(m, m) == 2 * m * m + 2 * m

    def test_injective_on_small_grid(self):
        values = {cantor_pairing(a, b) for a in range(30) for b in range(30)}
        assert len(values) == 900


class TestTokenValidation:
    """Test token domain checks."""

    def test_accepts_range_limits(self):
        assert validate_token(0) == 0
        assert validate_token(TOKEN_MAX) == TOKEN_MAX

    def test_accepts_numpy_integers(self):
        value = validate_token(np.uint32(17))
        assert value == 17
        assert type(value) is int

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            validate_token(-1)

    def test_rejects_above_32_bit(self):
        with pytest.raises(ValueError):
            validate_token(TOKEN_MAX + 1)

    def test_rejects_non_integers(self):
        with pytest.raises(TypeError):
            validate_token(1.5)
        with pytest.raises(TypeError):
            validate_token(True)

    def test_failed_absorb_leaves_box_unchanged(self):
        box = make_green_box(0.0)
        with pytest.raises(ValueError):
            box.absorb(-3)

        assert box.weight == 0.0
        assert box.absorbed == 0


class TestBoxFactory:
    """Test box creation and ordering."""

    def test_make_box_by_kind(self):
        assert isinstance(make_box("green", 0.0), GreenBox)
        assert isinstance(make_box("blue", 0.0), BlueBox)

    def test_make_box_passes_window_to_green(self):
        box = make_box("green", 0.0, green_window=3)
        assert box.window == 3

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            make_box("red", 0.0)

    def test_boxes_order_by_weight(self):
        light = make_blue_box(0.2)
        heavy = make_green_box(0.3)

        assert light < heavy
        assert not heavy < light
        assert min([heavy, light]) is light


class TestPackageExports:
    """Test the public names re-exported by boxgame.core."""

    def test_token_helpers_exported(self):
        import boxgame.core as core

        assert core.validate_token is validate_token
        assert core.TOKEN_MAX == TOKEN_MAX
        assert "validate_token" in core.__all__
        assert "TOKEN_MAX" in core.__all__
