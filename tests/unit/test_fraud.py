import pytest

from docscore.scoring.fraud import score_fraud


class TestScoreFraud:
    def test_small_amount(self) -> None:
        result = score_fraud(5000)
        assert result.score == 0
        assert result.flags == {"high_amount": False}

    def test_threshold_is_exclusive(self) -> None:
        result = score_fraud(10000)
        assert result.score == 0
        assert result.flags["high_amount"] is False

    def test_high_amount(self) -> None:
        result = score_fraud(20000)
        assert result.score == pytest.approx(0.5)
        assert result.flags["high_amount"] is True

    def test_very_high_amount_is_capped(self) -> None:
        result = score_fraud(60000)
        assert result.score == 1.0
        assert result.flags["high_amount"] is True

    def test_just_above_upper_threshold_is_capped(self) -> None:
        assert score_fraud(50001).score == 1.0

    def test_upper_threshold_itself(self) -> None:
        assert score_fraud(50000).score == pytest.approx(0.5)
