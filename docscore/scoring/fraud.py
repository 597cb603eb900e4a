from docscore.scoring.models import FraudAssessment

HIGH_AMOUNT_THRESHOLD = 10000

# (threshold, increment): every threshold below the total adds its increment.
_AMOUNT_THRESHOLDS: tuple[tuple[float, float], ...] = (
    (HIGH_AMOUNT_THRESHOLD, 0.5),
    (50000, 0.8),
)
_MAX_SCORE = 1.0


def score_fraud(total: float) -> FraudAssessment:
    """Score a document for fraud risk from its total amount alone.

    This is a placeholder heuristic, not a statistical model. Thresholds
    are additive, so anything above 50000 collects both increments and is
    clamped to 1.0.
    """
    raw = sum(increment for threshold, increment in _AMOUNT_THRESHOLDS if total > threshold)
    return FraudAssessment(
        score=min(float(raw), _MAX_SCORE),
        flags={"high_amount": total > HIGH_AMOUNT_THRESHOLD},
    )
