from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from docscore.scoring.models import ComplianceIssue, VatAssessment

_MAX_PLAUSIBLE_RATE = 0.25
_CENT = Decimal("0.01")

_RATE_TOO_HIGH = ComplianceIssue(severity="HIGH", message="VAT rate unusually high")
_NO_VAT = ComplianceIssue(severity="MEDIUM", message="No VAT detected (check compliance)")


def _rate_too_high(vat_rate: float, tax: float) -> bool:
    return vat_rate > _MAX_PLAUSIBLE_RATE


def _no_vat(vat_rate: float, tax: float) -> bool:
    return tax == 0


# Every check is evaluated; order here is the order of the reported issues.
_CHECKS: tuple[tuple[Callable[[float, float], bool], ComplianceIssue], ...] = (
    (_rate_too_high, _RATE_TOO_HIGH),
    (_no_vat, _NO_VAT),
)


def compute_vat_rate(total: float, tax: float) -> float:
    """Return tax / total rounded to 2 decimals, or 0 when either side is 0.

    Ties round away from zero on the exact binary value of the ratio, so
    1 / 8 gives 0.13.
    """
    if total > 0 and tax > 0:
        ratio = Decimal(tax / total)
        return float(ratio.quantize(_CENT, rounding=ROUND_HALF_UP))
    return 0.0


def evaluate_vat(total: float, tax: float) -> VatAssessment:
    """Compute the effective VAT rate and flag compliance issues.

    Args:
        total: Gross document total, non-negative.
        tax: Tax amount stated on the document, non-negative.

    Returns:
        VatAssessment with the rounded rate, the stated tax and the
        issues in evaluation order (rate check before zero-tax check).
    """
    vat_rate = compute_vat_rate(total, tax)
    issues = tuple(issue for check, issue in _CHECKS if check(vat_rate, tax))
    return VatAssessment(vat_rate=vat_rate, vat_amount_computed=tax, issues=issues)
