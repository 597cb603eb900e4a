"""Approval aggregator: turns fraud score and VAT issues into a verdict."""

from collections.abc import Callable, Sequence

from docscore.scoring.models import ApprovalDecision, ComplianceIssue

FRAUD_FAIL_THRESHOLD = 0.7

ApprovalPredicate = Callable[[float, Sequence[ComplianceIssue]], bool]
ApprovalBuilder = Callable[[Sequence[ComplianceIssue]], ApprovalDecision]


def _fraud_too_high(fraud_score: float, issues: Sequence[ComplianceIssue]) -> bool:
    return fraud_score > FRAUD_FAIL_THRESHOLD


def _has_issues(fraud_score: float, issues: Sequence[ComplianceIssue]) -> bool:
    return len(issues) > 0


def _fail(issues: Sequence[ComplianceIssue]) -> ApprovalDecision:
    return ApprovalDecision(
        verdict="FAIL",
        confidence=0.9,
        reasons=("Fraud score too high",),
    )


def _needs_info(issues: Sequence[ComplianceIssue]) -> ApprovalDecision:
    return ApprovalDecision(
        verdict="NEEDS_INFO",
        confidence=0.75,
        reasons=tuple(issue.message for issue in issues),
        needs_info_fields=frozenset({"tax_amount"}),
    )


_PASS = ApprovalDecision(
    verdict="PASS",
    confidence=0.95,
    reasons=("Invoice looks valid",),
)

# Priority order; the first matching rule decides.
_RULES: tuple[tuple[ApprovalPredicate, ApprovalBuilder], ...] = (
    (_fraud_too_high, _fail),
    (_has_issues, _needs_info),
)


def decide_approval(
    fraud_score: float,
    issues: Sequence[ComplianceIssue],
) -> ApprovalDecision:
    """Decide PASS, FAIL or NEEDS_INFO for a scored document.

    A fraud score above the threshold fails the document outright and any
    compliance issues are ignored. Otherwise any issue asks for more
    information about the tax amount, and a clean document passes.
    """
    for predicate, build in _RULES:
        if predicate(fraud_score, issues):
            return build(issues)
    return _PASS
