from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, TypeVar

Severity = Literal["HIGH", "MEDIUM", "LOW"]
Verdict = Literal["PASS", "FAIL", "NEEDS_INFO"]

V = TypeVar("V")


def read_only(values: Mapping[str, V]) -> Mapping[str, V]:
    """Return a read-only snapshot of values, detached from the original."""
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class DocumentInput:
    """Shared input record for one pipeline run.

    Built once per request by the caller; every stage reads from the same
    instance and none of them mutates it.
    """

    text: str
    vendor_name: str
    invoice_number: str
    invoice_date: str
    total_amount: float
    tax_amount: float
    currency: str
    field_confidence: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_confidence", read_only(self.field_confidence))


@dataclass(frozen=True)
class ClassificationResult:
    """Label with a confidence in [0, 1]."""

    label: str
    confidence: float


@dataclass(frozen=True)
class ComplianceIssue:
    """Structured warning raised by the VAT evaluator."""

    severity: Severity
    message: str


@dataclass(frozen=True)
class VatAssessment:
    vat_rate: float
    vat_amount_computed: float
    issues: tuple[ComplianceIssue, ...] = ()


@dataclass(frozen=True)
class FraudAssessment:
    score: float
    flags: Mapping[str, bool] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", read_only(self.flags))


@dataclass(frozen=True)
class ApprovalDecision:
    """Terminal output of the approval aggregator."""

    verdict: Verdict
    confidence: float
    reasons: tuple[str, ...] = ()
    needs_info_fields: frozenset[str] = frozenset()


@dataclass(frozen=True)
class EsgAssessment:
    category: str
    co2e_kg: float


@dataclass(frozen=True)
class PaymentPayload:
    """Payment reference plus the string encoded into the payment QR code."""

    amount: float
    reference: str
    currency: str
    qr_string: str
