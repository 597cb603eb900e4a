from collections.abc import Mapping
from dataclasses import dataclass, field

from docscore.scoring.models import (
    ApprovalDecision,
    ClassificationResult,
    EsgAssessment,
    FraudAssessment,
    PaymentPayload,
    VatAssessment,
    read_only,
)


@dataclass(frozen=True)
class PipelineResult:
    """Full assessment of one document.

    Carries the extracted fields through unchanged alongside every stage
    output, all computed from the same DocumentInput.
    """

    vendor_name: str
    invoice_number: str
    invoice_date: str
    total_amount: float
    tax_amount: float
    currency: str
    document_class: ClassificationResult
    direction: ClassificationResult
    vat: VatAssessment
    fraud: FraudAssessment
    approval: ApprovalDecision
    esg: EsgAssessment
    payment: PaymentPayload
    jurisdiction: str = "EU"
    field_confidence: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_confidence", read_only(self.field_confidence))


@dataclass(frozen=True)
class ProcessingFailure:
    """Outcome of a run that could not produce a PipelineResult."""

    detail: str
