from abc import ABC, abstractmethod
from dataclasses import dataclass

from docscore.scoring.models import (
    ApprovalDecision,
    ClassificationResult,
    DocumentInput,
    EsgAssessment,
    FraudAssessment,
    PaymentPayload,
    VatAssessment,
)


@dataclass(slots=True)
class PipelineContext:
    """Per-run scratch space; one instance per processed document."""

    document: DocumentInput
    document_class: ClassificationResult | None = None
    direction: ClassificationResult | None = None
    vat: VatAssessment | None = None
    fraud: FraudAssessment | None = None
    approval: ApprovalDecision | None = None
    esg: EsgAssessment | None = None
    payment: PaymentPayload | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
