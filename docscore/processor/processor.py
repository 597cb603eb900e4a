from typing import TypeVar

from docscore.config.settings import Settings
from docscore.logging.logger import Log
from docscore.processor.exceptions import ProcessingFailed
from docscore.processor.models import PipelineResult
from docscore.processor.pipeline import PipelineContext, PipelineStep
from docscore.processor.steps import default_steps
from docscore.scoring.models import DocumentInput

T = TypeVar("T")


def _require(value: T | None, name: str) -> T:
    if value is None:
        raise ValueError(f"PipelineContext.{name} was not set by any step")
    return value


class Processor:
    """Runs the scoring steps over one document and assembles the result.

    Pipeline: classify -> direction -> VAT -> fraud -> approval -> ESG -> payment.
    The processor keeps no per-run state, so one instance can serve any
    number of documents.
    """

    def __init__(self, steps: list[PipelineStep], jurisdiction: str = "EU") -> None:
        self._steps = steps
        self._jurisdiction = jurisdiction

    def process(self, document: DocumentInput) -> PipelineResult:
        """Score a document.

        Raises:
            ProcessingFailed: if any step or the result assembly fails.
                Nothing partial is returned in that case.
        """
        try:
            Log.info(f"Scoring document {document.invoice_number}")
            context = PipelineContext(document=document)
            for step in self._steps:
                context = step.run(context)
            result = self._assemble(context)
        except Exception as exc:
            Log.error(f"Scoring failed: {exc}")
            raise ProcessingFailed(str(exc)) from exc

        Log.info(
            f"Scored document {document.invoice_number}: {result.approval.verdict} "
            f"(fraud {result.fraud.score}, {len(result.vat.issues)} issues)"
        )
        return result

    def _assemble(self, context: PipelineContext) -> PipelineResult:
        document = context.document
        return PipelineResult(
            vendor_name=document.vendor_name,
            invoice_number=document.invoice_number,
            invoice_date=document.invoice_date,
            total_amount=document.total_amount,
            tax_amount=document.tax_amount,
            currency=document.currency,
            document_class=_require(context.document_class, "document_class"),
            direction=_require(context.direction, "direction"),
            vat=_require(context.vat, "vat"),
            fraud=_require(context.fraud, "fraud"),
            approval=_require(context.approval, "approval"),
            esg=_require(context.esg, "esg"),
            payment=_require(context.payment, "payment"),
            jurisdiction=self._jurisdiction,
            field_confidence=dict(document.field_confidence),
        )


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with the default step list."""
    return Processor(steps=default_steps(), jurisdiction=settings.jurisdiction)
