from docscore.logging.logger import Log
from docscore.processor.pipeline import PipelineContext, PipelineStep
from docscore.scoring import (
    build_payment_payload,
    classify_direction,
    classify_document,
    decide_approval,
    evaluate_vat,
    map_esg,
    score_fraud,
)


class ClassifyDocumentStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.document_class = classify_document(context.document.text)
        Log.debug(
            f"Document class {context.document_class.label} "
            f"({context.document_class.confidence})"
        )
        return context


class ClassifyDirectionStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.direction = classify_direction(context.document.text)
        Log.debug(f"Direction {context.direction.label} ({context.direction.confidence})")
        return context


class EvaluateVatStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        context.vat = evaluate_vat(document.total_amount, document.tax_amount)
        Log.debug(
            f"VAT rate {context.vat.vat_rate}: {len(context.vat.issues)} compliance issues"
        )
        return context


class ScoreFraudStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.fraud = score_fraud(context.document.total_amount)
        Log.debug(f"Fraud score {context.fraud.score}")
        return context


class DecideApprovalStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if context.vat is None:
            raise ValueError("PipelineContext.vat must be set before approval")
        if context.fraud is None:
            raise ValueError("PipelineContext.fraud must be set before approval")
        context.approval = decide_approval(context.fraud.score, context.vat.issues)
        Log.debug(f"Approval {context.approval.verdict}")
        return context


class MapEsgStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.esg = map_esg(context.document.vendor_name)
        return context


class BuildPaymentStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        document = context.document
        context.payment = build_payment_payload(
            document.total_amount,
            document.invoice_number,
        )
        return context


def default_steps() -> list[PipelineStep]:
    """Stage order used in production; approval follows VAT and fraud."""
    return [
        ClassifyDocumentStep(),
        ClassifyDirectionStep(),
        EvaluateVatStep(),
        ScoreFraudStep(),
        DecideApprovalStep(),
        MapEsgStep(),
        BuildPaymentStep(),
    ]
