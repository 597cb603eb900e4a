from typing import Any

from docscore.processor.models import PipelineResult, ProcessingFailure
from docscore.scoring.models import ComplianceIssue

FAILURE_ERROR = "Processing failed"


class ResultSerializer:
    """Converts pipeline outcomes to flat JSON-serializable dicts."""

    def serialize(self, outcome: PipelineResult | ProcessingFailure) -> dict[str, Any]:
        if isinstance(outcome, ProcessingFailure):
            return self.serialize_failure(outcome)
        return self.serialize_result(outcome)

    def serialize_result(self, result: PipelineResult) -> dict[str, Any]:
        """Flatten a PipelineResult into the response record.

        ``needs_info_fields`` is emitted sorted so identical results
        always serialize identically.
        """
        return {
            "vendor_name": result.vendor_name,
            "invoice_number": result.invoice_number,
            "invoice_date": result.invoice_date,
            "total_amount": result.total_amount,
            "tax_amount": result.tax_amount,
            "currency": result.currency,
            "doc_class": result.document_class.label,
            "doc_class_confidence": result.document_class.confidence,
            "direction": result.direction.label,
            "direction_confidence": result.direction.confidence,
            "field_confidence": dict(result.field_confidence),
            "jurisdiction": result.jurisdiction,
            "vat_rate": result.vat.vat_rate,
            "vat_amount_computed": result.vat.vat_amount_computed,
            "compliance_issues": [self._issue_to_dict(i) for i in result.vat.issues],
            "fraud_score": result.fraud.score,
            "anomaly_flags": dict(result.fraud.flags),
            "approval": result.approval.verdict,
            "approval_confidence": result.approval.confidence,
            "approval_reasons": list(result.approval.reasons),
            "needs_info_fields": sorted(result.approval.needs_info_fields),
            "esg_category": result.esg.category,
            "co2e_estimate": result.esg.co2e_kg,
            "payment_payload": {
                "amount": result.payment.amount,
                "reference": result.payment.reference,
                "currency": result.payment.currency,
            },
            "payment_qr_string": result.payment.qr_string,
        }

    def serialize_failure(self, failure: ProcessingFailure) -> dict[str, str]:
        return {"error": FAILURE_ERROR, "details": failure.detail}

    def _issue_to_dict(self, issue: ComplianceIssue) -> dict[str, str]:
        return {"severity": issue.severity, "message": issue.message}
