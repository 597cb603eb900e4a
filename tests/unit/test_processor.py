from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from docscore.config.settings import Settings
from docscore.processor.exceptions import ProcessingFailed, ProcessorError
from docscore.processor.pipeline import PipelineContext, PipelineStep
from docscore.processor.processor import Processor, build_processor
from docscore.processor.steps import default_steps
from docscore.scoring.models import DocumentInput


def _passthrough_step() -> MagicMock:
    step = MagicMock(spec=PipelineStep)
    step.run.side_effect = lambda context: context
    return step


class TestProcessorPipeline:
    def test_assembles_result_from_all_steps(self, demo_document: DocumentInput) -> None:
        processor = Processor(steps=default_steps(), jurisdiction="EU")

        result = processor.process(demo_document)

        assert result.vendor_name == "Demo Vendor GmbH"
        assert result.invoice_number == "INV-2026-001"
        assert result.invoice_date == "2026-02-01"
        assert result.total_amount == 1200
        assert result.tax_amount == 228
        assert result.currency == "EUR"
        assert result.document_class.label == "invoice"
        assert result.direction.label == "unknown"
        assert result.vat.vat_rate == 0.19
        assert result.fraud.score == 0
        assert result.approval.verdict == "PASS"
        assert result.esg.category == "General"
        assert result.payment.reference == "INV-2026-001"
        assert result.jurisdiction == "EU"
        assert result.field_confidence == {"vendor_name": 0.9, "total_amount": 0.8}

    def test_runs_steps_in_order_on_one_context(self, demo_document: DocumentInput) -> None:
        call_order: list[str] = []
        contexts: list[PipelineContext] = []

        def recording(name: str, real: PipelineStep) -> MagicMock:
            step = MagicMock(spec=PipelineStep)

            def run(context: PipelineContext) -> PipelineContext:
                call_order.append(name)
                contexts.append(context)
                return real.run(context)

            step.run.side_effect = run
            return step

        steps = [recording(type(s).__name__, s) for s in default_steps()]

        Processor(steps=steps).process(demo_document)

        assert call_order == [type(s).__name__ for s in default_steps()]
        assert all(c is contexts[0] for c in contexts)

    def test_verdicts_are_results_not_failures(self, demo_document: DocumentInput) -> None:
        processor = Processor(steps=default_steps())

        result = processor.process(replace(demo_document, total_amount=60000))

        assert result.approval.verdict == "FAIL"

    def test_uses_configured_jurisdiction(self, demo_document: DocumentInput) -> None:
        processor = build_processor(Settings(jurisdiction="UK"))
        assert processor.process(demo_document).jurisdiction == "UK"


class TestProcessorFailures:
    def test_wraps_step_error(self, demo_document: DocumentInput) -> None:
        broken = MagicMock(spec=PipelineStep)
        broken.run.side_effect = RuntimeError("boom")
        processor = Processor(steps=[_passthrough_step(), broken, _passthrough_step()])

        with pytest.raises(ProcessingFailed, match="boom") as exc_info:
            processor.process(demo_document)

        assert exc_info.value.detail == "boom"
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert isinstance(exc_info.value, ProcessorError)

    def test_stops_at_failing_step(self, demo_document: DocumentInput) -> None:
        broken = MagicMock(spec=PipelineStep)
        broken.run.side_effect = RuntimeError("boom")
        after = _passthrough_step()

        with pytest.raises(ProcessingFailed):
            Processor(steps=[broken, after]).process(demo_document)

        after.run.assert_not_called()

    def test_malformed_amount_fails(self, demo_document: DocumentInput) -> None:
        document = replace(demo_document, total_amount=None)  # type: ignore[arg-type]

        with pytest.raises(ProcessingFailed):
            Processor(steps=default_steps()).process(document)

    def test_missing_document_fails(self) -> None:
        with pytest.raises(ProcessingFailed):
            Processor(steps=default_steps()).process(None)  # type: ignore[arg-type]

    def test_incomplete_pipeline_fails(self, demo_document: DocumentInput) -> None:
        processor = Processor(steps=default_steps()[:3])

        with pytest.raises(ProcessingFailed, match="fraud"):
            processor.process(demo_document)
