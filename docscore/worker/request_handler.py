from collections.abc import Mapping

from docscore.config.settings import Settings
from docscore.extraction.base import BaseFieldExtractor
from docscore.extraction.factory import FieldExtractorFactory
from docscore.logging.logger import Log
from docscore.processor.exceptions import ProcessingFailed
from docscore.processor.models import PipelineResult, ProcessingFailure
from docscore.processor.processor import Processor, build_processor
from docscore.scoring.models import DocumentInput


class RequestHandler:
    """Turn one parsed request body into exactly one pipeline outcome."""

    DEFAULT_FILENAME = "unknown.pdf"

    def __init__(self, processor: Processor, field_extractor: BaseFieldExtractor) -> None:
        self._processor = processor
        self._field_extractor = field_extractor

    def handle(self, request: Mapping[str, object]) -> PipelineResult | ProcessingFailure:
        """Score the document described by a request body.

        Missing or non-string ``text`` becomes an empty string and a missing
        ``filename`` becomes ``unknown.pdf``. Failures come back as a
        ProcessingFailure instead of being raised.
        """
        text = self._string_field(request, "text", "")
        filename = self._string_field(request, "filename", self.DEFAULT_FILENAME)
        Log.info(f"Handling {filename} ({len(text)} chars of text)")
        try:
            document = self._build_input(text, filename)
            return self._processor.process(document)
        except ProcessingFailed as exc:
            return ProcessingFailure(detail=exc.detail)
        except Exception as exc:
            Log.exception(f"Request for {filename} failed before scoring: {exc}")
            return ProcessingFailure(detail=str(exc))

    def _build_input(self, text: str, filename: str) -> DocumentInput:
        fields = self._field_extractor.extract(text, filename=filename)
        return DocumentInput(
            text=text,
            vendor_name=fields.vendor_name,
            invoice_number=fields.invoice_number,
            invoice_date=fields.invoice_date,
            total_amount=fields.total_amount,
            tax_amount=fields.tax_amount,
            currency=fields.currency,
            field_confidence=dict(fields.field_confidence),
        )

    @staticmethod
    def _string_field(request: Mapping[str, object], key: str, default: str) -> str:
        value = request.get(key)
        if isinstance(value, str) and value:
            return value
        return default


def build_request_handler(settings: Settings) -> RequestHandler:
    """Build a RequestHandler with the configured extractor and processor."""
    return RequestHandler(
        processor=build_processor(settings),
        field_extractor=FieldExtractorFactory.create(settings),
    )
