"""Example field extractor.

Use this module as a reference when implementing real extraction adapters.
Implement BaseFieldExtractor and register the adapter in FieldExtractorFactory.
"""

from typing import ClassVar

from docscore.extraction.base import BaseFieldExtractor
from docscore.extraction.models import ExtractedFields


class ExampleFieldExtractor(BaseFieldExtractor):
    """Returns a fixed demo invoice regardless of input.

    No parsing and no I/O. Useful for local development and tests.
    """

    DEFAULT_FIELD_CONFIDENCE: ClassVar[dict[str, float]] = {
        "vendor_name": 0.9,
        "invoice_number": 0.85,
        "invoice_date": 0.95,
        "total_amount": 0.8,
        "tax_amount": 0.75,
    }

    def extract(self, text: str, filename: str) -> ExtractedFields:
        _ = text, filename
        return ExtractedFields(
            vendor_name="Demo Vendor GmbH",
            invoice_number="INV-2026-001",
            invoice_date="2026-02-01",
            total_amount=1200,
            tax_amount=228,
            currency="EUR",
            field_confidence=dict(self.DEFAULT_FIELD_CONFIDENCE),
        )
