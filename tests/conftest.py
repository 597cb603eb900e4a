import pytest

from docscore.scoring.models import DocumentInput


@pytest.fixture()
def demo_document() -> DocumentInput:
    """The demo invoice the example extractor produces, with invoice wording."""
    return DocumentInput(
        text="INVOICE #123\nVAT 19%",
        vendor_name="Demo Vendor GmbH",
        invoice_number="INV-2026-001",
        invoice_date="2026-02-01",
        total_amount=1200,
        tax_amount=228,
        currency="EUR",
        field_confidence={"vendor_name": 0.9, "total_amount": 0.8},
    )
