import pytest

from docscore.config.settings import Settings
from docscore.extraction.base import BaseFieldExtractor
from docscore.extraction.example_extractor import ExampleFieldExtractor
from docscore.extraction.factory import FieldExtractorFactory


class TestExampleFieldExtractor:
    def test_returns_demo_invoice(self) -> None:
        fields = ExampleFieldExtractor().extract("any text", filename="a.pdf")
        assert fields.vendor_name == "Demo Vendor GmbH"
        assert fields.invoice_number == "INV-2026-001"
        assert fields.invoice_date == "2026-02-01"
        assert fields.total_amount == 1200
        assert fields.tax_amount == 228
        assert fields.currency == "EUR"

    def test_field_confidence(self) -> None:
        fields = ExampleFieldExtractor().extract("", filename="unknown.pdf")
        assert fields.field_confidence == {
            "vendor_name": 0.9,
            "invoice_number": 0.85,
            "invoice_date": 0.95,
            "total_amount": 0.8,
            "tax_amount": 0.75,
        }

    def test_ignores_input(self) -> None:
        extractor = ExampleFieldExtractor()
        assert extractor.extract("a", filename="x.pdf") == extractor.extract(
            "b", filename="y.pdf"
        )

    def test_field_confidence_is_read_only(self) -> None:
        fields = ExampleFieldExtractor().extract("", filename="a.pdf")
        with pytest.raises(TypeError):
            fields.field_confidence["vendor_name"] = 0.0  # type: ignore[index]
        assert ExampleFieldExtractor.DEFAULT_FIELD_CONFIDENCE["vendor_name"] == 0.9


class TestFieldExtractorFactory:
    def test_creates_example_extractor(self) -> None:
        extractor = FieldExtractorFactory.create(Settings(field_extractor="example"))
        assert isinstance(extractor, BaseFieldExtractor)
        assert isinstance(extractor, ExampleFieldExtractor)

    def test_name_is_case_insensitive(self) -> None:
        extractor = FieldExtractorFactory.create(Settings(field_extractor="EXAMPLE"))
        assert isinstance(extractor, ExampleFieldExtractor)

    def test_unknown_extractor_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="Unknown field extractor"):
            FieldExtractorFactory.create(Settings(field_extractor="nope"))
