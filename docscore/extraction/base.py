from abc import ABC, abstractmethod

from docscore.extraction.models import ExtractedFields


class BaseFieldExtractor(ABC):
    """Contract for all field extraction adapters."""

    @abstractmethod
    def extract(self, text: str, filename: str) -> ExtractedFields:
        """Pull invoice fields out of extracted document text.

        Args:
            text: Plain text of the document, possibly empty.
            filename: Original file name, for adapters that key on it.

        Returns:
            ExtractedFields with totals, identifiers and per-field confidence.
        """
