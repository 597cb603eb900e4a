from docscore.extraction.base import BaseFieldExtractor
from docscore.extraction.factory import FieldExtractorFactory
from docscore.extraction.models import ExtractedFields

__all__ = ["BaseFieldExtractor", "ExtractedFields", "FieldExtractorFactory"]
