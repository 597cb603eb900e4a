"""Keyword classifiers for document type and document direction."""

from docscore.scoring.models import ClassificationResult
from docscore.scoring.rules import Rule, contains_any, first_match

_DOCUMENT_RULES: tuple[Rule[ClassificationResult], ...] = (
    (contains_any("prescription", "doctor"), ClassificationResult("prescription", 0.9)),
    (contains_any("sick note", "medical leave"), ClassificationResult("sick_note", 0.9)),
    (contains_any("receipt", "paid"), ClassificationResult("receipt", 0.85)),
    (contains_any("offer", "quotation"), ClassificationResult("offer", 0.8)),
    (contains_any("invoice", "vat"), ClassificationResult("invoice", 0.95)),
)
_DOCUMENT_FALLBACK = ClassificationResult("other", 0.5)

_DIRECTION_RULES: tuple[Rule[ClassificationResult], ...] = (
    (contains_any("bill to", "customer"), ClassificationResult("outgoing", 0.75)),
    (contains_any("supplier", "payable"), ClassificationResult("incoming", 0.75)),
)
_DIRECTION_FALLBACK = ClassificationResult("unknown", 0.4)


def classify_document(text: str) -> ClassificationResult:
    """Infer the document type from its text.

    Keyword groups are checked in priority order and the first hit wins,
    so a prescription that mentions an invoice is still a prescription.
    """
    return first_match(text.lower(), _DOCUMENT_RULES, _DOCUMENT_FALLBACK)


def classify_direction(text: str) -> ClassificationResult:
    """Infer whether the document is incoming (payable) or outgoing (billed)."""
    return first_match(text.lower(), _DIRECTION_RULES, _DIRECTION_FALLBACK)
