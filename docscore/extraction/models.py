from collections.abc import Mapping
from dataclasses import dataclass, field

from docscore.scoring.models import read_only


@dataclass(frozen=True)
class ExtractedFields:
    """Structured fields pulled out of a document's text."""

    vendor_name: str
    invoice_number: str
    invoice_date: str
    total_amount: float
    tax_amount: float
    currency: str
    field_confidence: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "field_confidence", read_only(self.field_confidence))
