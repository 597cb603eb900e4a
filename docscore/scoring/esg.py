from docscore.scoring.models import EsgAssessment
from docscore.scoring.rules import Rule, contains_any, first_match

_ESG_RULES: tuple[Rule[EsgAssessment], ...] = (
    (contains_any("energy"), EsgAssessment(category="High Emissions", co2e_kg=120)),
)
_GENERAL = EsgAssessment(category="General", co2e_kg=25)


def map_esg(vendor_name: str) -> EsgAssessment:
    """Map a vendor name to an ESG emissions category and CO2e estimate in kg."""
    return first_match(vendor_name.lower(), _ESG_RULES, _GENERAL)
