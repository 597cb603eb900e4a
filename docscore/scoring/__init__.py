from docscore.scoring.approval import decide_approval
from docscore.scoring.classifiers import classify_direction, classify_document
from docscore.scoring.esg import map_esg
from docscore.scoring.fraud import score_fraud
from docscore.scoring.payment import build_payment_payload
from docscore.scoring.vat import evaluate_vat

__all__ = [
    "build_payment_payload",
    "classify_direction",
    "classify_document",
    "decide_approval",
    "evaluate_vat",
    "map_esg",
    "score_fraud",
]
