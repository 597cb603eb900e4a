import re
from decimal import Decimal

from docscore.scoring.models import PaymentPayload

PAYMENT_CURRENCY = "EUR"

# Positional notation is used inside this magnitude range, exponent form outside.
_POSITIONAL_MIN = 1e-6
_POSITIONAL_MAX = 1e21
_EXPONENT_PADDING = re.compile(r"e([+-])0*(\d)")


def format_amount(amount: float) -> str:
    """Render an amount in plain numeric form: no symbol, no separators.

    Integral values drop their fractional part, so 1200.0 renders as 1200,
    and small fractions stay positional (0.00001, not 1e-05). Magnitudes of
    1e21 and above, or below 1e-6, use the short exponent form (1e+21).
    """
    magnitude = abs(amount)
    if amount == 0 or _POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX:
        return format(Decimal(repr(amount)).normalize(), "f")
    return _EXPONENT_PADDING.sub(r"e\1\2", repr(float(amount)))


def build_payment_payload(amount: float, invoice_number: str) -> PaymentPayload:
    """Build the payment reference and its QR string.

    Neither the amount sign nor the invoice number shape is validated.
    """
    qr_string = f"PAYMENT|AMOUNT:{format_amount(amount)}|REF:{invoice_number}"
    return PaymentPayload(
        amount=amount,
        reference=invoice_number,
        currency=PAYMENT_CURRENCY,
        qr_string=qr_string,
    )
