"""Cost formatting for payment amounts."""

from decimal import ROUND_HALF_UP, Decimal

# ISO 4217 minor units where they differ from 2
CURRENCY_MINOR_UNITS: dict[str, int] = {
    "BHD": 3,
    "BIF": 0,
    "CLP": 0,
    "IQD": 3,
    "ISK": 0,
    "JOD": 3,
    "JPY": 0,
    "KRW": 0,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "PYG": 0,
    "TND": 3,
    "UGX": 0,
    "VND": 0,
    "XAF": 0,
    "XOF": 0,
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "AUD": "A$",
    "CAD": "CA$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "KRW": "₩",
    "USD": "$",
    "VND": "₫",
}


def get_minor_units(currency: str) -> int:
    return CURRENCY_MINOR_UNITS.get(currency.upper(), 2)


def get_rounded_cost(amount, currency: str) -> Decimal:
    """Round to the currency's minor units, half-up.

    Raises decimal.InvalidOperation for amounts that are not numbers.
    """
    digits = get_minor_units(currency)
    return Decimal(str(amount)).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def get_cost_as_string(amount, currency: str) -> str:
    """Human-readable cost, e.g. `$1,234.50` or `RUB 1,000.00`."""
    code = currency.upper()
    cost = get_rounded_cost(amount, code)
    formatted = f"{cost:,.{get_minor_units(code)}f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{code} {formatted}"
    if cost < 0:
        return f"-{symbol}{formatted[1:]}"
    return f"{symbol}{formatted}"
