"""Domain constants for money handling."""

from decimal import Decimal

CENT = Decimal("0.01")
MONEY_TOLERANCE = Decimal("0.01")
ZERO = Decimal("0.00")
HUNDRED = Decimal("100")

DEFAULT_CURRENCY = "USD"

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "INR": "₹",
    "CNY": "CN¥",
    "KRW": "₩",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "MXN": "MX$",
    "BRL": "R$",
    "ILS": "₪",
    "VND": "₫",
}


__all__ = [
    "CENT",
    "MONEY_TOLERANCE",
    "ZERO",
    "HUNDRED",
    "DEFAULT_CURRENCY",
    "CURRENCY_SYMBOLS",
]
