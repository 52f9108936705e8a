"""Product records and their CSV line form."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*"
    r"([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def format_price(price: float) -> str:
    """Render a price with six significant digits, as the CSV file stores it."""
    return f"{price:g}"


def _parse_price(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid price: {text!r}")
    return float(match.group(1))


@dataclass(frozen=True)
class Product:
    """A product in the store, identified by its code."""

    code: str
    name: str
    price: float

    def to_csv_line(self) -> str:
        """Return the product as one newline-terminated CSV line."""
        return f"{self.code},{self.name},{format_price(self.price)}\n"

    @classmethod
    def from_csv_line(cls, line: str) -> Product | None:
        """Parse a CSV line; return None when a field is missing.

        The price takes the rest of the line after the second comma and is
        read from its leading number. A price with no leading number raises
        ValueError.
        """
        line = line.removesuffix("\n")
        parts = line.split(",", 2)
        if len(parts) < 3 or not parts[2]:
            return None
        code, name, price_text = parts
        return cls(code, name, _parse_price(price_text))