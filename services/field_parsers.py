"""
Field Parsers - input handling for the quantity and price fields.

The shopping list lets users edit quantity and price in place. Each field
keeps the raw text the user typed separately from the value stored on the
entry, so half-typed input ("12.", "") never reaches the store:

- on_input(text): called with the current text; returns a Commit when the
  text is a complete, valid value that should be saved
- on_blur(): called when the field loses focus; returns a Commit when the
  stored value must be reset or cleared

The add-to-list form uses the one-shot parse_*_input helpers instead.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

from services.errors import InvalidInputError

_DIGITS = re.compile(r"\d+")
_PRICE_CHARS = re.compile(r"[\d.,]*")

DEFAULT_QUANTITY = 1


@dataclass(frozen=True)
class Commit:
    """A value the field wants written to the entry (None clears a price)."""
    value: Union[int, float, None]


def _parse_price(text: str) -> Optional[float]:
    """Parse a price with ',' or '.' as decimal separator; None if invalid."""
    normalized = text.strip().replace(",", ".", 1)
    try:
        value = float(normalized)
    except ValueError:
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


def format_price(value: Optional[float]) -> str:
    """Text shown in a price field: '' for no price, no trailing zeros."""
    if value is None:
        return ""
    text = format(value, "f").rstrip("0").rstrip(".")
    return text or "0"


class QuantityField:
    """Live-typing state for an entry's quantity."""

    def __init__(self, committed: int):
        self.committed = committed
        self.text = str(committed)

    def on_input(self, text: str) -> Optional[Commit]:
        """Commit only whole numbers >= 1; anything else is held."""
        self.text = text
        if _DIGITS.fullmatch(text):
            value = int(text)
            if value >= 1:
                self.committed = value
                self.text = str(value)
                return Commit(value)
        return None

    def on_blur(self) -> Optional[Commit]:
        """Reset to 1 if the field is left empty or invalid."""
        if _DIGITS.fullmatch(self.text) and int(self.text) >= 1:
            return None

        self.text = str(DEFAULT_QUANTITY)
        self.committed = DEFAULT_QUANTITY
        return Commit(DEFAULT_QUANTITY)


class PriceField:
    """Live-typing state for an entry's unit price."""

    def __init__(self, committed: Optional[float]):
        self.committed = committed
        self.text = format_price(committed)

    def on_input(self, text: str) -> Optional[Commit]:
        """
        Commit a complete price, or clear it when the field is emptied.

        Text with characters other than digits, '.' and ',' is ignored.
        A trailing separator ("12.") means the user is still typing.
        """
        self.text = text
        if text == "":
            self.committed = None
            return Commit(None)

        if not _PRICE_CHARS.fullmatch(text):
            return None
        if text.replace(",", ".", 1).endswith("."):
            return None

        value = _parse_price(text)
        if value is None:
            return None

        self.committed = value
        return Commit(value)

    def on_blur(self) -> Optional[Commit]:
        """
        Settle the field when focus leaves it.

        "12." becomes 12.0; empty, unparsable or negative text clears the
        price. Nothing is committed if the stored value already matches.
        """
        target = None
        if _PRICE_CHARS.fullmatch(self.text):
            target = _parse_price(self.text)

        self.text = format_price(target)
        if target == self.committed:
            return None

        self.committed = target
        return Commit(target)


def apply_text(field: Union[QuantityField, PriceField], text: str) -> Optional[Commit]:
    """
    Settle a field from the final text of a text input.

    Streamlit reports a text input only when it loses focus, so the text
    goes through on_input and then on_blur. Returns the resulting commit,
    or None when the value ends up equal to the one the field started with.
    """
    previous = field.committed
    typed = field.on_input(text)
    commit = field.on_blur() or typed
    if commit is None or commit.value == previous:
        return None
    return commit


def parse_quantity_input(text: str) -> int:
    """
    Parse the quantity typed in the add-to-list form.

    Blank means 1. Raises InvalidInputError for anything that is not a
    whole number of at least 1.
    """
    text = (text or "").strip()
    if not text:
        return DEFAULT_QUANTITY
    if not _DIGITS.fullmatch(text):
        raise InvalidInputError("Quantity must be a whole number")

    quantity = int(text)
    if quantity < 1:
        raise InvalidInputError("Quantity must be greater than zero")
    return quantity


def parse_price_input(text: str) -> Optional[float]:
    """
    Parse the unit price typed in the add-to-list form.

    Blank means no price. Accepts ',' as decimal separator.
    """
    text = (text or "").strip()
    if not text:
        return None

    normalized = text.replace(",", ".", 1)
    try:
        value = float(normalized)
    except ValueError:
        raise InvalidInputError("Price must be a number") from None
    if not math.isfinite(value):
        raise InvalidInputError("Price must be a number")
    if value < 0:
        raise InvalidInputError("Price cannot be negative")
    return value
