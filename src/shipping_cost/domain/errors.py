from __future__ import annotations


class MoneyParseError(ValueError):
    # Raised when a textual amount does not match the accepted formats.
    def __init__(self, raw: object) -> None:
        super().__init__(f"Invalid amount format: {raw!r}")
        self.raw = raw


class CurrencyMismatchError(ValueError):
    # Money arithmetic never coerces between currencies.
    def __init__(self, left: str, right: str) -> None:
        super().__init__(f"Cannot operate on different currencies: {left} and {right}")
        self.left = left
        self.right = right
