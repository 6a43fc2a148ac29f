from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

GRAMS_PER_KILOGRAM = 1000


@dataclass(frozen=True, slots=True, order=True)
class Weight:
    # Weight is stored in whole grams to avoid float drift in limit checks.
    grams: int

    def __post_init__(self) -> None:
        if isinstance(self.grams, bool) or not isinstance(self.grams, int):
            raise ValueError("Weight must be an integer number of grams")
        if self.grams < 0:
            raise ValueError("Weight cannot be negative")

    @classmethod
    def from_grams(cls, grams: int) -> Weight:
        return cls(grams=grams)

    @classmethod
    def from_kilograms(cls, kilograms: Decimal | int | str) -> Weight:
        # Kilograms are rounded half-up to the nearest gram.
        try:
            value = Decimal(kilograms)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid weight: {kilograms!r}") from exc
        if not value.is_finite():
            raise ValueError(f"Invalid weight: {kilograms!r}")
        grams = (value * GRAMS_PER_KILOGRAM).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return cls(grams=int(grams))

    @classmethod
    def zero(cls) -> Weight:
        return cls(grams=0)

    @property
    def kilograms(self) -> Decimal:
        return Decimal(self.grams) / GRAMS_PER_KILOGRAM

    def ceiling_kilograms(self) -> int:
        return -(-self.grams // GRAMS_PER_KILOGRAM)

    def excess_kilograms_above(self, limit: Weight) -> int:
        """Count the started kilograms above ``limit``; any fraction counts as a whole one."""
        if self.grams <= limit.grams:
            return 0
        excess = self.grams - limit.grams
        return -(-excess // GRAMS_PER_KILOGRAM)

    def is_greater_than(self, other: Weight) -> bool:
        return self.grams > other.grams

    def is_less_than_or_equal(self, other: Weight) -> bool:
        return self.grams <= other.grams

    def add(self, other: Weight) -> Weight:
        return Weight(self.grams + other.grams)

    def multiply(self, times: int) -> Weight:
        return Weight(self.grams * times)

    def format(self) -> str:
        if self.grams >= GRAMS_PER_KILOGRAM:
            return f"{self.kilograms.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)} kg"
        return f"{self.grams} g"

    def __str__(self) -> str:
        return self.format()
