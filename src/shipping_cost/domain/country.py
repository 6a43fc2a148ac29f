from __future__ import annotations

import re
from dataclasses import dataclass, field

_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


@dataclass(frozen=True, slots=True)
class Country:
    # Identity is the two-letter code; name and active flag do not take part in equality.
    code: str
    name: str = field(compare=False)
    active: bool = field(default=True, compare=False)

    def __post_init__(self) -> None:
        if len(self.code) != 2:
            raise ValueError(f"Country code must be exactly 2 characters, got: {self.code}")
        if not _CODE_PATTERN.match(self.code):
            raise ValueError(f"Country code must contain only uppercase letters, got: {self.code}")
        if not self.name.strip():
            raise ValueError("Country name cannot be empty")

    @classmethod
    def create(cls, code: str, name: str, active: bool = True) -> Country:
        return cls(code=code.strip().upper(), name=name.strip(), active=active)

    def __str__(self) -> str:
        return self.code
