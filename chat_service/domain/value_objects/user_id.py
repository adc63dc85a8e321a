"""
UserId Value Object - store-assigned integer identity of a user.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"UserId must be an integer, got {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"UserId must be positive, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)
