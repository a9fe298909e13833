"""
UserId Value Object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: str  # user._id as established by the calling layer

    def __post_init__(self):
        if not self.value:
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
