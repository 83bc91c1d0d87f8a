"""Modelos tipados para la edad calculada y el registro persistido."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AgeResult:
    """One compute cycle output, already rounded to one decimal."""

    birthday: str
    dog_age: float
    human_age: float


@dataclass(frozen=True)
class StoredRecord:
    """Values read back from the key/value store (None means absent)."""

    birthday: str | None = None
    dog_age: float | None = None
    human_age: float | None = None

    @property
    def has_ages(self) -> bool:
        return self.dog_age is not None and self.human_age is not None
