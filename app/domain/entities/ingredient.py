from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IngredientRecord:
    key: str
    name: str
    category: str
    max_concentration: float  # percent, informational only
    benefits: tuple[str, ...] = ()
    incompatible_with: tuple[str, ...] = ()
    compatible_with: tuple[str, ...] = ()  # not consulted by the matcher
