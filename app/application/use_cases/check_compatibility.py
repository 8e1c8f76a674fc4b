from __future__ import annotations

from dataclasses import dataclass

from app.application.ports.ingredient_catalog import IngredientCatalogPort
from app.domain.entities.ingredient import IngredientRecord


@dataclass(frozen=True)
class IncompatiblePair:
    first: IngredientRecord
    second: IngredientRecord

    @property
    def label(self) -> str:
        return f"{self.first.name} + {self.second.name}"


@dataclass(frozen=True)
class CompatibilityResult:
    found: list[IngredientRecord]
    not_found: list[str]
    incompatibilities: list[IncompatiblePair]


class CompatibilityMatcher:
    def __init__(self, catalog: IngredientCatalogPort) -> None:
        self._catalog = catalog

    def match(self, text: str) -> CompatibilityResult:
        """
        Resolve one ingredient per input line and report conflicting pairs.

        Each line resolves to the first catalog record (definition order) whose
        lowercased name or key contains it. Pairs are checked per ordered pair,
        looking only at the first record's incompatible_with tags against the
        second record's name, so a conflict listed on both sides is reported twice.
        """
        tokens = [line.strip() for line in text.lower().split("\n")]

        found: list[IngredientRecord] = []
        not_found: list[str] = []
        for token in tokens:
            record = self._resolve(token)
            if record is None:
                not_found.append(token)
            else:
                found.append(record)

        incompatibilities: list[IncompatiblePair] = []
        for first in found:
            for second in found:
                if first is second:
                    continue
                if _conflicts(first, second):
                    incompatibilities.append(IncompatiblePair(first=first, second=second))

        return CompatibilityResult(found=found, not_found=not_found, incompatibilities=incompatibilities)

    def _resolve(self, token: str) -> IngredientRecord | None:
        if not token:
            return None
        for record in self._catalog.all():
            if token in record.name.lower() or token in record.key:
                return record
        return None


def _conflicts(first: IngredientRecord, second: IngredientRecord) -> bool:
    # Tags compare against the display name only, never the key.
    second_name = second.name.lower()
    return any(tag.replace("_", " ") in second_name for tag in first.incompatible_with)
