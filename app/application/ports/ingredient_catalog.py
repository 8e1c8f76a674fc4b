from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.ingredient import IngredientRecord


class IngredientCatalogPort(ABC):
    @abstractmethod
    def all(self) -> list[IngredientRecord]:
        """All records in definition order."""
        raise NotImplementedError

    @abstractmethod
    def display_names(self) -> list[str]:
        raise NotImplementedError
