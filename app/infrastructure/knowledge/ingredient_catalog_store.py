from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from app.application.ports.ingredient_catalog import IngredientCatalogPort
from app.domain.entities.ingredient import IngredientRecord
from app.infrastructure.knowledge.ingredient_catalog_data import INGREDIENT_CATALOG


class IngredientCatalogStore(IngredientCatalogPort):
    def __init__(self, catalog: Mapping[str, IngredientRecord] | None = None) -> None:
        self._catalog = MappingProxyType(dict(INGREDIENT_CATALOG if catalog is None else catalog))

    def all(self) -> list[IngredientRecord]:
        return list(self._catalog.values())

    def display_names(self) -> list[str]:
        return [record.name for record in self._catalog.values()]
