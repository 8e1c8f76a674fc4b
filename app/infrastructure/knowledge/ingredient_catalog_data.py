from __future__ import annotations

from app.domain.entities.ingredient import IngredientRecord


INGREDIENT_CATALOG: dict[str, IngredientRecord] = {
    "retinol": IngredientRecord(
        key="retinol",
        name="Retinol",
        category="anti-aging",
        max_concentration=1.0,
        benefits=("reduces wrinkles", "improves texture", "increases cell turnover"),
        incompatible_with=("vitamin_c", "aha_acids"),
    ),
    "niacinamide": IngredientRecord(
        key="niacinamide",
        name="Niacinamide",
        category="multi-purpose",
        max_concentration=10.0,
        benefits=("controls oil", "minimizes pores", "brightening"),
        compatible_with=("most_ingredients",),
    ),
    "hyaluronic_acid": IngredientRecord(
        key="hyaluronic_acid",
        name="Hyaluronic Acid",
        category="hydrating",
        max_concentration=2.0,
        benefits=("intense hydration", "plumping effect", "suitable for all skin types"),
        compatible_with=("all_ingredients",),
    ),
    "vitamin_c": IngredientRecord(
        key="vitamin_c",
        name="Vitamin C (L-Ascorbic Acid)",
        category="antioxidant",
        max_concentration=20.0,
        benefits=("brightening", "antioxidant protection", "collagen synthesis"),
        incompatible_with=("retinol", "aha_acids"),
    ),
}
