from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ConversationStep(str, Enum):
    IDLE = "idle"
    SELECT_PRODUCT_TYPE = "select_product_type"
    COMPATIBILITY_INPUT = "compatibility_input"


@dataclass
class Formulation:
    product_type: str | None = None


@dataclass
class Session:
    user_id: str
    current_step: ConversationStep = ConversationStep.IDLE
    formulation: Formulation = field(default_factory=Formulation)
    selected_ingredients: list[str] = field(default_factory=list)  # never populated
