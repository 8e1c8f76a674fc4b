"""
Tests for the in-memory session store.
"""

from __future__ import annotations

from app.domain.entities.session import ConversationStep
from app.infrastructure.store.memory_store import MemorySessionStore


def test_first_contact_creates_idle_session():
    store = MemorySessionStore()
    session = store.get_or_create("42")

    assert session.user_id == "42"
    assert session.current_step is ConversationStep.IDLE
    assert session.formulation.product_type is None
    assert session.selected_ingredients == []
    assert len(store) == 1


def test_same_user_gets_same_instance():
    """Mutations persist between lookups."""
    store = MemorySessionStore()
    first = store.get_or_create("42")
    first.current_step = ConversationStep.COMPATIBILITY_INPUT
    first.formulation.product_type = "serum"

    second = store.get_or_create("42")

    assert second is first
    assert second.current_step is ConversationStep.COMPATIBILITY_INPUT
    assert second.formulation.product_type == "serum"


def test_users_are_isolated():
    store = MemorySessionStore()
    store.get_or_create("1").current_step = ConversationStep.SELECT_PRODUCT_TYPE

    assert store.get_or_create("2").current_step is ConversationStep.IDLE
    assert len(store) == 2
