"""Tests for categories, flavors, sizes and confectioners."""

import pytest
from protean.exceptions import ValidationError
from storefront.reference.category import Category
from storefront.reference.confectioner import Confectioner
from storefront.reference.events import CategoryRegistered, CategoryRetired, SizeRegistered
from storefront.reference.flavor import Flavor
from storefront.reference.size import Size


class TestRegistration:
    def test_category_defaults(self):
        category = Category.register(account_id=1, name="Birthday")
        assert category.description == ""
        assert category.deleted is False
        assert category.created_at is not None

    def test_category_raises_registered_event(self):
        category = Category.register(account_id=1, name="Birthday")
        events = [e for e in category._events if isinstance(e, CategoryRegistered)]
        assert len(events) == 1
        assert events[0].name == "Birthday"
        assert events[0].account_id == 1

    def test_size_keeps_price_modifier(self):
        size = Size.register(account_id=1, name="Large", price_modifier=50.0)
        assert size.price_modifier == 50.0
        event = next(e for e in size._events if isinstance(e, SizeRegistered))
        assert event.price_modifier == 50.0

    def test_size_modifier_defaults_to_zero(self):
        assert Size.register(account_id=1, name="Small").price_modifier == 0.0

    def test_confectioner_rating_bounds(self):
        with pytest.raises(ValidationError):
            Confectioner.register(account_id=1, name="Ana", average_rating=5.5)

    def test_account_is_required(self):
        with pytest.raises(ValidationError):
            Flavor.register(account_id=None, name="Lemon")


class TestRetirement:
    def test_retire_marks_deleted(self):
        category = Category.register(account_id=1, name="Birthday")
        category.retire()
        assert category.deleted is True
        assert any(isinstance(e, CategoryRetired) for e in category._events)

    def test_retiring_twice_is_rejected(self):
        flavor = Flavor.register(account_id=1, name="Lemon")
        flavor.retire()
        with pytest.raises(ValidationError) as exc_info:
            flavor.retire()
        assert "flavor" in exc_info.value.messages
