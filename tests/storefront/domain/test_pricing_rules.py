"""Tests for price arithmetic and the shared wire vocabularies."""

from storefront.shared.pricing import effective_price, line_total, unit_price
from storefront.shared.rules import Availability, RelationCriteria, SortOrder, parse_id_list


class TestEffectivePrice:
    def test_base_price_without_promotion(self):
        assert effective_price(100.0) == 100.0

    def test_promotion_replaces_base_price(self):
        assert effective_price(100.0, 79.9) == 79.9


class TestUnitPrice:
    def test_adds_size_modifier(self):
        assert unit_price(100.0, None, 25.0) == 125.0

    def test_modifier_applies_on_top_of_promotion(self):
        assert unit_price(100.0, 80.0, 25.0) == 105.0

    def test_missing_modifier_counts_as_zero(self):
        assert unit_price(50.0, None, None) == 50.0


class TestLineTotal:
    def test_multiplies_and_rounds(self):
        assert line_total(33.33, 3) == 99.99


class TestParseIdList:
    def test_none_means_no_filter(self):
        assert parse_id_list(None) is None

    def test_comma_separated(self):
        assert parse_id_list("a, b,,c ") == ["a", "b", "c"]

    def test_blank_string_is_no_filter(self):
        assert parse_id_list(" , ") is None

    def test_accepts_lists(self):
        assert parse_id_list(["x", " y "]) == ["x", "y"]


class TestVocabularies:
    def test_sort_orders_keep_storefront_wire_values(self):
        assert {s.value for s in SortOrder} == {
            "relevancia",
            "preco_menor",
            "preco_maior",
            "mais_vendidos",
            "melhor_avaliados",
            "mais_recentes",
        }

    def test_availability_values(self):
        assert Availability("todos") is Availability.ALL

    def test_relation_criteria_values(self):
        assert RelationCriteria("sabor") is RelationCriteria.FLAVOR
