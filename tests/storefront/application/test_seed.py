from storefront.product.listing import list_products
from storefront.utils.seed import PRODUCTS, seed_catalogue


def test_seed_fills_the_account_catalogue():
    product_ids = seed_catalogue(account_id=3)

    result = list_products(3, page_size=24, availability="todos")
    assert len(product_ids) == len(PRODUCTS)
    assert result["pagination"]["total_items"] == len(PRODUCTS)


def test_seed_applies_promotions():
    seed_catalogue(account_id=3)

    products = list_products(3, page_size=24, sort_by="preco_menor")["products"]
    promoted = [p for p in products if p["has_promotion"]]
    assert {p["name"] for p in promoted} == {"Chocolate Truffle Cake", "Lemon Drizzle"}
    assert products[0]["current_price"] == 49.9


def test_seed_leaves_other_accounts_untouched():
    seed_catalogue(account_id=3)

    assert list_products(1)["pagination"]["total_items"] == 0
