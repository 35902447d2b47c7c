"""Product detail: everything a product page shows."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.product.product import Product
from storefront.reference.category import Category
from storefront.reference.confectioner import Confectioner
from storefront.reference.flavor import Flavor
from storefront.reference.size import Size
from storefront.review.review import Review
from storefront.shared.tenancy import find_in_account


def get_product_detail(account_id, product_id):
    product = find_in_account(Product, account_id, product_id)
    if product is None or not product.is_listed:
        raise ObjectNotFoundError("productDoesntExist")

    confectioner = find_in_account(Confectioner, account_id, product.confectioner_id)
    if confectioner is None or confectioner.deleted:
        raise ObjectNotFoundError("productDoesntExist")

    category = find_in_account(Category, account_id, product.category_id)

    flavors = [find_in_account(Flavor, account_id, flavor_id) for flavor_id in product.flavor_ids]
    flavors = sorted((f for f in flavors if f is not None and not f.deleted), key=lambda f: f.name)

    sizes = [find_in_account(Size, account_id, size_id) for size_id in product.size_ids]
    sizes = sorted((s for s in sizes if s is not None and not s.deleted), key=lambda s: s.price_modifier)

    reviews = current_domain.repository_for(Review).for_product(account_id, product.id)

    return {
        "product": {
            "id": str(product.id),
            "name": product.name,
            "description": product.description,
            "ingredients": product.ingredients,
            "nutritional_info": product.nutritional_info,
            "base_price": product.base_price,
            "promotional_price": product.promotional_price,
            "current_price": product.current_price,
            "has_promotion": product.has_promotion,
            "main_image": product.main_image,
            "image_gallery": product.gallery(),
            "average_rating": product.average_rating,
            "total_reviews": product.total_reviews,
            "preparation_time": product.preparation_time,
            "available": product.available,
            "category_id": str(product.category_id),
            "category_name": category.name if category is not None else None,
            "confectioner": {
                "id": str(confectioner.id),
                "name": confectioner.name,
                "photo": confectioner.photo,
                "average_rating": confectioner.average_rating,
                "total_products_sold": confectioner.total_products_sold,
            },
        },
        "flavors": [{"id": str(f.id), "name": f.name, "description": f.description} for f in flavors],
        "sizes": [
            {
                "id": str(s.id),
                "name": s.name,
                "description": s.description,
                "price_modifier": s.price_modifier,
            }
            for s in sizes
        ],
        "reviews": [
            {
                "id": str(r.id),
                "customer_name": r.customer_name,
                "rating": r.rating,
                "comment": r.comment,
                "created_at": r.created_at,
            }
            for r in reviews
        ],
    }
