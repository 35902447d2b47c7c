"""Product creation: command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product
from storefront.reference.category import Category
from storefront.reference.confectioner import Confectioner
from storefront.reference.flavor import Flavor
from storefront.reference.size import Size
from storefront.shared.tenancy import find_in_account


@storefront.command(part_of="Product")
class CreateProduct:
    account_id = Integer(required=True, min_value=1)
    category_id = Identifier(required=True)
    confectioner_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    description = String(required=True, max_length=1000)
    ingredients = Text(required=True)
    nutritional_info = Text()
    base_price = Float(required=True, min_value=0.01)
    promotional_price = Float(min_value=0.01)
    main_image = String(required=True, max_length=500)
    image_gallery = Text()  # JSON: list of image URLs
    preparation_time = String(required=True, max_length=50)
    available = Boolean(default=True)
    flavor_ids = Text()  # JSON: list of flavor ids
    size_ids = Text()  # JSON: list of size ids


def _require_live(aggregate_cls, account_id, identifier, field):
    record = find_in_account(aggregate_cls, account_id, identifier)
    if record is None or record.deleted:
        raise ValidationError({field: [f"{aggregate_cls.__name__} {identifier} does not exist"]})
    return record


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        flavor_ids = json.loads(command.flavor_ids) if command.flavor_ids else []
        size_ids = json.loads(command.size_ids) if command.size_ids else []

        _require_live(Category, command.account_id, command.category_id, "category_id")
        _require_live(Confectioner, command.account_id, command.confectioner_id, "confectioner_id")
        for flavor_id in flavor_ids:
            _require_live(Flavor, command.account_id, flavor_id, "flavor_ids")
        for size_id in size_ids:
            _require_live(Size, command.account_id, size_id, "size_ids")

        product = Product.create(
            account_id=command.account_id,
            category_id=command.category_id,
            confectioner_id=command.confectioner_id,
            name=command.name,
            description=command.description,
            ingredients=command.ingredients,
            nutritional_info=command.nutritional_info,
            base_price=command.base_price,
            promotional_price=command.promotional_price,
            main_image=command.main_image,
            image_gallery=command.image_gallery,
            preparation_time=command.preparation_time,
            available=command.available,
            flavor_ids=flavor_ids,
            size_ids=size_ids,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
