import json
from types import SimpleNamespace

import pytest
from protean.integrations.pytest import DomainFixture

ACCOUNT_ID = 1
OTHER_ACCOUNT_ID = 2
USER_ID = 7


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


def _process(command):
    from protean import current_domain

    return current_domain.process(command, asynchronous=False)


def build_catalogue(account_id=ACCOUNT_ID):
    """Reference data every product test starts from."""
    from storefront.reference.registration import (
        RegisterCategory,
        RegisterConfectioner,
        RegisterFlavor,
        RegisterSize,
    )

    return SimpleNamespace(
        account_id=account_id,
        birthday=_process(RegisterCategory(account_id=account_id, name="Birthday")),
        wedding=_process(RegisterCategory(account_id=account_id, name="Wedding")),
        chocolate=_process(RegisterFlavor(account_id=account_id, name="Chocolate")),
        strawberry=_process(RegisterFlavor(account_id=account_id, name="Strawberry")),
        lemon=_process(RegisterFlavor(account_id=account_id, name="Lemon")),
        small=_process(RegisterSize(account_id=account_id, name="Small", price_modifier=0.0)),
        medium=_process(RegisterSize(account_id=account_id, name="Medium", price_modifier=25.0)),
        large=_process(RegisterSize(account_id=account_id, name="Large", price_modifier=50.0)),
        ana=_process(
            RegisterConfectioner(
                account_id=account_id,
                name="Ana's Kitchen",
                photo="https://img.example/ana.jpg",
                average_rating=4.8,
                total_products_sold=120,
            )
        ),
        doce=_process(RegisterConfectioner(account_id=account_id, name="Doce Lar")),
    )


@pytest.fixture()
def catalogue():
    return build_catalogue()


@pytest.fixture()
def make_product(catalogue):
    """Factory creating products through ``CreateProduct``; returns the new id."""
    from storefront.product.creation import CreateProduct

    def _make(**overrides):
        values = {
            "account_id": catalogue.account_id,
            "category_id": catalogue.birthday,
            "confectioner_id": catalogue.ana,
            "name": "Chocolate Truffle Cake",
            "description": "Rich chocolate sponge with truffle ganache",
            "ingredients": "Flour, cocoa, eggs, butter, sugar",
            "base_price": 100.0,
            "main_image": "https://img.example/truffle.jpg",
            "preparation_time": "48 hours",
            "flavor_ids": [catalogue.chocolate],
            "size_ids": [catalogue.small, catalogue.medium],
        }
        values.update(overrides)
        for key in ("flavor_ids", "size_ids", "image_gallery"):
            if isinstance(values.get(key), list):
                values[key] = json.dumps(values[key])
        return _process(CreateProduct(**values))

    return _make


@pytest.fixture()
def process():
    return _process


@pytest.fixture()
def catalogue_for():
    """Build reference data for another account."""
    return build_catalogue
