import pytest
from protean.integrations.pytest import DomainFixture

PRODUCTS = [
    {
        "id": "p1",
        "name": "Ceramic Mug",
        "description": "Stoneware coffee mug",
        "price": 100,
        "image": "/img/mug.jpg",
    },
    {
        "id": "p2",
        "name": "Linen Tote",
        "description": "Natural linen bag with an inside pocket",
        "price": 250,
        "image": "/img/tote.jpg",
    },
    {
        "id": "p3",
        "name": "Notebook",
        "description": "Dot-grid paper, A5",
        "price": 85,
        "image": "",
    },
]


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


@pytest.fixture()
def product_records():
    from storefront.stores.memory_adapter import MemoryRecordStore

    return MemoryRecordStore("products", PRODUCTS)


@pytest.fixture(autouse=True)
def stores(_ctx, product_records):
    """In-memory stores with a three-product catalogue."""
    from storefront.stores import build_stores, set_stores

    stores = build_stores({"products": product_records})
    set_stores(stores)
    return stores


@pytest.fixture()
def catalog(stores):
    return stores.catalog.list_products()
