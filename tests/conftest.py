import pytest
from config import WooCommerceConfig, WooCommerceUnconfigured
from database.build_store import BuildStore
from database.catalog_store import CatalogStore
from routing.woocommerce.woocommerce_api import WooCommerceAPI
from server import create_app


def product_data(**overrides):
    data = {
        "name": "AMD Ryzen 7 7700X",
        "category": "cpu",
        "brand": "AMD",
        "price": 7890000,
        "image": "https://example.com/cpu.jpg",
        "socket": "am5",
        "wattage": 105,
    }
    data.update(overrides)
    return data


@pytest.fixture
def catalog():
    return CatalogStore(seed=False)


@pytest.fixture
def builds():
    return BuildStore()


@pytest.fixture
def woocommerce_config():
    return WooCommerceConfig(base_url="https://shop.example.com", consumer_key="ck_test", consumer_secret="cs_test", timeout=5)


@pytest.fixture
def woocommerce():
    return WooCommerceAPI(config=WooCommerceUnconfigured())


@pytest.fixture
def app(catalog, builds, woocommerce):
    return create_app(config={"TESTING": True}, catalog=catalog, builds=builds, woocommerce=woocommerce)


@pytest.fixture
def client(app):
    return app.test_client()
