"""
Tests for the in-memory product catalog.
"""

import logging

import pytest
from conftest import product_data
from database.catalog_store import CatalogStore


@pytest.fixture
def filled(catalog):
    catalog.create_product(product_data(name="Intel Core i5 13600K", brand="Intel", price=6450000, socket="lga1700", wattage=125))
    catalog.create_product(product_data(name="AMD Ryzen 7 7700X", brand="AMD", price=7890000, socket="am5", wattage=105))
    catalog.create_product(product_data(name="AMD Ryzen 9 7900X", brand="AMD", price=11450000, socket="am5", wattage=170))
    catalog.create_product(product_data(name="MSI MAG B650 TOMAHAWK", category="mainboard", brand="MSI", price=6800000, socket="am5", wattage=45))
    catalog.create_product(product_data(name="Radeon RX 7800 XT", category="vga", brand="AMD", price=13500000, socket=None, wattage=263))
    return catalog


class TestCreateAndGet:
    def test_get_returns_created_product(self, catalog):
        data = product_data(description="8 cores", specs={"cores": "8"})
        product = catalog.create_product(data)

        found = catalog.get_product(product.id)
        assert found == product
        for key, value in data.items():
            assert getattr(found, key) == value
        assert found.in_stock is True

    def test_ids_are_unique(self, catalog):
        first = catalog.create_product(product_data())
        second = catalog.create_product(product_data())
        assert first.id != second.id
        assert len(catalog) == 2

    def test_get_unknown_id_returns_none(self, catalog):
        assert catalog.get_product("missing") is None

    def test_rejects_unknown_category(self, catalog):
        with pytest.raises(ValueError, match="Unknown category"):
            catalog.create_product(product_data(category="toaster"))

    def test_rejects_negative_price(self, catalog):
        with pytest.raises(ValueError, match="Invalid price"):
            catalog.create_product(product_data(price=-1))

    def test_specs_are_copied(self, catalog):
        specs = {"cores": "8"}
        product = catalog.create_product(product_data(specs=specs))
        specs["cores"] = "16"
        assert product.specs == {"cores": "8"}

    def test_warns_on_undocumented_specs(self, catalog, caplog):
        with caplog.at_level(logging.WARNING, logger="database.catalog_store"):
            product = catalog.create_product(product_data(specs={"cores": "8", "color": "red"}))

        assert product.specs == {"cores": "8", "color": "red"}
        assert "Undocumented specs for cpu AMD Ryzen 7 7700X: color" in caplog.text

    def test_documented_specs_are_silent(self, catalog, caplog):
        with caplog.at_level(logging.WARNING, logger="database.catalog_store"):
            catalog.create_product(product_data(specs={"cores": "8", "tdp": "105W"}))
            catalog.create_product(product_data(category="case", specs={"formFactor": "ATX"}))

        assert "Undocumented specs" not in caplog.text

    def test_seeded_catalog_has_products(self):
        catalog = CatalogStore()
        assert len(catalog) > 0
        assert catalog.list_products(category="psu")


class TestListProducts:
    def test_no_filters_returns_all_in_insertion_order(self, filled):
        names = [p.name for p in filled.list_products()]
        assert names[0] == "Intel Core i5 13600K"
        assert len(names) == 5

    def test_category_filter(self, filled):
        products = filled.list_products(category="cpu")
        assert len(products) == 3
        assert all(p.category == "cpu" for p in products)

    def test_brand_filter(self, filled):
        products = filled.list_products(brands=["Intel", "MSI"])
        assert {p.brand for p in products} == {"Intel", "MSI"}

    def test_socket_filter_skips_products_without_socket(self, filled):
        products = filled.list_products(sockets=["am5"])
        assert len(products) == 3
        assert all(p.socket == "am5" for p in products)

    def test_price_range_is_inclusive(self, filled):
        products = filled.list_products(price_range=(6450000, 7890000))
        assert {p.price for p in products} == {6450000, 7890000, 6800000}

    def test_price_range_open_bounds(self, filled):
        assert len(filled.list_products(price_range=(None, 6800000))) == 2
        assert len(filled.list_products(price_range=(11450000, None))) == 2

    def test_search_matches_name_or_brand_case_insensitive(self, filled):
        assert {p.name for p in filled.list_products(search="ryzen")} == {"AMD Ryzen 7 7700X", "AMD Ryzen 9 7900X"}
        assert len(filled.list_products(search="msi")) == 1

    def test_filters_are_conjunctive(self, filled):
        products = filled.list_products(category="cpu", brands=["AMD"], price_range=(0, 8000000), search="ryzen")
        assert [p.name for p in products] == ["AMD Ryzen 7 7700X"]

    def test_empty_filter_lists_are_ignored(self, filled):
        assert len(filled.list_products(brands=[], sockets=[])) == 5
