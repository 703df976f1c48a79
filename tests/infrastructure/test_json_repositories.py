"""Tests for the JSON-file-backed repositories."""

import asyncio
import json

import pytest

from order_admission.domain.exceptions import EntityNotFoundError
from order_admission.domain.model.customer import Customer
from order_admission.domain.model.order import Order, OrderLine
from order_admission.domain.model.product import Product
from order_admission.domain.model.value_objects import Money, Quantity
from order_admission.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from order_admission.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from order_admission.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def product_repo(tmp_path):
    repo = JsonProductRepository(tmp_path / "products.json")
    for product in (
        Product(id="3", name="Gizmo", price=Money.of("1.00"), quantity=1),
        Product(id="1", name="Widget", price=Money.of("15.00"), quantity=10),
        Product(id="2", name="Gadget", price=Money.of("25.00"), quantity=0),
    ):
        asyncio.run(repo.save(product))
    return repo


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        JsonProductRepository(tmp_path / "nested" / "products.json")
        assert json.loads((tmp_path / "nested" / "products.json").read_text()) == []

    def test_find_all_by_id_keeps_catalog_order(self, product_repo):
        found = asyncio.run(product_repo.find_all_by_id(["2", "1", "1", "3", "9"]))
        assert [p.id for p in found] == ["3", "1", "2"]

    def test_update_quantities(self, product_repo):
        widget = asyncio.run(product_repo.get_by_id("1"))
        asyncio.run(product_repo.update_quantities([widget.with_quantity(4)]))

        assert asyncio.run(product_repo.get_by_id("1")).quantity == 4
        assert asyncio.run(product_repo.get_by_id("3")).quantity == 1

    def test_update_unknown_product(self, product_repo):
        ghost = Product(id="42", name="Ghost", price=Money.of("1"), quantity=1)
        with pytest.raises(EntityNotFoundError):
            asyncio.run(product_repo.update_quantities([ghost]))

    def test_price_round_trips_as_decimal_string(self, tmp_path, product_repo):
        raw = json.loads((tmp_path / "products.json").read_text())
        assert raw[1]["price"] == "15.00"
        assert asyncio.run(product_repo.get_by_id("1")).price == Money.of("15.00")


class TestJsonCustomerRepository:

    def test_save_and_find(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        alice = Customer(id="C1", name="Alice", email="alice@example.com")
        asyncio.run(repo.save(alice))

        assert asyncio.run(repo.find_by_id("C1")) == alice
        assert asyncio.run(repo.find_by_id("C2")) is None

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        asyncio.run(repo.save(Customer(id="C1", name="Alice")))
        asyncio.run(repo.save(Customer(id="C1", name="Alicia")))

        customers = asyncio.run(repo.list_all())
        assert [c.name for c in customers] == ["Alicia"]


class TestJsonOrderRepository:

    def _order(self) -> Order:
        return Order.create(
            Customer(id="C1", name="Alice"),
            [OrderLine("1", "Widget", Quantity(2), Money.of("15.00"))],
        )

    def test_create_assigns_ids(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first = asyncio.run(repo.create(self._order()))
        second = asyncio.run(repo.create(self._order()))
        assert (first.id, second.id) == (1, 2)

    def test_round_trip(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        stored = asyncio.run(repo.create(self._order()))

        loaded = asyncio.run(repo.get_by_id(stored.id))

        assert loaded == stored
        assert loaded.items[0].price == Money.of("15.00")

    def test_missing_order(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        assert asyncio.run(repo.get_by_id(5)) is None
