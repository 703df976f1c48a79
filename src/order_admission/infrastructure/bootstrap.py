"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from order_admission.application.admit_order import OrderAdmission
from order_admission.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from order_admission.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from order_admission.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Project root when installed in editable mode.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.getenv("ORDER_ADMISSION_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def customer_repository() -> JsonCustomerRepository:
    return JsonCustomerRepository(data_dir() / "customers.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def order_admission() -> OrderAdmission:
    return OrderAdmission(
        customer_repo=customer_repository(),
        product_repo=product_repository(),
        order_repo=order_repository(),
    )
