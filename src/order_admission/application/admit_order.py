"""Application service: Admit Order use case.

Validates a customer's order request against one catalog snapshot and,
when every check passes, persists the order and decrements stock.

Rejections come back as ``Failure`` values. Once the order is persisted
no rejection is possible; a failing stock update afterwards raises
``InventoryInconsistencyError`` because the order already exists.

Stock is read and later written without any locking, so two admissions
racing for the same product can both succeed and over-sell it.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from returns.result import Failure, Result, Success

from order_admission.application.dto import OrderDTO, OrderLineRequest
from order_admission.domain.exceptions import (
    AdmissionError,
    InvalidCustomer,
    InvalidProduct,
    InventoryInconsistencyError,
    NoProductsFound,
    StockoutProduct,
)
from order_admission.domain.model.order import Order
from order_admission.domain.repository.customer_repository import CustomerRepository
from order_admission.domain.repository.order_repository import OrderRepository
from order_admission.domain.repository.product_repository import ProductRepository
from order_admission.domain.service.stock_reconciliation import (
    decrement_stock,
    find_invalid_products,
    find_stockout_products,
    remove_duplicate_lines,
    snapshot_lines,
)

logger = structlog.get_logger(__name__)


class OrderAdmission:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._customer_repo = customer_repo
        self._product_repo = product_repo
        self._order_repo = order_repo

    async def execute(
        self, customer_id: str, lines: Sequence[OrderLineRequest]
    ) -> Result[OrderDTO, AdmissionError]:
        """Admit an order.

        Steps:
        1. Resolve the customer.
        2. Collapse duplicate product lines (first occurrence wins).
        3. Read the catalog snapshot for every requested id.
        4. Reject unknown products, then products short on stock.
        5. Freeze current prices into the order lines and persist.
        6. Apply the decremented stock to the catalog.
        """
        customer = await self._customer_repo.find_by_id(customer_id)
        if customer is None:
            return self._reject(InvalidCustomer(customer_id))

        parsed = remove_duplicate_lines(lines)

        catalog = await self._product_repo.find_all_by_id(
            [line.product_id for line in lines]
        )
        if not catalog:
            return self._reject(NoProductsFound())

        invalid = find_invalid_products(catalog, parsed)
        if invalid:
            return self._reject(InvalidProduct(invalid[0]))

        stockout = find_stockout_products(catalog, parsed)
        if stockout:
            return self._reject(StockoutProduct(stockout[0]))

        order = await self._order_repo.create(
            Order.create(customer, snapshot_lines(catalog, parsed))
        )
        logger.info(
            "Order admitted",
            order_id=order.id,
            customer_id=customer.id,
            line_count=len(order.items),
        )

        # Commit point passed: from here on the order exists.
        try:
            await self._product_repo.update_quantities(decrement_stock(catalog, parsed))
        except Exception as exc:
            logger.error(
                "Stock update failed for persisted order",
                order_id=order.id,
                error=str(exc),
            )
            raise InventoryInconsistencyError(order, exc) from exc

        logger.debug("Stock decremented", order_id=order.id)
        return Success(OrderDTO.from_order(order))

    @staticmethod
    def _reject(error: AdmissionError) -> Result[OrderDTO, AdmissionError]:
        logger.info(
            "Order rejected",
            reason=type(error).__name__,
            detail=str(error),
        )
        return Failure(error)


async def admit_order(
    customer_repo: CustomerRepository,
    product_repo: ProductRepository,
    order_repo: OrderRepository,
    customer_id: str,
    lines: Sequence[OrderLineRequest],
) -> Result[OrderDTO, AdmissionError]:
    """Run one admission with explicitly supplied collaborators."""
    admission = OrderAdmission(customer_repo, product_repo, order_repo)
    return await admission.execute(customer_id, lines)
