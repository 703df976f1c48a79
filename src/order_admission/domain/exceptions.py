"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Admission rejections (``AdmissionError`` and its subclasses) are returned as
``Failure`` values by the admission use case rather than raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_admission.domain.model.order import Order


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Admission rejections -----------------------------------------------------


class AdmissionError(DomainException):
    """An order request was rejected before anything was persisted."""


class InvalidCustomer(AdmissionError):

    def __init__(self, customer_id: str) -> None:
        self.customer_id = customer_id
        super().__init__(f"Invalid customer identifier: '{customer_id}'")


class NoProductsFound(AdmissionError):

    def __init__(self) -> None:
        super().__init__("Invalid products identifier: none of the requested products exist")


class InvalidProduct(AdmissionError):

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Invalid product on your order: {product_id}")


class StockoutProduct(AdmissionError):

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Stockout product: {product_id}")


# --- Post-commit failures -----------------------------------------------------


class InventoryInconsistencyError(DomainException):
    """The order was persisted but its stock decrement could not be applied.

    Raised, never returned: the caller owns any compensating action. The
    persisted order is available as ``order`` and the collaborator failure
    as ``cause``.
    """

    def __init__(self, order: Order, cause: BaseException) -> None:
        self.order = order
        self.cause = cause
        super().__init__(
            f"Order #{order.id} was created but stock was not updated: {cause}"
        )
