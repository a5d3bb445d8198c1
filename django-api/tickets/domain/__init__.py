from tickets.domain.errors import DomainError, ErrorCode, InvalidPurchaseError
from tickets.domain.policy import TicketPolicy, calculate_total_amount, calculate_total_seats
from tickets.domain.validation import PurchaseValidator
from tickets.domain.value_objects import (
    AggregatedOrder,
    PurchaseOutcome,
    TicketCategory,
    TicketTypeRequest,
)

__all__ = [
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "TicketPolicy",
    "calculate_total_amount",
    "calculate_total_seats",
    "PurchaseValidator",
    "AggregatedOrder",
    "PurchaseOutcome",
    "TicketCategory",
    "TicketTypeRequest",
]
