"""Business rules a purchase must satisfy before anything is charged."""

from tickets.domain.errors import (
    AdultRequiredError,
    InfantWithoutAdultError,
    InvalidAccountIdError,
    InvalidPurchaseError,
    PriceCalculationError,
    SeatCalculationError,
    TooManyTicketsError,
)
from tickets.domain.policy import TicketPolicy, calculate_total_amount, calculate_total_seats
from tickets.domain.value_objects import AggregatedOrder, TicketCategory


class PurchaseValidator:
    """Checks an aggregated order against the purchase rules.

    Rules are checked in a fixed order and only the first violation is
    reported:

    1. the account ID is a positive integer
    2. at least one adult ticket is requested
    3. the total number of tickets is within the policy limit
    4. there are no more infants than adults
    5. the order has something to pay for
    6. the order has seats to reserve
    """

    def __init__(self, policy: TicketPolicy) -> None:
        self._policy = policy

    def validate(self, account_id: int, order: AggregatedOrder) -> InvalidPurchaseError | None:
        """Return the first rule the purchase breaks, or None if it is valid."""
        if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
            return InvalidAccountIdError(account_id)

        adults = order.count(TicketCategory.ADULT)
        if adults <= 0:
            return AdultRequiredError()

        limit = self._policy.max_tickets_per_purchase
        if order.total_tickets > limit:
            return TooManyTicketsError(order.total_tickets, limit)

        if order.count(TicketCategory.INFANT) > adults:
            return InfantWithoutAdultError()

        if calculate_total_amount(order, self._policy) <= 0:
            return PriceCalculationError()

        if calculate_total_seats(order) <= 0:
            return SeatCalculationError()

        return None
