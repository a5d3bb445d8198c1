"""Ticket service - all purchase logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Mapping
from typing import Self

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.domain import (
    AggregatedOrder,
    PurchaseOutcome,
    PurchaseValidator,
    TicketPolicy,
    TicketTypeRequest,
    calculate_total_amount,
    calculate_total_seats,
)
from tickets.domain.errors import InvalidPurchaseError
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_SERVICE = "tickets.gateways.thirdparty.LocalTicketPaymentService"
DEFAULT_RESERVATION_SERVICE = "tickets.gateways.thirdparty.LocalSeatReservationService"


class TicketService:
    """Service for purchasing cinema tickets."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        policy: TicketPolicy | None = None,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service
        self._policy = policy or TicketPolicy()
        self._validator = PurchaseValidator(self._policy)

    @classmethod
    def from_settings(cls) -> Self:
        """Build a service wired to the gateways and policy named in settings."""
        conf = getattr(settings, "CINEMA_TICKETS", {})
        payment_cls = import_string(conf.get("PAYMENT_SERVICE", DEFAULT_PAYMENT_SERVICE))
        reservation_cls = import_string(
            conf.get("RESERVATION_SERVICE", DEFAULT_RESERVATION_SERVICE)
        )
        return cls(payment_cls(), reservation_cls(), TicketPolicy.from_settings())

    def purchase_tickets(
        self,
        account_id: int,
        *ticket_type_requests: TicketTypeRequest | Mapping[str, int],
    ) -> PurchaseOutcome:
        """Charge for and reserve the requested tickets.

        Payment is taken before seats are reserved. A failure from either
        gateway is logged and re-raised unchanged; a payment is not refunded
        when the reservation fails.

        Raises:
            InvalidPurchaseError: If a request or the purchase breaks a
                business rule. Neither gateway is called.
        """
        try:
            order = AggregatedOrder.from_requests(self._to_requests(ticket_type_requests))
            error = self._validator.validate(account_id, order)
            if error is not None:
                raise error
        except InvalidPurchaseError as exc:
            logger.warning(f"Purchase rejected for account {account_id}: {exc}")
            raise

        outcome = PurchaseOutcome(
            account_id=account_id,
            total_seats=calculate_total_seats(order),
            total_amount=calculate_total_amount(order, self._policy),
        )

        try:
            self._payment_service.make_payment(account_id, outcome.total_amount)
        except Exception:
            logger.error(f"Payment of {outcome.total_amount} failed for account {account_id}")
            raise

        try:
            self._reservation_service.reserve_seat(account_id, outcome.total_seats)
        except Exception:
            logger.error(
                f"Seat reservation failed for account {account_id} after payment of "
                f"{outcome.total_amount} was taken"
            )
            raise

        logger.info(
            f"Reservation completed for account {account_id}: "
            f"{outcome.total_seats} seat(s), total paid {outcome.total_amount}"
        )
        return outcome

    @staticmethod
    def _to_requests(
        ticket_type_requests: tuple[TicketTypeRequest | Mapping[str, int], ...],
    ) -> list[TicketTypeRequest]:
        requests: list[TicketTypeRequest] = []
        for item in ticket_type_requests:
            if isinstance(item, TicketTypeRequest):
                requests.append(item)
            elif isinstance(item, Mapping):
                requests.extend(TicketTypeRequest.from_mapping(item))
            else:
                raise TypeError(f"Expected a TicketTypeRequest or mapping, got {type(item).__name__}")
        return requests
