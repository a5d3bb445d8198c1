"""In-process stand-ins for the third-party payment and seat booking services.

They check argument types the way the providers do and otherwise only log.
Point ``CINEMA_TICKETS["PAYMENT_SERVICE"]`` and
``CINEMA_TICKETS["RESERVATION_SERVICE"]`` at real clients in production.
"""

import logging

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")


class LocalTicketPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, total_amount: int) -> None:
        _require_int("account_id", account_id)
        _require_int("total_amount", total_amount)
        logger.info(f"Payment of {total_amount} taken from account {account_id}")


class LocalSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        _require_int("account_id", account_id)
        _require_int("total_seats", total_seats)
        logger.info(f"{total_seats} seat(s) reserved for account {account_id}")
