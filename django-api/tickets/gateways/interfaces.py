"""Gateway interfaces for the external payment and seat booking services.

Gateways must be swappable. Implementations either complete or raise.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface to the payment provider."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount: int) -> None:
        """Charge ``total_amount`` to the account."""
        ...


class SeatReservationService(ABC):
    """Interface to the seat booking provider."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats: int) -> None:
        """Reserve ``total_seats`` seats for the account."""
        ...
