from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

__all__ = [
    "SeatReservationService",
    "TicketPaymentService",
]
