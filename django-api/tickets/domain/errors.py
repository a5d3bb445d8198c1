"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    UNKNOWN_TICKET_CATEGORY = "UNKNOWN_TICKET_CATEGORY"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    INFANT_WITHOUT_ADULT = "INFANT_WITHOUT_ADULT"
    PRICE_CALCULATION = "PRICE_CALCULATION"
    SEAT_CALCULATION = "SEAT_CALCULATION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """A purchase request broke a business rule. Nothing was charged or reserved."""


class InvalidAccountIdError(InvalidPurchaseError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Account ID must be greater than zero",
        )
        self.account_id = account_id


class InvalidTicketCountError(InvalidPurchaseError):
    """Raised when a ticket count is negative or not an integer."""

    def __init__(self, category: str, count: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message=f"Number of {category} tickets must be a non-negative integer",
        )
        self.count = count


class UnknownTicketCategoryError(InvalidPurchaseError):
    """Raised when a request names a category that does not exist."""

    def __init__(self, category: object) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_TICKET_CATEGORY,
            message=f"Unknown ticket category: {category!r}",
        )
        self.category = category


class AdultRequiredError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED,
            message="There must be at least one adult ticket in a purchase",
        )


class TooManyTicketsError(InvalidPurchaseError):
    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"A maximum of {limit} tickets can be purchased at a time",
        )
        self.requested = requested
        self.limit = limit


class InfantWithoutAdultError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFANT_WITHOUT_ADULT,
            message="Each infant must be accompanied by an adult, as infants sit on an adult's lap",
        )


class PriceCalculationError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PRICE_CALCULATION,
            message="Ticket price calculation produced no amount to pay",
        )


class SeatCalculationError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SEAT_CALCULATION,
            message="Seat count calculation produced no seats to reserve",
        )
