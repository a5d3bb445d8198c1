"""Domain primitives that enforce validity at creation time."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Self

from tickets.domain.errors import InvalidTicketCountError, UnknownTicketCategoryError


class TicketCategory(Enum):
    """Ticket categories offered for a screening."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketCategory.INFANT

    @classmethod
    def from_key(cls, key: object) -> Self:
        """Look up a category by its exact, case-sensitive name."""
        if not isinstance(key, str) or key not in cls.__members__:
            raise UnknownTicketCategoryError(key)
        return cls[key]


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets requested for one category."""

    category: TicketCategory
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.category, TicketCategory):
            raise UnknownTicketCategoryError(self.category)
        # bool is an int subclass but never a ticket count
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise InvalidTicketCountError(self.category.value, self.count)
        if self.count < 0:
            raise InvalidTicketCountError(self.category.value, self.count)

    @classmethod
    def from_mapping(cls, value: Mapping[str, int]) -> list[Self]:
        """Build requests from the ``{"ADULT": 2}`` form, one per key."""
        return [cls(TicketCategory.from_key(key), count) for key, count in value.items()]


@dataclass(frozen=True)
class AggregatedOrder:
    """Total requested count per category. Missing categories count as zero."""

    counts: Mapping[TicketCategory, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # same checks as a single request
        for category, count in self.counts.items():
            TicketTypeRequest(category, count)
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        totals: dict[TicketCategory, int] = {}
        for request in requests:
            totals[request.category] = totals.get(request.category, 0) + request.count
        return cls(counts=totals)

    def count(self, category: TicketCategory) -> int:
        return self.counts.get(category, 0)

    @property
    def total_tickets(self) -> int:
        return sum(self.count(category) for category in TicketCategory)


@dataclass(frozen=True)
class PurchaseOutcome:
    """What a completed purchase charged and reserved."""

    account_id: int
    total_seats: int
    total_amount: int
