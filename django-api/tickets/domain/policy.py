"""Pricing and purchase limits, read once and never mutated."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final, Self

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from tickets.domain.value_objects import AggregatedOrder, TicketCategory

DEFAULT_PRICES: Final[Mapping[TicketCategory, int]] = MappingProxyType(
    {
        TicketCategory.ADULT: 20,
        TicketCategory.CHILD: 10,
        TicketCategory.INFANT: 0,
    }
)
DEFAULT_MAX_TICKETS_PER_PURCHASE: Final[int] = 20


@dataclass(frozen=True)
class TicketPolicy:
    """Unit price per category and the per-purchase ticket limit."""

    prices: Mapping[TicketCategory, int] = field(default_factory=lambda: DEFAULT_PRICES)
    max_tickets_per_purchase: int = DEFAULT_MAX_TICKETS_PER_PURCHASE

    def __post_init__(self) -> None:
        missing = set(TicketCategory) - set(self.prices)
        if missing:
            names = ", ".join(sorted(category.value for category in missing))
            raise ImproperlyConfigured(f"No ticket price configured for: {names}")
        for category, price in self.prices.items():
            if not isinstance(price, int) or price < 0:
                raise ImproperlyConfigured(f"Invalid price for {category.value}: {price!r}")
        limit = self.max_tickets_per_purchase
        if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
            raise ImproperlyConfigured(f"MAX_TICKETS_PER_PURCHASE must be a positive integer: {limit!r}")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))

    @classmethod
    def from_settings(cls) -> Self:
        """Build the policy from the ``CINEMA_TICKETS`` setting, if present."""
        conf: dict[str, Any] = getattr(settings, "CINEMA_TICKETS", {})
        prices = dict(DEFAULT_PRICES)
        for key, price in conf.get("PRICES", {}).items():
            if key not in TicketCategory.__members__:
                raise ImproperlyConfigured(f"Unknown ticket category in PRICES: {key!r}")
            prices[TicketCategory[key]] = price
        return cls(
            prices=prices,
            max_tickets_per_purchase=conf.get(
                "MAX_TICKETS_PER_PURCHASE", DEFAULT_MAX_TICKETS_PER_PURCHASE
            ),
        )

    def unit_price(self, category: TicketCategory) -> int:
        return self.prices[category]


def calculate_total_amount(order: AggregatedOrder, policy: TicketPolicy) -> int:
    """Sum of count times unit price across every category."""
    return sum(order.count(category) * policy.unit_price(category) for category in TicketCategory)


def calculate_total_seats(order: AggregatedOrder) -> int:
    """Tickets that need a seat; infants are excluded."""
    return sum(order.count(category) for category in TicketCategory if category.occupies_seat)
