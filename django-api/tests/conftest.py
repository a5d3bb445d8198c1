"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tests.fakes import RecordingPaymentService, RecordingReservationService
from tickets.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateway_calls() -> list:
    """Calls made to either gateway, in the order they happened."""
    return []


@pytest.fixture
def payment_service(gateway_calls: list) -> RecordingPaymentService:
    return RecordingPaymentService(gateway_calls)


@pytest.fixture
def reservation_service(gateway_calls: list) -> RecordingReservationService:
    return RecordingReservationService(gateway_calls)


@pytest.fixture
def ticket_service(
    payment_service: RecordingPaymentService,
    reservation_service: RecordingReservationService,
) -> TicketService:
    return TicketService(payment_service, reservation_service)
