"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain.errors import InvalidPurchaseError
from tickets.handlers.serializers import (
    DomainErrorSerializer,
    PurchaseOutcomeSerializer,
    PurchaseRequestSerializer,
)
from tickets.services import TicketService


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def get_service(self) -> TicketService:
        return TicketService.from_settings()

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            outcome = self.get_service().purchase_tickets(
                serializer.validated_data["account_id"],
                *serializer.validated_data["tickets"],
            )
        except InvalidPurchaseError as exc:
            return Response(DomainErrorSerializer(exc).data, status=status.HTTP_400_BAD_REQUEST)

        return Response(PurchaseOutcomeSerializer(outcome).data, status=status.HTTP_201_CREATED)
