"""Payment schemas."""

from typing import Any

from pydantic import ConfigDict, Field

from doctors_portal.schemas.base import PortalSchema
from doctors_portal.schemas.booking import BookingResponse


class PaymentConfirmation(PortalSchema):
    """Payment evidence posted by the client once the processor confirms.

    Fields beyond the declared ones are kept verbatim on the payment record.
    """

    model_config = ConfigDict(extra="allow")

    transaction_id: str = Field(min_length=1, max_length=255)
    amount: float | None = Field(default=None, ge=0)

    @property
    def details(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class PaymentResponse(PortalSchema):
    """Stored payment record."""

    id: str
    booking_id: str
    transaction_id: str
    amount: float | None = None
    details: dict[str, Any]


class ReconciliationResponse(PortalSchema):
    """Result of attaching a payment to a booking.

    ``matched_count`` is 0 when no booking has the given id; the payment
    record is stored regardless.
    """

    matched_count: int
    payment: PaymentResponse
    booking: BookingResponse | None = None


class PaymentIntentRequest(PortalSchema):
    """Request for a payment intent covering a booking's price."""

    price: float = Field(gt=0)


class PaymentIntentResponse(PortalSchema):
    """Client secret used by the frontend to confirm the card payment."""

    client_secret: str
