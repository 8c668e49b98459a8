"""Payment intent endpoint."""

from fastapi import APIRouter

from doctors_portal.api.deps import Payments
from doctors_portal.schemas.payment import PaymentIntentRequest, PaymentIntentResponse

router = APIRouter()


@router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponse,
    summary="Create payment intent",
    description="Create a card charge for `price` and return its client secret",
)
async def create_payment_intent(
    request: PaymentIntentRequest,
    gateway: Payments,
) -> PaymentIntentResponse:
    client_secret = await gateway.create_payment_intent(request.price)
    return PaymentIntentResponse(client_secret=client_secret)
