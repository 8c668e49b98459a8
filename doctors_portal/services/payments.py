"""Payment intents and payment reconciliation."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import stripe
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from doctors_portal.core.config import Settings
from doctors_portal.core.exceptions import PaymentGatewayError
from doctors_portal.core.logging import audit_logger
from doctors_portal.db.base import utc_now
from doctors_portal.models.booking import Booking
from doctors_portal.models.payment import Payment
from doctors_portal.schemas.payment import PaymentConfirmation

logger = logging.getLogger(__name__)


def to_minor_units(price: float) -> int:
    """Convert a price in major currency units to integer cents.

    Examples:
        >>> to_minor_units(12.5)
        1250
        >>> to_minor_units(0.1 + 0.2)
        30
    """
    return int(round(price * 100))


class PaymentGateway(ABC):
    """Creates charges with an external payment processor."""

    @abstractmethod
    async def create_payment_intent(self, price: float) -> str:
        """Create a charge for ``price`` and return its client secret."""
        pass


class StripePaymentGateway(PaymentGateway):
    """Payment gateway backed by Stripe PaymentIntents."""

    def __init__(self, api_key: str, currency: str = "usd") -> None:
        self.api_key = api_key
        self.currency = currency

    @classmethod
    def from_settings(cls, settings: Settings) -> "StripePaymentGateway":
        return cls(api_key=settings.stripe_secret_key, currency=settings.payment_currency)

    async def create_payment_intent(self, price: float) -> str:
        """Create a card PaymentIntent.

        Args:
            price: Amount in major currency units

        Returns:
            The intent's client secret

        Raises:
            PaymentGatewayError: If Stripe rejects the request
        """
        amount = to_minor_units(price)
        try:
            intent = await run_in_threadpool(
                stripe.PaymentIntent.create,
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
                api_key=self.api_key,
            )
        except stripe.StripeError as exc:
            logger.error(f"Stripe payment intent creation failed: {exc}")
            raise PaymentGatewayError(getattr(exc, "user_message", None)) from exc

        logger.info(f"Created payment intent {intent.id} for {amount} {self.currency}")
        return intent.client_secret


@dataclass
class ReconciliationResult:
    """Outcome of attaching a payment to a booking.

    Attributes:
        matched_count: Number of bookings the update matched (0 or 1)
        payment: The stored payment record
        booking: The updated booking, None when no booking matched
    """

    matched_count: int
    payment: Payment
    booking: Booking | None = None


class PaymentService:
    """Service recording payment confirmations against bookings."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def reconcile(
        self,
        booking_id: str,
        confirmation: PaymentConfirmation,
        actor: str | None = None,
    ) -> ReconciliationResult:
        """Store a payment and mark its booking paid.

        The payment record is written first and kept even when no booking
        has ``booking_id``. The two writes are not atomic.

        Args:
            booking_id: Id of the booking being paid for
            confirmation: Payment evidence from the client
            actor: Email of the authenticated caller

        Returns:
            ReconciliationResult; check ``matched_count`` to know whether
            a booking was updated
        """
        payment = Payment(
            booking_id=booking_id,
            transaction_id=confirmation.transaction_id,
            amount=confirmation.amount,
            details=confirmation.details,
        )
        self.session.add(payment)
        await self.session.commit()
        await self.session.refresh(payment)

        result = await self.session.execute(
            update(Booking)
            .where(Booking.id == booking_id)
            .values(
                paid=True,
                transaction_id=confirmation.transaction_id,
                paid_at=utc_now(),
            )
        )
        await self.session.commit()
        matched_count = result.rowcount

        if not matched_count:
            logger.warning(
                f"Payment {confirmation.transaction_id} recorded for unknown booking {booking_id}"
            )
            return ReconciliationResult(matched_count=0, payment=payment)

        booking = await self.session.get(Booking, booking_id, populate_existing=True)

        audit_logger.log(
            action="booking_paid",
            actor=actor,
            entity_type="booking",
            entity_id=booking_id,
            metadata={"transaction_id": confirmation.transaction_id},
        )
        return ReconciliationResult(matched_count=matched_count, payment=payment, booking=booking)
