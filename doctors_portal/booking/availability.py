"""Slot availability computation.

Reconciles each service's slot template against the bookings already made
for a date. Pure functions; the store-facing wrapper lives in
``doctors_portal.services.booking``.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol


class SlotTemplate(Protocol):
    """Anything with a service name and an ordered slot template."""

    id: str
    name: str
    price: float
    slots: list[str]


class BookedSlot(Protocol):
    """Anything recording a booked slot of a treatment on a date."""

    treatment: str
    date: str
    slot: str


@dataclass
class AvailableService:
    """A service whose slots have been narrowed to the open ones."""

    id: str
    name: str
    price: float
    slots: list[str]


def filter_available_slots(template: Sequence[str], booked: Iterable[str]) -> list[str]:
    """Return template slots that are not booked, in template order.

    Examples:
        >>> filter_available_slots(["09:00", "10:00", "11:00"], ["10:00"])
        ['09:00', '11:00']
        >>> filter_available_slots(["09:00"], [])
        ['09:00']
    """
    taken = set(booked)
    return [slot for slot in template if slot not in taken]


def booked_slots_by_treatment(bookings: Iterable[BookedSlot]) -> dict[str, set[str]]:
    """Group booked slot labels by treatment name."""
    grouped: dict[str, set[str]] = defaultdict(set)
    for booking in bookings:
        grouped[booking.treatment].add(booking.slot)
    return grouped


def apply_availability(
    services: Iterable[SlotTemplate],
    bookings: Iterable[BookedSlot],
) -> list[AvailableService]:
    """Compute open slots for each service given one day's bookings.

    ``bookings`` must already be restricted to a single date. The input
    services are not modified; new ``AvailableService`` values are returned
    in the same order.

    Args:
        services: Services with their full slot templates
        bookings: Bookings for the date being queried

    Returns:
        One AvailableService per input service
    """
    booked = booked_slots_by_treatment(bookings)

    return [
        AvailableService(
            id=service.id,
            name=service.name,
            price=service.price,
            slots=filter_available_slots(service.slots or [], booked.get(service.name, ())),
        )
        for service in services
    ]
