"""Seat accounting for seating tables.

A seated guest takes one seat plus one per plus-one they RSVP'd with. The
same check runs in the browser for instant feedback and again inside the
assignment transaction, which is the one that counts.
"""

from collections.abc import Iterable


def seat_weight(plus_one_count: int | None) -> int:
    return 1 + (plus_one_count or 0)


def occupancy(occupant_plus_ones: Iterable[int | None]) -> int:
    """Seats taken by guests with the given plus-one counts."""
    return sum(seat_weight(count) for count in occupant_plus_ones)


def can_assign(
    capacity: int, incoming_weight: int, occupant_plus_ones: Iterable[int | None]
) -> bool:
    return occupancy(occupant_plus_ones) + incoming_weight <= capacity
