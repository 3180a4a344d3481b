"""
RSVP aggregation.

A pure fold over invitation rows, recomputed on every read. Each row only
needs ``rsvp_status``, ``plus_one_count`` and ``meal_choice``, so ORM rows,
DTOs and test doubles can all be aggregated.

Buckets:
    attending / declined / maybe  explicit answers
    pending                       no answer yet (null status)
    responded                     any non-null status

Headcount is ``1 + plus_one_count`` summed over ATTENDING rows only, meal
counts come from ATTENDING rows with a meal choice.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from src.events.dtos import RsvpStatus
from src.seating.capacity import seat_weight


class RsvpRow(Protocol):
    rsvp_status: RsvpStatus | None
    plus_one_count: int | None
    meal_choice: str | None


@dataclass(frozen=True)
class RsvpStats:
    invited: int = 0
    attending: int = 0
    declined: int = 0
    maybe: int = 0
    pending: int = 0
    headcount: int = 0
    meal_counts: dict[str, int] = field(default_factory=dict)

    @property
    def responded(self) -> int:
        return self.attending + self.declined + self.maybe


def aggregate_rsvps(rows: Iterable[RsvpRow]) -> RsvpStats:
    statuses: Counter = Counter()
    meals: Counter = Counter()
    invited = 0
    headcount = 0

    for row in rows:
        invited += 1
        status = RsvpStatus(row.rsvp_status) if row.rsvp_status is not None else None
        statuses[status] += 1
        if status is RsvpStatus.ATTENDING:
            headcount += seat_weight(row.plus_one_count)
            if row.meal_choice:
                meals[row.meal_choice] += 1

    return RsvpStats(
        invited=invited,
        attending=statuses[RsvpStatus.ATTENDING],
        declined=statuses[RsvpStatus.DECLINED],
        maybe=statuses[RsvpStatus.MAYBE],
        pending=statuses[None],
        headcount=headcount,
        meal_counts=dict(meals),
    )
