from dataclasses import dataclass

from src.events.dtos import RsvpStatus
from src.rsvp.aggregation import RsvpStats, aggregate_rsvps


@dataclass
class Row:
    rsvp_status: RsvpStatus | None = None
    plus_one_count: int | None = None
    meal_choice: str | None = None


def test_ceremony_counts():
    rows = [
        Row(RsvpStatus.ATTENDING, plus_one_count=1, meal_choice="fish"),
        Row(RsvpStatus.ATTENDING, meal_choice="beef"),
        Row(RsvpStatus.ATTENDING, plus_one_count=2, meal_choice="fish"),
        Row(RsvpStatus.DECLINED, plus_one_count=3, meal_choice="beef"),
        Row(),
    ]

    stats = aggregate_rsvps(rows)

    assert stats == RsvpStats(
        invited=5,
        attending=3,
        declined=1,
        maybe=0,
        pending=1,
        headcount=6,
        meal_counts={"fish": 2, "beef": 1},
    )
    assert stats.responded == 4


def test_maybe_counts_as_responded_but_not_headcount():
    stats = aggregate_rsvps([Row(RsvpStatus.MAYBE, plus_one_count=2), Row("ATTENDING")])

    assert stats.maybe == 1
    assert stats.attending == 1
    assert stats.pending == 0
    assert stats.responded == 2
    assert stats.headcount == 1


def test_no_invitations():
    stats = aggregate_rsvps([])

    assert stats == RsvpStats()
    assert stats.responded == 0
    assert stats.meal_counts == {}


def test_two_guest_ceremony():
    rows = [
        Row(RsvpStatus.ATTENDING, plus_one_count=1, meal_choice="chicken"),
        Row(RsvpStatus.DECLINED),
    ]

    stats = aggregate_rsvps(rows)

    assert (stats.invited, stats.attending, stats.declined, stats.pending) == (2, 1, 1, 0)
    assert stats.headcount == 2
    assert stats.meal_counts == {"chicken": 1}


def test_order_does_not_matter():
    rows = [
        Row(RsvpStatus.ATTENDING, plus_one_count=2, meal_choice="fish"),
        Row(RsvpStatus.DECLINED),
        Row(),
        Row(RsvpStatus.ATTENDING, meal_choice="beef"),
    ]

    assert aggregate_rsvps(rows) == aggregate_rsvps(list(reversed(rows)))
