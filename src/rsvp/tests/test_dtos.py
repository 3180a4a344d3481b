from uuid import uuid4

import pytest

from src.events.dtos import RsvpStatus
from src.exceptions import ValidationError
from src.rsvp.dtos import clean_rsvp_submission


def test_clean_submission():
    event_id = uuid4()

    submission = clean_rsvp_submission(
        event_id,
        "ATTENDING",
        plus_one_count=1,
        plus_one_name="  Carl ",
        meal_choice="",
        dietary_notes="No nuts",
    )

    assert submission.event_id == event_id
    assert submission.rsvp_status is RsvpStatus.ATTENDING
    assert submission.plus_one_name == "Carl"
    assert submission.meal_choice is None
    assert submission.dietary_notes == "No nuts"


@pytest.mark.parametrize("status", [None, "", "MAYBE", "sure"])
def test_status_must_be_attending_or_declined(status):
    with pytest.raises(ValidationError) as exc_info:
        clean_rsvp_submission(uuid4(), status)

    assert exc_info.value.field_errors == {
        "rsvp_status": "Please choose whether you will attend"
    }


def test_limits():
    with pytest.raises(ValidationError) as exc_info:
        clean_rsvp_submission(uuid4(), "DECLINED", plus_one_count=11, dietary_notes="x" * 501)

    assert set(exc_info.value.field_errors) == {"plus_one_count", "dietary_notes"}
