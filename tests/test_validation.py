import pytest
from datetime import date

from tours.services.errors import ValidationError
from tours.services.validation import BookingValidator


def test_valid_submission_is_cleaned(package, trip_date):
    submission = BookingValidator.validate_submission(
        package,
        trip_date.isoformat(),
        '2',
        [{'name': '  Anu ', 'age': '31', 'phone': '98765 43210'}, {'name': 'Ravi', 'age': 34}]
    )

    assert submission.booking_date == trip_date
    assert submission.member_count == 2
    assert [m.name for m in submission.members] == ['Anu', 'Ravi']
    assert submission.members[0].age == 31
    assert submission.members[1].phone is None


def test_missing_member_details_are_reported_per_slot(package, trip_date):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(
            package, trip_date.isoformat(), 2, [{'name': 'Anu', 'age': 31}]
        )

    errors = exc.value.errors
    assert 'members[1].name' in errors
    assert 'members[1].age' in errors
    assert 'members[0].name' not in errors
    assert 'name and age are required' in exc.value.message


@pytest.mark.parametrize('age', [0, 121, 'old', True])
def test_member_age_must_be_in_range(package, trip_date, age):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(
            package, trip_date.isoformat(), 1, [{'name': 'Anu', 'age': age}]
        )

    assert 'members[0].age' in exc.value.errors


def test_invalid_member_phone_is_rejected(package, trip_date):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(
            package, trip_date.isoformat(), 1, [{'name': 'Anu', 'age': 30, 'phone': '12'}]
        )

    assert 'members[0].phone' in exc.value.errors


def test_more_member_entries_than_count_is_rejected(package, trip_date):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(
            package, trip_date.isoformat(), 1,
            [{'name': 'Anu', 'age': 30}, {'name': 'Ravi', 'age': 34}]
        )

    assert 'members' in exc.value.errors


@pytest.mark.parametrize('booking_date', [None, '', 'next week', date(2001, 1, 1).isoformat()])
def test_booking_date_must_be_an_available_date(package, booking_date):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(package, booking_date, 1, [{'name': 'Anu', 'age': 30}])

    assert 'bookingDate' in exc.value.errors
    assert exc.value.message == 'Booking validation failed'


def test_out_of_range_member_count_is_rejected(package, trip_date):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(package, trip_date.isoformat(), 25, [])

    assert 'numberOfMembers' in exc.value.errors


@pytest.mark.parametrize('members', [5, 'Anu', {'name': 'Anu', 'age': 31}])
def test_members_must_be_a_list(package, trip_date, members):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(package, trip_date.isoformat(), 1, members)

    assert exc.value.errors['members'] == 'Members must be a list'


def test_booking_date_with_trailing_text_is_rejected(package, trip_date):
    with pytest.raises(ValidationError) as exc:
        BookingValidator.validate_submission(
            package, f'{trip_date.isoformat()}garbage', 1, [{'name': 'Anu', 'age': 30}]
        )

    assert exc.value.errors['bookingDate'] == 'Booking date must be in YYYY-MM-DD format'
