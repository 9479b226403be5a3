from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from tours.services.errors import ValidationError
from tours.services.pricing import PricingCalculator
from tours.utils.validation import Validator


@dataclass
class MemberDetails:
    name: str
    age: int
    phone: Optional[str] = None


@dataclass
class BookingSubmission:
    booking_date: date
    member_count: int
    members: List[MemberDetails]


class BookingValidator:
    """Validate a booking request before anything is written"""

    MIN_AGE = 1
    MAX_AGE = 120

    @staticmethod
    def validate_submission(
        package,
        booking_date: Any,
        member_count: Any,
        members: Optional[Sequence[Dict[str, Any]]]
    ) -> BookingSubmission:
        """
        Check date, member count and every member slot.

        Args:
            package: Package being booked (its available dates are checked)
            booking_date: Chosen date, 'YYYY-MM-DD'
            member_count: Number of travellers (1-20)
            members: Member entries with name, age and optional phone

        Returns:
            BookingSubmission with cleaned values

        Raises:
            ValidationError: errors maps each offending field to a message
        """
        errors = {}

        # Date
        chosen_date = None
        if not booking_date:
            errors['bookingDate'] = 'Please select a booking date'
        else:
            chosen_date = Validator.parse_date(booking_date)
            if chosen_date is None:
                errors['bookingDate'] = 'Booking date must be in YYYY-MM-DD format'
            elif chosen_date.isoformat() not in package.get_available_date_values():
                errors['bookingDate'] = 'Selected date is not available for this package'

        # Member count
        count = None
        try:
            count = PricingCalculator.validate_member_count(member_count)
        except ValidationError as e:
            errors.update(e.errors)

        # Members
        if members is None:
            members = []
        elif not isinstance(members, (list, tuple)):
            errors['members'] = 'Members must be a list'
            members = []
        else:
            members = list(members)
        cleaned_members = []
        if count is not None:
            if len(members) > count:
                errors['members'] = f'Expected details for {count} members, got {len(members)}'

            for index in range(count):
                entry = members[index] if index < len(members) else {}
                if not isinstance(entry, dict):
                    entry = {}
                member = BookingValidator._validate_member(entry, index, errors)
                if member:
                    cleaned_members.append(member)

        if errors:
            raise ValidationError(
                'Please fill in all member details (name and age are required)'
                if any(key.startswith('members') for key in errors)
                else 'Booking validation failed',
                errors
            )

        return BookingSubmission(
            booking_date=chosen_date,
            member_count=count,
            members=cleaned_members
        )

    @staticmethod
    def _validate_member(entry: Dict[str, Any], index: int, errors: Dict[str, str]) -> Optional[MemberDetails]:
        prefix = f'members[{index}]'
        valid = True

        name = Validator.sanitize_input(entry.get('name'), max_length=150)
        if not name:
            errors[f'{prefix}.name'] = 'Name is required'
            valid = False

        age = None
        raw_age = entry.get('age')
        if raw_age is None or str(raw_age).strip() == '' or isinstance(raw_age, bool):
            errors[f'{prefix}.age'] = 'Age is required'
            valid = False
        else:
            try:
                age = int(str(raw_age).strip())
            except ValueError:
                errors[f'{prefix}.age'] = 'Age must be a whole number'
                valid = False
            else:
                if not BookingValidator.MIN_AGE <= age <= BookingValidator.MAX_AGE:
                    errors[f'{prefix}.age'] = (
                        f'Age must be between {BookingValidator.MIN_AGE} and {BookingValidator.MAX_AGE}'
                    )
                    valid = False

        phone = Validator.sanitize_input(entry.get('phone'), max_length=20) or None
        if phone and not Validator.validate_phone(phone):
            errors[f'{prefix}.phone'] = 'Invalid phone number'
            valid = False

        if not valid:
            return None
        return MemberDetails(name=name, age=age, phone=phone)
