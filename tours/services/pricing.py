from decimal import Decimal
from typing import NamedTuple, Union

from tours.services.errors import ValidationError

Number = Union[Decimal, int, float, str]


class BookingPrice(NamedTuple):
    total: Decimal
    advance: Decimal
    remaining: Decimal


class PricingCalculator:
    """Calculate booking prices and advance amounts"""

    MIN_MEMBERS = 1
    MAX_MEMBERS = 20

    @staticmethod
    def to_amount(value: Number) -> Decimal:
        """Convert a rate to a 2-place Decimal"""
        return Decimal(str(value)).quantize(Decimal('0.01'))

    @staticmethod
    def validate_member_count(member_count) -> int:
        """Return the member count as int, or raise ValidationError"""
        not_whole = ValidationError('Invalid number of members',
                                    {'numberOfMembers': 'Number of members must be a whole number'})
        if isinstance(member_count, bool):
            raise not_whole
        if isinstance(member_count, float) and not member_count.is_integer():
            raise not_whole
        try:
            count = int(member_count)
        except (ValueError, TypeError):
            raise not_whole

        if not PricingCalculator.MIN_MEMBERS <= count <= PricingCalculator.MAX_MEMBERS:
            raise ValidationError(
                'Invalid number of members',
                {'numberOfMembers': (
                    f'Number of members must be between {PricingCalculator.MIN_MEMBERS} '
                    f'and {PricingCalculator.MAX_MEMBERS}'
                )}
            )
        return count

    @staticmethod
    def calculate_booking_price(
        price_per_head: Number,
        advance_per_head: Number,
        member_count: int
    ) -> BookingPrice:
        """
        Calculate total, advance and remaining amounts for a booking.

        The advance is always count x advance_per_head. When the advance
        exceeds the total the remaining amount is clamped to zero.
        """
        price = PricingCalculator.to_amount(price_per_head)
        advance_rate = PricingCalculator.to_amount(advance_per_head)

        errors = {}
        if price < 0:
            errors['pricePerHead'] = 'Price per head cannot be negative'
        if advance_rate < 0:
            errors['advancePerHead'] = 'Advance per head cannot be negative'
        if errors:
            raise ValidationError('Invalid pricing configuration', errors)

        count = PricingCalculator.validate_member_count(member_count)

        total = price * count
        advance = advance_rate * count
        remaining = max(Decimal('0.00'), total - advance)

        return BookingPrice(total=total, advance=advance, remaining=remaining)

    @staticmethod
    def amount_for_payment_type(total: Number, advance: Number, payment_type: str) -> Decimal:
        """Amount due for one payment; 'full' is always the whole total"""
        if payment_type == 'advance':
            return PricingCalculator.to_amount(advance)
        return PricingCalculator.to_amount(total)
