import pytest
from decimal import Decimal

from tours.services.errors import ValidationError
from tours.services.pricing import PricingCalculator


def test_calculate_booking_price_example():
    price = PricingCalculator.calculate_booking_price(5000, 500, 3)

    assert price.total == Decimal('15000.00')
    assert price.advance == Decimal('1500.00')
    assert price.remaining == Decimal('13500.00')


@pytest.mark.parametrize('count', [1, 7, 20])
def test_total_and_advance_scale_with_members(count):
    price = PricingCalculator.calculate_booking_price('2499.50', '250', count)

    assert price.total == Decimal('2499.50') * count
    assert price.advance == Decimal('250.00') * count
    assert price.total == price.advance + price.remaining


def test_remaining_is_clamped_when_advance_exceeds_total():
    price = PricingCalculator.calculate_booking_price(300, 500, 2)

    assert price.total == Decimal('600.00')
    assert price.advance == Decimal('1000.00')
    assert price.remaining == Decimal('0.00')


@pytest.mark.parametrize('count', [0, 21, -1, 'abc', None, 2.5, True])
def test_invalid_member_count_is_rejected(count):
    with pytest.raises(ValidationError) as exc:
        PricingCalculator.calculate_booking_price(5000, 500, count)

    assert 'numberOfMembers' in exc.value.errors


def test_member_count_accepts_numeric_strings():
    assert PricingCalculator.validate_member_count('4') == 4
    assert PricingCalculator.validate_member_count(3.0) == 3


def test_negative_rates_are_rejected():
    with pytest.raises(ValidationError) as exc:
        PricingCalculator.calculate_booking_price(-1, -5, 2)

    assert set(exc.value.errors) == {'pricePerHead', 'advancePerHead'}


def test_amount_for_payment_type():
    assert PricingCalculator.amount_for_payment_type(15000, 1500, 'advance') == Decimal('1500.00')
    assert PricingCalculator.amount_for_payment_type(15000, 1500, 'full') == Decimal('15000.00')
