import pytest
from decimal import Decimal
from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from tours.models import AuditLog, Booking, BookingMember, WebSettings
from tours.models.enums import BookingStatus
from tours.services.booking import BookingService
from tours.services.errors import (
    NotFoundError, PermissionDeniedError, StateError, StorageError, ValidationError
)


@pytest.fixture
def booking(user_actor, package, web_settings, trip_date, members):
    return BookingService.create_booking(user_actor, package.id, trip_date.isoformat(), 2, members)


class TestCreateBooking:

    def test_creates_pending_booking_with_members(self, user_actor, package, web_settings, trip_date):
        members = [
            {'name': 'Anu', 'age': 31},
            {'name': 'Ravi', 'age': 34},
            {'name': 'Meera', 'age': 8},
        ]

        booking = BookingService.create_booking(user_actor, package.id, trip_date.isoformat(), 3, members)

        assert booking.status == BookingStatus.PENDING
        assert booking.user_id == user_actor.id
        assert booking.total_price == Decimal('15000.00')
        assert booking.advance_payment == Decimal('1500.00')
        assert booking.remaining_payment == Decimal('13500.00')
        assert booking.booking_reference.startswith('KT-')
        assert [m.name for m in booking.members] == ['Anu', 'Ravi', 'Meera']
        assert BookingMember.query.filter_by(booking_id=booking.id).count() == 3

    def test_uses_default_advance_without_settings_row(self, user_actor, package, trip_date):
        booking = BookingService.create_booking(
            user_actor, package.id, trip_date.isoformat(), 1, [{'name': 'Anu', 'age': 31}]
        )

        assert booking.advance_payment == Decimal('500.00')

    def test_uses_default_advance_when_settings_unreadable(self, db, user_actor, package, trip_date):
        WebSettings.set_values(upi_number='stored@upi', advance_amount_per_head=Decimal('750.00'))

        with patch.object(WebSettings, 'get_current', side_effect=SQLAlchemyError('settings table unreadable')), \
                patch.object(db.session, 'rollback', wraps=db.session.rollback) as rollback:
            booking = BookingService.create_booking(
                user_actor, package.id, trip_date.isoformat(), 1, [{'name': 'Anu', 'age': 31}]
            )

        assert rollback.called
        assert booking.advance_payment == Decimal('500.00')
        assert Booking.query.count() == 1

    def test_missing_member_details_writes_nothing(self, user_actor, package, web_settings, trip_date):
        with pytest.raises(ValidationError) as exc:
            BookingService.create_booking(
                user_actor, package.id, trip_date.isoformat(), 2, [{'name': 'Anu', 'age': 31}]
            )

        assert 'members[1].name' in exc.value.errors
        assert Booking.query.count() == 0
        assert BookingMember.query.count() == 0

    def test_unknown_package(self, user_actor, trip_date, members):
        with pytest.raises(NotFoundError):
            BookingService.create_booking(user_actor, 'missing', trip_date.isoformat(), 2, members)

    def test_inactive_package_cannot_be_booked(self, db, user_actor, package, trip_date, members):
        package.is_active = False
        db.session.commit()

        with pytest.raises(NotFoundError):
            BookingService.create_booking(user_actor, package.id, trip_date.isoformat(), 2, members)

    def test_requires_login(self, package, trip_date, members):
        with pytest.raises(PermissionDeniedError):
            BookingService.create_booking(None, package.id, trip_date.isoformat(), 2, members)

    def test_member_insert_failure_rolls_back_booking(self, db, user_actor, package, web_settings,
                                                      trip_date, members):
        with patch.object(db.session, 'commit', side_effect=SQLAlchemyError('disk full')):
            with pytest.raises(StorageError):
                BookingService.create_booking(user_actor, package.id, trip_date.isoformat(), 2, members)

        assert Booking.query.count() == 0
        assert BookingMember.query.count() == 0


class TestBookingAccess:

    def test_owner_and_admin_can_read(self, booking, user_actor, admin_actor):
        assert BookingService.get_booking(user_actor, booking.id).id == booking.id
        assert BookingService.get_booking(admin_actor, booking.id).id == booking.id

    def test_other_user_cannot_read(self, booking, other_actor):
        with pytest.raises(PermissionDeniedError):
            BookingService.get_booking(other_actor, booking.id)

    def test_list_user_bookings_only_returns_own(self, booking, user_actor, other_actor):
        assert [b.id for b in BookingService.list_user_bookings(user_actor)] == [booking.id]
        assert BookingService.list_user_bookings(other_actor) == []

    def test_query_bookings_filters_by_status(self, booking, admin_actor):
        assert BookingService.query_bookings(admin_actor, 'pending').count() == 1
        assert BookingService.query_bookings(admin_actor, 'confirmed').count() == 0

    def test_query_bookings_rejects_unknown_status(self, admin_actor):
        with pytest.raises(ValidationError):
            BookingService.query_bookings(admin_actor, 'completed')

    def test_query_bookings_is_admin_only(self, user_actor):
        with pytest.raises(PermissionDeniedError):
            BookingService.query_bookings(user_actor)


class TestBookingTransitions:

    def test_confirm_sets_status_and_audit(self, booking, admin_actor):
        confirmed = BookingService.confirm_booking(admin_actor, booking.id)

        assert confirmed.status == BookingStatus.CONFIRMED
        assert confirmed.confirmed_at is not None
        log = AuditLog.query.filter_by(action='booking_confirmed').one()
        assert log.entity_id == booking.id
        assert log.user_id == admin_actor.id

    def test_confirm_is_idempotent(self, booking, admin_actor):
        BookingService.confirm_booking(admin_actor, booking.id)
        again = BookingService.confirm_booking(admin_actor, booking.id)

        assert again.status == BookingStatus.CONFIRMED
        assert AuditLog.query.filter_by(action='booking_confirmed').count() == 1

    def test_cancel_records_reason(self, booking, admin_actor):
        cancelled = BookingService.cancel_booking(admin_actor, booking.id, reason='Customer request')

        assert cancelled.status == BookingStatus.CANCELLED
        assert cancelled.cancelled_at is not None
        log = AuditLog.query.filter_by(action='booking_cancelled').one()
        assert log.changes['reason'] == 'Customer request'

    def test_cancel_is_idempotent(self, booking, admin_actor):
        BookingService.cancel_booking(admin_actor, booking.id)
        assert BookingService.cancel_booking(admin_actor, booking.id).status == BookingStatus.CANCELLED

    def test_cancelled_booking_cannot_be_confirmed(self, booking, admin_actor):
        BookingService.cancel_booking(admin_actor, booking.id)

        with pytest.raises(StateError):
            BookingService.confirm_booking(admin_actor, booking.id)

    def test_confirmed_booking_cannot_be_cancelled(self, booking, admin_actor):
        BookingService.confirm_booking(admin_actor, booking.id)

        with pytest.raises(StateError):
            BookingService.cancel_booking(admin_actor, booking.id)

    def test_owner_cannot_confirm(self, booking, user_actor):
        with pytest.raises(PermissionDeniedError):
            BookingService.confirm_booking(user_actor, booking.id)

    def test_unknown_booking(self, admin_actor):
        with pytest.raises(NotFoundError):
            BookingService.confirm_booking(admin_actor, 'missing')
