"""
Booking Service
Creates bookings with their member manifest and moves them through
pending -> confirmed / cancelled
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError

from tours.extensions import db
from tours.models import Booking, BookingMember
from tours.models.enums import BookingStatus
from tours.services.catalog import PackageCatalog
from tours.services.errors import NotFoundError, PermissionDeniedError, StateError, StorageError, ValidationError
from tours.services.identity import Actor, require_actor, require_admin
from tours.services.pricing import PricingCalculator
from tours.services.settings import SettingsProvider
from tours.services.validation import BookingValidator
from tours.utils.audit_logging import AuditLogger

logger = logging.getLogger(__name__)


# confirmed and cancelled are terminal
BOOKING_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: set(),
    BookingStatus.CANCELLED: set(),
}


class BookingService:
    """Service for booking creation and the booking state machine"""

    @staticmethod
    def create_booking(
        actor: Optional[Actor],
        package_id: str,
        booking_date: Any,
        member_count: Any,
        members: Optional[Sequence[Dict[str, Any]]]
    ) -> Booking:
        """
        Create a pending booking together with all of its members

        Args:
            actor: Authenticated user making the booking (becomes the owner)
            package_id: Active package to book
            booking_date: One of the package's available dates
            member_count: Number of travellers (1-20)
            members: One entry per traveller with name, age and optional phone

        Returns:
            The persisted Booking

        Raises:
            NotFoundError: package missing or inactive
            ValidationError: bad date, count or member details (nothing written)
            StorageError: the database rejected the write (nothing kept)
        """
        actor = require_actor(actor)
        package = PackageCatalog.get_package(package_id)

        submission = BookingValidator.validate_submission(package, booking_date, member_count, members)

        settings = SettingsProvider.get_settings()
        price = PricingCalculator.calculate_booking_price(
            package.price_per_head,
            settings.advance_per_head,
            submission.member_count
        )

        booking = Booking(
            user_id=actor.id,
            package_id=package.id,
            booking_date=submission.booking_date,
            number_of_members=submission.member_count,
            total_price=price.total,
            advance_payment=price.advance,
            remaining_payment=price.remaining,
            status=BookingStatus.PENDING
        )

        # Booking and members are written in one transaction
        try:
            db.session.add(booking)
            db.session.flush()

            for position, member in enumerate(submission.members):
                db.session.add(BookingMember(
                    booking_id=booking.id,
                    position=position,
                    name=member.name,
                    age=member.age,
                    phone=member.phone
                ))

            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to create booking for user {actor.id}: {str(e)}")
            raise StorageError('Failed to create booking. Please try again.')

        logger.info(
            f"Booking created: {booking.booking_reference} "
            f"({submission.member_count} members, total {price.total})"
        )
        return booking

    @staticmethod
    def get_booking(actor: Optional[Actor], booking_id: str) -> Booking:
        """Fetch a booking visible to the actor (owner or admin)"""
        actor = require_actor(actor)
        booking = db.session.get(Booking, booking_id)
        if not booking:
            raise NotFoundError('Booking not found')
        if not actor.is_admin and booking.user_id != actor.id:
            raise PermissionDeniedError("You don't have access to this booking")
        return booking

    @staticmethod
    def list_user_bookings(actor: Optional[Actor]) -> List[Booking]:
        actor = require_actor(actor)
        return (
            Booking.query
            .filter_by(user_id=actor.id)
            .order_by(desc(Booking.created_at))
            .all()
        )

    @staticmethod
    def query_bookings(actor: Optional[Actor], status: Optional[str] = None):
        """Admin query over all bookings, optionally filtered by status"""
        require_admin(actor)
        query = Booking.query
        if status:
            try:
                query = query.filter(Booking.status == BookingStatus(status))
            except ValueError:
                valid = ', '.join(s.value for s in BookingStatus)
                raise ValidationError('Invalid status filter', {'status': f'Status must be one of: {valid}'})
        return query.order_by(desc(Booking.created_at))

    @staticmethod
    def confirm_booking(actor: Optional[Actor], booking_id: str) -> Booking:
        """
        Confirm a pending booking

        Payment state is not checked; the admin decides. Confirming an
        already confirmed booking returns it unchanged.
        """
        return BookingService._transition(actor, booking_id, BookingStatus.CONFIRMED)

    @staticmethod
    def cancel_booking(actor: Optional[Actor], booking_id: str, reason: Optional[str] = None) -> Booking:
        """Cancel a pending booking; cancelling twice is a no-op"""
        return BookingService._transition(actor, booking_id, BookingStatus.CANCELLED, reason=reason)

    @staticmethod
    def _transition(
        actor: Optional[Actor],
        booking_id: str,
        target: BookingStatus,
        reason: Optional[str] = None
    ) -> Booking:
        actor = require_admin(actor)
        booking = db.session.get(Booking, booking_id)
        if not booking:
            raise NotFoundError('Booking not found')

        if booking.status == target:
            return booking

        if target not in BOOKING_TRANSITIONS[booking.status]:
            raise StateError(
                f'Cannot change booking from {booking.status.value} to {target.value}',
                {'status': booking.status.value}
            )

        previous = booking.status
        now = datetime.now(timezone.utc)
        booking.status = target
        booking.updated_at = now
        if target == BookingStatus.CONFIRMED:
            booking.confirmed_at = now
        elif target == BookingStatus.CANCELLED:
            booking.cancelled_at = now

        changes = {'status': {'from': previous.value, 'to': target.value}}
        if reason:
            changes['reason'] = reason

        try:
            AuditLogger.log_action(
                user_id=actor.id,
                action=f'booking_{target.value}',
                entity_type='booking',
                entity_id=booking.id,
                description=f'Admin set booking {booking.booking_reference} to {target.value}',
                changes=changes
            )
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to update booking {booking_id}: {str(e)}")
            raise StorageError('Failed to update booking')

        logger.info(f"Booking {booking.booking_reference}: {previous.value} -> {target.value}")
        return booking
