"""
Payment Service
Handles manual UPI payments: proof submission by the customer and
verification by an administrator
"""

import logging
import os
from datetime import datetime, timezone
from typing import Dict, Optional
from urllib.parse import quote

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError

from tours.extensions import db
from tours.models import Booking, Payment
from tours.models.enums import BookingStatus, PaymentStatus, PaymentType
from tours.services.errors import (
    NotFoundError, PermissionDeniedError, StateError, StorageError, ValidationError
)
from tours.services.evidence import PaymentEvidenceStore
from tours.services.identity import Actor, require_actor, require_admin
from tours.services.pricing import PricingCalculator
from tours.services.settings import SettingsProvider
from tours.utils.audit_logging import AuditLogger
from tours.utils.validation import Validator

logger = logging.getLogger(__name__)


# verified and rejected are terminal
PAYMENT_TRANSITIONS = {
    PaymentStatus.PENDING: {PaymentStatus.VERIFIED, PaymentStatus.REJECTED},
    PaymentStatus.VERIFIED: set(),
    PaymentStatus.REJECTED: set(),
}


class PaymentService:
    """Service for payment proof submission and verification"""

    def __init__(self, config, evidence_store: Optional[PaymentEvidenceStore] = None):
        """
        Initialize payment service with configuration

        Args:
            config: Flask app config object
            evidence_store: Where screenshots go (built from config if omitted)
        """
        self.evidence_store = evidence_store or PaymentEvidenceStore.from_config(config)

    @staticmethod
    def _parse_payment_type(payment_type) -> Optional[PaymentType]:
        try:
            return PaymentType(str(payment_type or '').strip().lower())
        except ValueError:
            return None

    def _get_owned_booking(self, actor: Actor, booking_id: str) -> Booking:
        booking = db.session.get(Booking, booking_id)
        if not booking:
            raise NotFoundError('Booking not found')
        if booking.user_id != actor.id:
            raise PermissionDeniedError("You don't have access to this booking")
        return booking

    def submit_payment(
        self,
        actor: Optional[Actor],
        booking_id: str,
        payment_type,
        utr_id: str,
        proof_bytes: Optional[bytes],
        proof_filename: Optional[str]
    ) -> Payment:
        """
        Record a payment the customer made outside the system

        The screenshot is stored first; the pending Payment is only written
        once a reference exists. 'full' is always the booking's total price,
        earlier payments are not subtracted.

        Raises:
            ValidationError: missing UTR, payment type or screenshot
            StateError: booking is cancelled
            StorageError: screenshot upload or database write failed
        """
        actor = require_actor(actor)
        booking = self._get_owned_booking(actor, booking_id)

        errors = {}
        parsed_type = self._parse_payment_type(payment_type)
        if parsed_type is None:
            errors['paymentType'] = 'Payment type must be advance or full'

        utr = Validator.sanitize_input(utr_id)
        if not utr:
            errors['utrId'] = 'UTR / transaction ID is required'
        elif len(utr) > 50:
            errors['utrId'] = 'UTR / transaction ID is too long'

        extension = os.path.splitext(proof_filename or '')[1]
        if not proof_bytes:
            errors['screenshot'] = 'Payment screenshot is required'
        elif not self.evidence_store.is_allowed(extension):
            allowed = ', '.join(sorted(self.evidence_store.allowed_extensions))
            errors['screenshot'] = f'Screenshot must be one of: {allowed}'

        if errors:
            raise ValidationError('Please enter UTR ID and upload payment screenshot', errors)

        if booking.status == BookingStatus.CANCELLED:
            raise StateError('Payments cannot be submitted for a cancelled booking',
                             {'status': booking.status.value})

        stored = self.evidence_store.store(booking.id, proof_bytes, extension)

        payment = Payment(
            booking_id=booking.id,
            user_id=actor.id,
            amount=PricingCalculator.amount_for_payment_type(
                booking.total_price, booking.advance_payment, parsed_type.value
            ),
            payment_type=parsed_type,
            utr_id=utr,
            screenshot_url=stored.url,
            screenshot_path=stored.path,
            status=PaymentStatus.PENDING
        )

        try:
            db.session.add(payment)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            self.evidence_store.delete(stored.path)
            logger.error(f"Failed to record payment for booking {booking.id}: {str(e)}")
            raise StorageError('Failed to submit payment')

        logger.info(f"Payment submitted: {payment.id} ({parsed_type.value}, {payment.amount}) for {booking.booking_reference}")
        return payment

    def verify_payment(self, actor: Optional[Actor], payment_id: str, status) -> Payment:
        """
        Mark a pending payment verified or rejected

        The owning booking is left alone; confirming it is a separate
        admin action.

        Raises:
            ValidationError: status is not verified/rejected
            NotFoundError: unknown payment
            StateError: the payment was already reviewed
        """
        actor = require_admin(actor)

        try:
            target = PaymentStatus(str(status or '').strip().lower())
        except ValueError:
            target = None
        if target not in (PaymentStatus.VERIFIED, PaymentStatus.REJECTED):
            raise ValidationError('Invalid verification status',
                                  {'status': 'Status must be verified or rejected'})

        payment = db.session.get(Payment, payment_id)
        if not payment:
            raise NotFoundError('Payment not found')

        if target not in PAYMENT_TRANSITIONS[payment.status]:
            raise StateError(
                f'Payment has already been {payment.status.value}',
                {'status': payment.status.value}
            )

        previous = payment.status
        payment.status = target
        payment.verified_by = actor.id
        payment.verified_at = datetime.now(timezone.utc)

        try:
            AuditLogger.log_action(
                user_id=actor.id,
                action=f'payment_{target.value}',
                entity_type='payment',
                entity_id=payment.id,
                description=f'Admin marked payment {payment.utr_id} as {target.value}',
                changes={'status': {'from': previous.value, 'to': target.value}}
            )
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to update payment {payment_id}: {str(e)}")
            raise StorageError('Failed to update payment')

        logger.info(f"Payment {payment.id}: {previous.value} -> {target.value}")
        return payment

    def query_payments(self, actor: Optional[Actor], status: Optional[str] = None):
        """Admin query over all payments, optionally filtered by status"""
        require_admin(actor)
        query = Payment.query
        if status:
            try:
                query = query.filter(Payment.status == PaymentStatus(status))
            except ValueError:
                valid = ', '.join(s.value for s in PaymentStatus)
                raise ValidationError('Invalid status filter', {'status': f'Status must be one of: {valid}'})
        return query.order_by(desc(Payment.created_at))

    def get_payment_instructions(self, actor: Optional[Actor], booking_id: str,
                                 payment_type: str = 'advance') -> Dict:
        """
        Where and how much to pay for a booking

        Returns:
            Dict with UPI id, payee, amount and a upi:// deep link
        """
        actor = require_actor(actor)
        booking = self._get_owned_booking(actor, booking_id)

        parsed_type = self._parse_payment_type(payment_type)
        if parsed_type is None:
            raise ValidationError('Invalid payment type', {'type': 'Payment type must be advance or full'})

        settings = SettingsProvider.get_settings()
        amount = PricingCalculator.amount_for_payment_type(
            booking.total_price, booking.advance_payment, parsed_type.value
        )
        upi_url = (
            f"upi://pay?pa={settings.upi_number}"
            f"&pn={quote(settings.payee_name)}"
            f"&am={amount}&cu=INR"
        )

        return {
            'booking_id': booking.id,
            'payment_type': parsed_type.value,
            'amount': float(amount),
            'total_price': float(booking.total_price),
            'advance_payment': float(booking.advance_payment),
            'advance_per_head': float(settings.advance_per_head),
            'upi_number': settings.upi_number,
            'upi_qr_code': settings.upi_qr_code,
            'payee_name': settings.payee_name,
            'upi_url': upi_url,
        }
