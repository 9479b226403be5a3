"""
Admin API Validation Schemas
Handles request validation for admin endpoints
"""
from typing import Dict, Any, Tuple
from decimal import Decimal, InvalidOperation

from tours.utils.validation import Validator


class AdminSchemas:
    """Validation schemas for admin API endpoints"""

    # ===== Booking Management Schemas =====

    @staticmethod
    def validate_booking_cancellation(data: Dict[str, Any]) -> Tuple[bool, Dict[str, str], Dict[str, Any]]:
        """Validate booking cancellation request (reason is optional)"""
        errors = {}
        cleaned_data = {}

        if data.get('reason') is not None:
            reason = str(data['reason']).strip()
            if len(reason) > 500:
                errors['reason'] = 'Cancellation reason must be at most 500 characters'
            elif reason:
                cleaned_data['reason'] = reason

        return len(errors) == 0, errors, cleaned_data

    # ===== Payment Management Schemas =====

    @staticmethod
    def validate_payment_verification(data: Dict[str, Any]) -> Tuple[bool, Dict[str, str], Dict[str, Any]]:
        """Validate payment verification request"""
        errors = {}
        cleaned_data = {}

        valid_statuses = ['verified', 'rejected']
        status = str(data.get('status') or '').strip().lower()
        if status not in valid_statuses:
            errors['status'] = f'Status must be one of: {", ".join(valid_statuses)}'
        else:
            cleaned_data['status'] = status

        return len(errors) == 0, errors, cleaned_data

    # ===== Settings Schemas =====

    @staticmethod
    def validate_settings_update(data: Dict[str, Any]) -> Tuple[bool, Dict[str, str], Dict[str, Any]]:
        """
        Validate web settings update request

        Returns:
            (is_valid, errors, cleaned_data) with model column names as keys
        """
        errors = {}
        cleaned_data = {}

        if 'upiNumber' in data:
            upi_number = str(data['upiNumber'] or '').strip()
            if not upi_number:
                errors['upiNumber'] = 'UPI number cannot be empty'
            else:
                cleaned_data['upi_number'] = upi_number

        if 'upiQrCode' in data:
            cleaned_data['upi_qr_code'] = str(data['upiQrCode']).strip() if data['upiQrCode'] else None

        if 'advanceAmountPerHead' in data:
            try:
                advance = Decimal(str(data['advanceAmountPerHead']))
                if not advance.is_finite() or advance < 0:
                    errors['advanceAmountPerHead'] = 'Advance amount cannot be negative'
                else:
                    cleaned_data['advance_amount_per_head'] = advance
            except (InvalidOperation, ValueError, TypeError):
                errors['advanceAmountPerHead'] = 'Invalid advance amount'

        for field, column in (('whatsappPhoneNumber', 'whatsapp_phone_number'), ('contactPhone', 'contact_phone')):
            if field in data:
                phone = str(data[field] or '').strip()
                if phone and not Validator.validate_phone(phone):
                    errors[field] = 'Invalid phone number format'
                else:
                    cleaned_data[column] = phone or None

        if 'contactEmail' in data:
            email = str(data['contactEmail'] or '').strip().lower()
            if email and not Validator.validate_email(email):
                errors['contactEmail'] = 'Invalid email format'
            else:
                cleaned_data['contact_email'] = email or None

        return len(errors) == 0, errors, cleaned_data

    # ===== Pagination & Filtering Schemas =====

    @staticmethod
    def validate_pagination(data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and clean pagination parameters"""
        page = 1
        per_page = 20

        if 'page' in data:
            try:
                page = max(1, int(data['page']))
            except (ValueError, TypeError):
                pass

        if 'perPage' in data:
            try:
                per_page = min(100, max(1, int(data['perPage'])))
            except (ValueError, TypeError):
                pass

        return {'page': page, 'per_page': per_page}

    @staticmethod
    def pagination_meta(paginated) -> Dict[str, int]:
        return {
            'page': paginated.page,
            'perPage': paginated.per_page,
            'totalPages': paginated.pages,
            'totalItems': paginated.total
        }
