import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from tours.extensions import db
from tours.models import WebSettings

logger = logging.getLogger(__name__)


@dataclass
class PaymentSettings:
    upi_number: str
    advance_per_head: Decimal
    payee_name: str
    upi_qr_code: Optional[str] = None
    whatsapp_phone_number: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    is_default: bool = False

    def to_public_dict(self):
        return {
            'upi_number': self.upi_number,
            'upi_qr_code': self.upi_qr_code,
            'advance_amount_per_head': float(self.advance_per_head),
            'whatsapp_phone_number': self.whatsapp_phone_number,
            'contact_email': self.contact_email,
            'contact_phone': self.contact_phone,
        }


class SettingsProvider:
    """Read-only access to payment configuration with built-in fallbacks"""

    @staticmethod
    def defaults() -> PaymentSettings:
        config = current_app.config
        return PaymentSettings(
            upi_number=config['DEFAULT_UPI_ID'],
            advance_per_head=Decimal(str(config['DEFAULT_ADVANCE_PER_HEAD'])),
            payee_name=config['PAYEE_NAME'],
            contact_email=config.get('DEFAULT_CONTACT_EMAIL'),
            contact_phone=config.get('DEFAULT_CONTACT_PHONE'),
            is_default=True
        )

    @staticmethod
    def get_settings() -> PaymentSettings:
        """Current settings, or the configured defaults if none are stored"""
        try:
            row = WebSettings.get_current()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to read web settings, using defaults: {str(e)}")
            return SettingsProvider.defaults()

        if row is None:
            return SettingsProvider.defaults()

        defaults = SettingsProvider.defaults()
        return PaymentSettings(
            upi_number=row.upi_number or defaults.upi_number,
            advance_per_head=(
                Decimal(str(row.advance_amount_per_head))
                if row.advance_amount_per_head is not None
                else defaults.advance_per_head
            ),
            payee_name=defaults.payee_name,
            upi_qr_code=row.upi_qr_code,
            whatsapp_phone_number=row.whatsapp_phone_number,
            contact_email=row.contact_email or defaults.contact_email,
            contact_phone=row.contact_phone or defaults.contact_phone
        )
