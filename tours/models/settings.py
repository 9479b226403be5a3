from datetime import datetime, timezone
from tours.extensions import db

class WebSettings(db.Model):
    """Site-wide payment and contact configuration (single row)"""
    __tablename__ = 'web_settings'

    id = db.Column(db.Integer, primary_key=True)

    # Payment
    upi_number = db.Column(db.String(100), nullable=False)
    upi_qr_code = db.Column(db.String(500))
    advance_amount_per_head = db.Column(db.Numeric(10, 2), nullable=False, default=500)

    # Contact
    whatsapp_phone_number = db.Column(db.String(20))
    contact_email = db.Column(db.String(120))
    contact_phone = db.Column(db.String(20))

    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    @staticmethod
    def get_current():
        return WebSettings.query.order_by(WebSettings.id).first()

    @staticmethod
    def set_values(**values):
        settings = WebSettings.get_current()

        if settings:
            for key, value in values.items():
                setattr(settings, key, value)
        else:
            settings = WebSettings(**values)
            db.session.add(settings)

        db.session.commit()
        return settings

    def to_dict(self):
        return {
            'upi_number': self.upi_number,
            'upi_qr_code': self.upi_qr_code,
            'advance_amount_per_head': float(self.advance_amount_per_head),
            'whatsapp_phone_number': self.whatsapp_phone_number,
            'contact_email': self.contact_email,
            'contact_phone': self.contact_phone,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
