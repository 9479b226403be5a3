from datetime import datetime, timezone
import random
import string
import uuid
from tours.extensions import db
from tours.models.enums import BookingStatus

class Booking(db.Model):
    __tablename__ = 'bookings'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    booking_reference = db.Column(db.String(20), unique=True, nullable=False, index=True)

    # Ownership
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    package_id = db.Column(db.String(36), db.ForeignKey('packages.id'), nullable=False, index=True)

    # Trip details
    booking_date = db.Column(db.Date, nullable=False)
    number_of_members = db.Column(db.Integer, nullable=False)

    # Pricing
    total_price = db.Column(db.Numeric(10, 2), nullable=False)
    advance_payment = db.Column(db.Numeric(10, 2), nullable=False)
    remaining_payment = db.Column(db.Numeric(10, 2), nullable=False)

    status = db.Column(db.Enum(BookingStatus), default=BookingStatus.PENDING, nullable=False, index=True)

    # Timestamps
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    confirmed_at = db.Column(db.DateTime)
    cancelled_at = db.Column(db.DateTime)

    # Relationships
    members = db.relationship('BookingMember', backref='booking', lazy='dynamic',
                              cascade='all, delete-orphan', order_by='BookingMember.position')
    payments = db.relationship('Payment', backref='booking', lazy='dynamic',
                               cascade='all, delete-orphan', order_by='Payment.created_at')

    def __init__(self, **kwargs):
        super(Booking, self).__init__(**kwargs)
        if not self.booking_reference:
            self.booking_reference = self.generate_booking_reference()

    @staticmethod
    def generate_booking_reference():
        """Generate unique booking reference like KT-ABC123"""
        letters = ''.join(random.choices(string.ascii_uppercase, k=3))
        numbers = ''.join(random.choices(string.digits, k=3))
        return f"KT-{letters}{numbers}"

    def to_dict(self, include_relations: bool = True):
        """
        Serialize Booking model to dictionary for API responses.

        Args:
            include_relations (bool): Whether to include package, members and payments

        Returns:
            dict
        """
        data = {
            "id": self.id,
            "booking_reference": self.booking_reference,
            "user_id": self.user_id,
            "package_id": self.package_id,
            "booking_date": self.booking_date.isoformat() if self.booking_date else None,
            "number_of_members": self.number_of_members,

            # Pricing (Decimal -> float for JSON)
            "total_price": float(self.total_price) if self.total_price is not None else 0.0,
            "advance_payment": float(self.advance_payment) if self.advance_payment is not None else 0.0,
            "remaining_payment": float(self.remaining_payment) if self.remaining_payment is not None else 0.0,

            "status": self.status.value if self.status else None,

            # Lifecycle timestamps
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "confirmed_at": self.confirmed_at.isoformat() if self.confirmed_at else None,
            "cancelled_at": self.cancelled_at.isoformat() if self.cancelled_at else None,
        }

        if include_relations:
            data["package"] = self.package.to_summary() if self.package else None
            data["members"] = [m.to_dict() for m in self.members.all()]
            data["payments"] = [p.to_dict() for p in self.payments.all()]

        return data
