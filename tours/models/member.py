from datetime import datetime, timezone
import uuid
from tours.extensions import db

class BookingMember(db.Model):
    __tablename__ = 'booking_members'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    booking_id = db.Column(db.String(36), db.ForeignKey('bookings.id'), nullable=False, index=True)

    # Order in which the member was entered; the first one is the booker
    position = db.Column(db.Integer, nullable=False, default=0)

    # Personal info
    name = db.Column(db.String(150), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    phone = db.Column(db.String(20))

    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'age': self.age,
            'phone': self.phone,
        }
