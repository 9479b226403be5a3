from datetime import datetime, timezone
import uuid
from tours.extensions import db

class Package(db.Model):
    __tablename__ = 'packages'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)

    # Media
    images = db.Column(db.JSON)  # List of image URLs

    # Pricing
    price_per_head = db.Column(db.Numeric(10, 2), nullable=False)

    # Package details
    duration = db.Column(db.String(100), nullable=False)  # e.g. "3 Days / 2 Nights"
    itinerary = db.Column(db.JSON)  # [{"day": 1, "title": ..., "description": ...}]
    inclusions = db.Column(db.JSON)  # List of what's included
    exclusions = db.Column(db.JSON)  # List of what's not included

    # Availability
    available_dates = db.Column(db.JSON)  # [{"date": "2025-01-10", "slotsAvailable": 12}]
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    bookings = db.relationship('Booking', backref='package', lazy='dynamic')

    def get_available_date_values(self):
        """Dates a booking may be made for, as ISO strings"""
        return [entry.get('date') for entry in (self.available_dates or []) if entry.get('date')]

    def to_summary(self):
        return {
            'id': self.id,
            'title': self.title,
            'duration': self.duration,
            'price_per_head': float(self.price_per_head),
        }

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'images': self.images or [],
            'price_per_head': float(self.price_per_head),
            'duration': self.duration,
            'itinerary': self.itinerary or [],
            'inclusions': self.inclusions or [],
            'exclusions': self.exclusions or [],
            'available_dates': self.available_dates or [],
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
