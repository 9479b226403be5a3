import enum


class UserRole(enum.Enum):
    USER = 'user'
    ADMIN = 'admin'


class BookingStatus(enum.Enum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'


class PaymentStatus(enum.Enum):
    PENDING = 'pending'
    VERIFIED = 'verified'
    REJECTED = 'rejected'


class PaymentType(enum.Enum):
    ADVANCE = 'advance'
    FULL = 'full'
