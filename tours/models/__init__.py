from tours.models.user import User
from tours.models.package import Package
from tours.models.booking import Booking
from tours.models.member import BookingMember
from tours.models.payment import Payment
from tours.models.settings import WebSettings
from tours.models.audit_log import AuditLog
