import logging
from typing import Callable, Dict, List, Tuple

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from tours.extensions import db
from tours.models import Booking, Package, Payment, User
from tours.models.enums import BookingStatus, PaymentStatus

logger = logging.getLogger(__name__)


class DashboardService:
    """Read-only admin statistics"""

    @staticmethod
    def _count_bookings() -> Dict[str, int]:
        rows = db.session.query(Booking.status, func.count(Booking.id)).group_by(Booking.status).all()
        by_status = {status: count for status, count in rows}
        return {
            'totalBookings': sum(by_status.values()),
            'pendingBookings': by_status.get(BookingStatus.PENDING, 0),
            'confirmedBookings': by_status.get(BookingStatus.CONFIRMED, 0),
        }

    @staticmethod
    def _count_users() -> Dict[str, int]:
        return {'totalUsers': User.query.count()}

    @staticmethod
    def _count_packages() -> Dict[str, int]:
        return {'totalPackages': Package.query.count()}

    @staticmethod
    def _sum_verified_payments() -> Dict[str, float]:
        total = db.session.query(func.sum(Payment.amount)).filter(
            Payment.status == PaymentStatus.VERIFIED
        ).scalar() or 0
        return {'totalVerifiedPayments': float(total)}

    @staticmethod
    def categories() -> List[Tuple[str, Callable[[], Dict], Dict]]:
        """(name, fetcher, values reported when the fetch fails)"""
        return [
            ('bookings', DashboardService._count_bookings,
             {'totalBookings': 0, 'pendingBookings': 0, 'confirmedBookings': 0}),
            ('users', DashboardService._count_users, {'totalUsers': 0}),
            ('packages', DashboardService._count_packages, {'totalPackages': 0}),
            ('payments', DashboardService._sum_verified_payments, {'totalVerifiedPayments': 0.0}),
        ]

    @staticmethod
    def get_overview() -> Dict:
        """
        Aggregate booking, user, package and payment figures

        A category whose query fails reports zeros and is listed under
        'unavailable'; the others are still returned.
        """
        stats = {}
        unavailable = []

        for name, fetch, fallback in DashboardService.categories():
            try:
                stats.update(fetch())
            except SQLAlchemyError as e:
                db.session.rollback()
                logger.error(f"Dashboard {name} query failed: {str(e)}")
                stats.update(fallback)
                unavailable.append(name)

        return {'stats': stats, 'unavailable': unavailable}
