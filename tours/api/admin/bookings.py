from flask import request, current_app

from tours.api.admin import admin_bp
from tours.extensions import db
from tours.models import Booking
from tours.services.booking import BookingService
from tours.services.errors import ServiceError
from tours.services.identity import current_actor
from tours.utils.decorators import admin_required
from tours.utils.api_response import APIResponse
from tours.api.admin.schemas import AdminSchemas


def _with_customer(booking):
    booking_dict = booking.to_dict()
    if booking.customer:
        booking_dict['customer'] = {
            'id': booking.customer.id,
            'username': booking.customer.username,
            'email': booking.customer.email,
            'phone': booking.customer.phone
        }
    return booking_dict


# ===== BOOKING MANAGEMENT =====

@admin_bp.route('/bookings', methods=['GET'])
@admin_required()
def get_bookings():
    """
    Get paginated list of bookings

    Query params:
        - page, perPage: Pagination
        - status: pending, confirmed or cancelled
        - search: Search in booking reference
    """
    try:
        args = request.args.to_dict()
        pagination = AdminSchemas.validate_pagination(args)

        query = BookingService.query_bookings(current_actor(), args.get('status'))

        if args.get('search'):
            query = query.filter(Booking.booking_reference.ilike(f"%{args['search']}%"))

        paginated = query.paginate(
            page=pagination['page'],
            per_page=pagination['per_page'],
            error_out=False
        )

        return APIResponse.success({
            'bookings': [_with_customer(b) for b in paginated.items],
            'pagination': AdminSchemas.pagination_meta(paginated)
        })

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Get bookings error: {str(e)}")
        return APIResponse.error("Failed to fetch bookings")


@admin_bp.route('/bookings/<booking_id>', methods=['GET'])
@admin_required()
def get_booking(booking_id):
    """Get detailed booking information"""
    try:
        booking = BookingService.get_booking(current_actor(), booking_id)
        return APIResponse.success({'booking': _with_customer(booking)})

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Get booking error: {str(e)}")
        return APIResponse.error("Failed to fetch booking details")


@admin_bp.route('/bookings/<booking_id>/confirm', methods=['POST'])
@admin_required()
def confirm_booking(booking_id):
    """Confirm a pending booking"""
    try:
        booking = BookingService.confirm_booking(current_actor(), booking_id)
        return APIResponse.success(
            {'booking': _with_customer(booking)},
            f"Booking {booking.booking_reference} confirmed"
        )

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Confirm booking error: {str(e)}")
        return APIResponse.error("Failed to confirm booking")


@admin_bp.route('/bookings/<booking_id>/cancel', methods=['POST'])
@admin_required()
def cancel_booking(booking_id):
    """
    Cancel a pending booking

    Request Body (optional):
        {"reason": "Customer request"}
    """
    try:
        data = request.get_json(silent=True) or {}
        is_valid, errors, cleaned_data = AdminSchemas.validate_booking_cancellation(data)
        if not is_valid:
            return APIResponse.validation_error(errors)

        booking = BookingService.cancel_booking(
            current_actor(), booking_id, reason=cleaned_data.get('reason')
        )
        return APIResponse.success(
            {'booking': _with_customer(booking)},
            f"Booking {booking.booking_reference} cancelled"
        )

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Cancel booking error: {str(e)}")
        return APIResponse.error("Failed to cancel booking")
