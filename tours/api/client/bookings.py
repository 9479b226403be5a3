from flask import request, current_app

from tours.extensions import db
from tours.services.booking import BookingService
from tours.services.errors import ServiceError
from tours.services.identity import current_actor
from tours.services.payment import PaymentService
from tours.utils.api_response import APIResponse
from tours.utils.decorators import login_required

from tours.api.client import client_bp


@client_bp.route('/bookings', methods=['POST'])
@login_required()
def create_booking():
    """
    Book a package for a date

    Request Body:
        {
            "packageId": "...",
            "bookingDate": "2026-12-20",
            "numberOfMembers": 2,
            "members": [
                {"name": "Anu", "age": 31, "phone": "9876543210"},
                {"name": "Ravi", "age": 34}
            ]
        }

    Returns:
        201: Booking created (pending) with price breakdown
        404: Package not found
        422: Validation error
    """
    try:
        data = request.get_json(silent=True) or {}

        booking = BookingService.create_booking(
            current_actor(),
            package_id=data.get('packageId'),
            booking_date=data.get('bookingDate'),
            member_count=data.get('numberOfMembers'),
            members=data.get('members')
        )

        return APIResponse.success(
            data={'booking': booking.to_dict()},
            message=f'Booking {booking.booking_reference} created',
            status_code=201
        )

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create booking error: {str(e)}")
        return APIResponse.error('Failed to create booking', status_code=500)


@client_bp.route('/bookings', methods=['GET'])
@login_required()
def get_my_bookings():
    """
    Get the current user's bookings, newest first

    Returns:
        200: Bookings with package, members and payments
    """
    try:
        bookings = BookingService.list_user_bookings(current_actor())
        return APIResponse.success(data={'bookings': [b.to_dict() for b in bookings]})

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Get bookings error: {str(e)}")
        return APIResponse.error('Failed to fetch bookings', status_code=500)


@client_bp.route('/bookings/<booking_id>', methods=['GET'])
@login_required()
def get_booking_details(booking_id):
    """Get one of the current user's bookings"""
    try:
        booking = BookingService.get_booking(current_actor(), booking_id)
        return APIResponse.success(data={'booking': booking.to_dict()})

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Get booking details error: {str(e)}")
        return APIResponse.error('Failed to fetch booking details', status_code=500)


@client_bp.route('/bookings/<booking_id>/payment-instructions', methods=['GET'])
@login_required()
def get_payment_instructions(booking_id):
    """
    UPI payment instructions for a booking

    Query Parameters:
        type: advance (default) or full
    """
    try:
        payment_type = request.args.get('type', 'advance')
        service = PaymentService(current_app.config)
        instructions = service.get_payment_instructions(current_actor(), booking_id, payment_type)
        return APIResponse.success(data={'instructions': instructions})

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Payment instructions error: {str(e)}")
        return APIResponse.error('Failed to fetch payment instructions', status_code=500)
