from flask import request, current_app
from werkzeug.exceptions import RequestEntityTooLarge

from tours.extensions import db
from tours.services.errors import ServiceError
from tours.services.identity import current_actor
from tours.services.payment import PaymentService
from tours.utils.api_response import APIResponse
from tours.utils.decorators import login_required

from tours.api.client import client_bp


@client_bp.route('/bookings/<booking_id>/payments', methods=['POST'])
@login_required()
def submit_payment(booking_id):
    """
    Submit proof of a UPI payment

    Form Data (multipart/form-data):
        paymentType: advance or full
        utrId: UPI transaction reference
        screenshot: image file of the payment confirmation

    Returns:
        201: Payment recorded as pending
        409: Booking is cancelled
        422: Missing UTR, payment type or screenshot
    """
    try:
        screenshot = request.files.get('screenshot')
        proof_bytes = screenshot.read() if screenshot else None
        proof_filename = screenshot.filename if screenshot else None

        service = PaymentService(current_app.config)
        payment = service.submit_payment(
            current_actor(),
            booking_id,
            payment_type=request.form.get('paymentType'),
            utr_id=request.form.get('utrId'),
            proof_bytes=proof_bytes,
            proof_filename=proof_filename
        )

        return APIResponse.success(
            data={'payment': payment.to_dict()},
            message='Payment submitted successfully. Awaiting verification.',
            status_code=201
        )

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except RequestEntityTooLarge:
        return APIResponse.error("Screenshot is too large", status_code=413)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Submit payment error: {str(e)}")
        return APIResponse.error('Failed to submit payment', status_code=500)
