from flask import request, current_app

from tours.api.admin import admin_bp
from tours.extensions import db
from tours.services.errors import ServiceError
from tours.services.identity import current_actor
from tours.services.payment import PaymentService
from tours.utils.decorators import admin_required
from tours.utils.api_response import APIResponse
from tours.api.admin.schemas import AdminSchemas


# ===== PAYMENT MANAGEMENT =====

@admin_bp.route('/payments', methods=['GET'])
@admin_required()
def get_payments():
    """
    Get paginated list of submitted payments

    Query params:
        - page, perPage: Pagination
        - status: pending, verified or rejected
    """
    try:
        args = request.args.to_dict()
        pagination = AdminSchemas.validate_pagination(args)

        service = PaymentService(current_app.config)
        query = service.query_payments(current_actor(), args.get('status'))

        paginated = query.paginate(
            page=pagination['page'],
            per_page=pagination['per_page'],
            error_out=False
        )

        payments_data = []
        for payment in paginated.items:
            payment_dict = payment.to_dict()
            if payment.booking:
                payment_dict['booking_reference'] = payment.booking.booking_reference
            if payment.user:
                payment_dict['customer'] = {
                    'id': payment.user.id,
                    'username': payment.user.username,
                    'email': payment.user.email
                }
            payments_data.append(payment_dict)

        return APIResponse.success({
            'payments': payments_data,
            'pagination': AdminSchemas.pagination_meta(paginated)
        })

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Get payments error: {str(e)}")
        return APIResponse.error("Failed to fetch payments")


@admin_bp.route('/payments/<payment_id>/verify', methods=['POST'])
@admin_required()
def verify_payment(payment_id):
    """
    Verify or reject a pending payment

    Request Body:
        {"status": "verified"} or {"status": "rejected"}
    """
    try:
        data = request.get_json(silent=True) or {}
        is_valid, errors, cleaned_data = AdminSchemas.validate_payment_verification(data)
        if not is_valid:
            return APIResponse.validation_error(errors)

        service = PaymentService(current_app.config)
        payment = service.verify_payment(current_actor(), payment_id, cleaned_data['status'])

        return APIResponse.success(
            {'payment': payment.to_dict()},
            f"Payment {payment.status.value}"
        )

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Verify payment error: {str(e)}")
        return APIResponse.error("Failed to update payment")
