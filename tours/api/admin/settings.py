from flask import request, current_app

from tours.api.admin import admin_bp
from tours.extensions import db
from tours.models import WebSettings
from tours.services.identity import current_actor
from tours.services.settings import SettingsProvider
from tours.utils.decorators import admin_required
from tours.utils.api_response import APIResponse
from tours.utils.audit_logging import AuditLogger
from tours.api.admin.schemas import AdminSchemas


@admin_bp.route('/settings', methods=['GET'])
@admin_required()
def get_settings():
    """Current payment and contact settings (defaults if never saved)"""
    try:
        settings = SettingsProvider.get_settings()
        data = settings.to_public_dict()
        data['is_default'] = settings.is_default
        return APIResponse.success({'settings': data})

    except Exception as e:
        current_app.logger.error(f"Get settings error: {str(e)}")
        return APIResponse.error("Failed to fetch settings")


@admin_bp.route('/settings', methods=['PUT'])
@admin_required()
def update_settings():
    """
    Update web settings

    Request Body (all optional):
        {
            "upiNumber": "9876543210@ybl",
            "upiQrCode": "https://...",
            "advanceAmountPerHead": 750,
            "whatsappPhoneNumber": "+91 98765 43210",
            "contactEmail": "info@keralatrips.com",
            "contactPhone": "+91 98765 43210"
        }
    """
    try:
        data = request.get_json(silent=True) or {}
        is_valid, errors, cleaned_data = AdminSchemas.validate_settings_update(data)
        if not is_valid:
            return APIResponse.validation_error(errors)

        if not cleaned_data:
            return APIResponse.error("No settings provided", status_code=400)

        # First save starts from the configured defaults
        if WebSettings.get_current() is None:
            defaults = SettingsProvider.defaults()
            cleaned_data = {
                'upi_number': defaults.upi_number,
                'advance_amount_per_head': defaults.advance_per_head,
                'contact_email': defaults.contact_email,
                'contact_phone': defaults.contact_phone,
                **cleaned_data
            }

        actor = current_actor()
        AuditLogger.log_action(
            user_id=actor.id,
            action='settings_updated',
            entity_type='web_settings',
            description='Admin updated web settings',
            changes={key: str(value) if value is not None else None for key, value in cleaned_data.items()}
        )
        settings = WebSettings.set_values(**cleaned_data)

        current_app.logger.info(f"Web settings updated by {actor.id}")
        return APIResponse.success({'settings': settings.to_dict()}, "Settings updated successfully")

    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update settings error: {str(e)}")
        return APIResponse.error("Failed to update settings")
