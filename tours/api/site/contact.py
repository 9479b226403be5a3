from flask import current_app

from tours.api.site import site_bp
from tours.services.settings import SettingsProvider
from tours.utils.api_response import APIResponse


@site_bp.route('/api/site/contact', methods=['GET'])
def get_contact_info():
    """Public contact details (email, phone, WhatsApp)"""
    try:
        settings = SettingsProvider.get_settings()
        return APIResponse.success(data={
            'contact': {
                'email': settings.contact_email,
                'phone': settings.contact_phone,
                'whatsapp': settings.whatsapp_phone_number,
            }
        })

    except Exception as e:
        current_app.logger.error(f"Contact info error: {str(e)}")
        return APIResponse.error("Failed to fetch contact information", status_code=500)
