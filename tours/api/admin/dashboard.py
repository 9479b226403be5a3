from flask import current_app

from tours.api.admin import admin_bp
from tours.services.dashboard import DashboardService
from tours.utils.decorators import admin_required
from tours.utils.api_response import APIResponse


# ===== DASHBOARD OVERVIEW =====

@admin_bp.route('/dashboard', methods=['GET'])
@admin_required()
def get_admin_dashboard():
    """
    Get admin dashboard overview with key metrics

    Returns:
        - Booking counts (total, pending, confirmed)
        - Total users and packages
        - Sum of verified payments
        - unavailable: categories that could not be loaded (reported as zero)
    """
    try:
        overview = DashboardService.get_overview()

        message = 'Dashboard loaded'
        if overview['unavailable']:
            message = f"Dashboard loaded with missing data: {', '.join(overview['unavailable'])}"

        return APIResponse.success(data=overview, message=message)

    except Exception as e:
        current_app.logger.error(f"Admin dashboard error: {str(e)}")
        return APIResponse.error("Failed to load dashboard data", status_code=500)
