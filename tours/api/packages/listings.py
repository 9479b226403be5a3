from flask import current_app

from tours.api.packages import packages_bp
from tours.services.catalog import PackageCatalog
from tours.utils.api_response import APIResponse

# ==================== LISTING ENDPOINTS ====================

@packages_bp.route('', methods=['GET'])
def get_packages():
    """
    Get all active packages, newest first

    Returns:
        200: List of package summaries
    """
    try:
        packages = PackageCatalog.get_active_packages()

        return APIResponse.success(
            data={'packages': [pkg.to_dict() for pkg in packages]},
            message=f"Found {len(packages)} package(s)"
        )

    except Exception as e:
        current_app.logger.error(f"Get packages error: {str(e)}")
        return APIResponse.error(
            message="An error occurred while fetching packages",
            status_code=500
        )
