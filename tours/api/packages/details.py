from flask import current_app

from tours.api.packages import packages_bp
from tours.services.catalog import PackageCatalog
from tours.services.errors import ServiceError
from tours.utils.api_response import APIResponse


@packages_bp.route('/<package_id>', methods=['GET'])
def get_package_details(package_id):
    """
    Get full details of an active package

    Returns:
        200: Package with itinerary, inclusions and available dates
        404: Package not found or inactive
    """
    try:
        package = PackageCatalog.get_package(package_id)
        return APIResponse.success(data={'package': package.to_dict()})

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Package details error: {str(e)}")
        return APIResponse.error(
            message="An error occurred while fetching package details",
            status_code=500
        )
