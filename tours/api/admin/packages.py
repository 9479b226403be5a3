from flask import request, current_app

from tours.api.admin import admin_bp
from tours.extensions import db
from tours.services.catalog import PackageCatalog
from tours.services.errors import ServiceError
from tours.services.identity import current_actor
from tours.utils.decorators import admin_required
from tours.utils.api_response import APIResponse

# ===== PACKAGE MANAGEMENT =====

@admin_bp.route('/packages', methods=['GET'])
@admin_required()
def get_packages():
    """Get all packages, active and inactive"""
    try:
        packages = PackageCatalog.get_all_packages()
        return APIResponse.success({'packages': [pkg.to_dict() for pkg in packages]})

    except Exception as e:
        current_app.logger.error(f"Get packages error: {str(e)}")
        return APIResponse.error("Failed to fetch packages")


@admin_bp.route('/packages/<package_id>', methods=['GET'])
@admin_required()
def get_package(package_id):
    """Get detailed package information"""
    try:
        package = PackageCatalog.get_package(package_id, active_only=False)

        package_data = package.to_dict()
        package_data['total_bookings'] = package.bookings.count()

        return APIResponse.success({'package': package_data})

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        current_app.logger.error(f"Get package error: {str(e)}")
        return APIResponse.error("Failed to fetch package details")


@admin_bp.route('/packages', methods=['POST'])
@admin_required()
def create_package():
    """
    Create new package

    Request Body:
        {
            "title": "Munnar Hills Escape",
            "description": "...",
            "pricePerHead": 5000,
            "duration": "3 Days / 2 Nights",
            "images": ["https://..."],
            "itinerary": [{"day": 1, "title": "...", "description": "..."}],
            "inclusions": ["Hotel stay"],
            "exclusions": ["Flights"],
            "availableDates": [{"date": "2026-12-20", "slotsAvailable": 10}],
            "isActive": true
        }
    """
    try:
        package = PackageCatalog.create_package(current_actor(), request.get_json(silent=True))
        return APIResponse.success(
            {'package': package.to_dict()},
            "Package created successfully",
            status_code=201
        )

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Create package error: {str(e)}")
        return APIResponse.error("Failed to create package")


@admin_bp.route('/packages/<package_id>', methods=['PUT'])
@admin_required()
def update_package(package_id):
    """Replace package content (same body as create)"""
    try:
        package = PackageCatalog.replace_package(
            current_actor(), package_id, request.get_json(silent=True)
        )
        return APIResponse.success({'package': package.to_dict()}, "Package updated successfully")

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Update package error: {str(e)}")
        return APIResponse.error("Failed to update package")


@admin_bp.route('/packages/<package_id>', methods=['DELETE'])
@admin_required()
def delete_package(package_id):
    """Delete a package that has no bookings"""
    try:
        PackageCatalog.delete_package(current_actor(), package_id)
        return APIResponse.success(message="Package deleted successfully")

    except ServiceError as e:
        return APIResponse.from_service_error(e)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Delete package error: {str(e)}")
        return APIResponse.error("Failed to delete package")
