"""
Package Catalog
Package lookup for the booking flow and package maintenance for admins
"""

import json
import logging
from dataclasses import dataclass, asdict
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError

from tours.extensions import db
from tours.models import Package
from tours.services.errors import NotFoundError, StateError, StorageError, ValidationError
from tours.services.identity import Actor, require_admin
from tours.utils.audit_logging import AuditLogger
from tours.utils.validation import Validator

logger = logging.getLogger(__name__)


@dataclass
class ItineraryDay:
    day: int
    title: str
    description: str = ''


@dataclass
class AvailableDate:
    date: str
    slotsAvailable: Optional[int] = None


def _pick(data: Dict[str, Any], *keys, default=None):
    for key in keys:
        if key in data:
            return data[key]
    return default


def _load_json_list(value, field: str, errors: Dict[str, str]) -> Optional[list]:
    """Accept a list or a JSON-encoded list"""
    if value is None or value == '':
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            errors[field] = f'{field} must be valid JSON'
            return None
    if not isinstance(value, list):
        errors[field] = f'{field} must be a list'
        return None
    return value


def _load_string_list(value, field: str, errors: Dict[str, str]) -> Optional[List[str]]:
    """Accept a list of strings or newline separated text"""
    if value is None or value == '':
        return []
    if isinstance(value, str):
        value = value.split('\n')
    if not isinstance(value, list):
        errors[field] = f'{field} must be a list of strings'
        return None
    return [str(item).strip() for item in value if str(item).strip()]


def parse_itinerary(value, errors: Dict[str, str]) -> List[ItineraryDay]:
    entries = _load_json_list(value, 'itinerary', errors)
    if entries is None:
        return []

    days = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            errors[f'itinerary[{index}]'] = 'Itinerary entries must be objects'
            continue
        try:
            day = int(entry.get('day'))
        except (ValueError, TypeError):
            errors[f'itinerary[{index}].day'] = 'Day must be a number'
            continue
        if day < 1:
            errors[f'itinerary[{index}].day'] = 'Day must be 1 or greater'
            continue
        title = Validator.sanitize_input(entry.get('title'), max_length=200)
        if not title:
            errors[f'itinerary[{index}].title'] = 'Title is required'
            continue
        days.append(ItineraryDay(
            day=day,
            title=title,
            description=Validator.sanitize_input(entry.get('description'))
        ))

    return sorted(days, key=lambda d: d.day)


def parse_available_dates(value, errors: Dict[str, str]) -> List[AvailableDate]:
    entries = _load_json_list(value, 'availableDates', errors)
    if entries is None:
        return []

    dates = []
    seen = set()
    for index, entry in enumerate(entries):
        if isinstance(entry, str):
            entry = {'date': entry}
        if not isinstance(entry, dict):
            errors[f'availableDates[{index}]'] = 'Date entries must be objects'
            continue

        parsed = Validator.parse_date(entry.get('date'))
        if parsed is None:
            errors[f'availableDates[{index}].date'] = 'Date must be in YYYY-MM-DD format'
            continue
        if parsed.isoformat() in seen:
            errors[f'availableDates[{index}].date'] = 'Duplicate date'
            continue

        slots = _pick(entry, 'slotsAvailable', 'slots_available', 'remainingSlots')
        if slots is not None:
            try:
                slots = int(slots)
            except (ValueError, TypeError):
                errors[f'availableDates[{index}].slotsAvailable'] = 'Slots must be a number'
                continue
            if slots < 0:
                errors[f'availableDates[{index}].slotsAvailable'] = 'Slots cannot be negative'
                continue

        seen.add(parsed.isoformat())
        dates.append(AvailableDate(date=parsed.isoformat(), slotsAvailable=slots))

    return dates


class PackageCatalog:
    """Lookup and maintenance of travel packages"""

    @staticmethod
    def get_active_packages() -> List[Package]:
        return Package.query.filter_by(is_active=True).order_by(desc(Package.created_at)).all()

    @staticmethod
    def get_all_packages() -> List[Package]:
        return Package.query.order_by(desc(Package.created_at)).all()

    @staticmethod
    def get_package(package_id: str, active_only: bool = True) -> Package:
        package = db.session.get(Package, package_id)
        if not package or (active_only and not package.is_active):
            raise NotFoundError('Package not found')
        return package

    @staticmethod
    def clean_package_payload(data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Validate a full package record (create and replace use the same rules)

        Returns:
            dict of model column values

        Raises:
            ValidationError
        """
        if not isinstance(data, dict):
            raise ValidationError('Invalid package data', {'body': 'Request body must be a JSON object'})

        errors = {}
        cleaned = {}

        title = Validator.sanitize_input(_pick(data, 'title'), max_length=200)
        if not title:
            errors['title'] = 'Title is required'
        cleaned['title'] = title

        cleaned['description'] = Validator.sanitize_input(_pick(data, 'description')) or None

        duration = Validator.sanitize_input(_pick(data, 'duration'), max_length=100)
        if not duration:
            errors['duration'] = 'Duration is required'
        cleaned['duration'] = duration

        raw_price = _pick(data, 'pricePerHead', 'price_per_head')
        if raw_price is None or raw_price == '':
            errors['pricePerHead'] = 'Price per head is required'
        else:
            try:
                price = Decimal(str(raw_price))
                if not price.is_finite() or price < 0:
                    errors['pricePerHead'] = 'Price per head cannot be negative'
                else:
                    cleaned['price_per_head'] = price.quantize(Decimal('0.01'))
            except InvalidOperation:
                errors['pricePerHead'] = 'Price per head must be a number'

        images = _load_json_list(_pick(data, 'images'), 'images', errors)
        cleaned['images'] = [str(url).strip() for url in (images or []) if str(url).strip()]

        cleaned['itinerary'] = [asdict(d) for d in parse_itinerary(_pick(data, 'itinerary'), errors)]
        cleaned['available_dates'] = [
            asdict(d) for d in parse_available_dates(_pick(data, 'availableDates', 'available_dates'), errors)
        ]
        cleaned['inclusions'] = _load_string_list(_pick(data, 'inclusions'), 'inclusions', errors) or []
        cleaned['exclusions'] = _load_string_list(_pick(data, 'exclusions'), 'exclusions', errors) or []

        cleaned['is_active'] = bool(_pick(data, 'isActive', 'is_active', default=True))

        if errors:
            raise ValidationError('Package validation failed', errors)
        return cleaned

    @staticmethod
    def create_package(actor: Optional[Actor], data: Dict[str, Any]) -> Package:
        actor = require_admin(actor)
        cleaned = PackageCatalog.clean_package_payload(data)

        package = Package(**cleaned)
        try:
            db.session.add(package)
            db.session.flush()
            AuditLogger.log_action(
                user_id=actor.id,
                action='package_created',
                entity_type='package',
                entity_id=package.id,
                description=f'Admin created package {package.title}'
            )
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to create package: {str(e)}")
            raise StorageError('Failed to save package')

        logger.info(f"Package created: {package.id}")
        return package

    @staticmethod
    def replace_package(actor: Optional[Actor], package_id: str, data: Dict[str, Any]) -> Package:
        actor = require_admin(actor)
        package = PackageCatalog.get_package(package_id, active_only=False)
        cleaned = PackageCatalog.clean_package_payload(data)

        try:
            for key, value in cleaned.items():
                setattr(package, key, value)
            AuditLogger.log_action(
                user_id=actor.id,
                action='package_updated',
                entity_type='package',
                entity_id=package.id,
                description=f'Admin updated package {package.title}'
            )
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to update package {package_id}: {str(e)}")
            raise StorageError('Failed to save package')

        return package

    @staticmethod
    def delete_package(actor: Optional[Actor], package_id: str) -> None:
        actor = require_admin(actor)
        package = PackageCatalog.get_package(package_id, active_only=False)

        if package.bookings.count() > 0:
            raise StateError('Package has bookings and cannot be deleted; deactivate it instead')

        try:
            title = package.title
            db.session.delete(package)
            AuditLogger.log_action(
                user_id=actor.id,
                action='package_deleted',
                entity_type='package',
                entity_id=package_id,
                description=f'Admin deleted package {title}'
            )
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to delete package {package_id}: {str(e)}")
            raise StorageError('Failed to delete package')
