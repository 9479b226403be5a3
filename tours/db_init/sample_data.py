"""
Sample Data Generation
Creates sample users, settings and bookings for development
"""

from datetime import date
from typing import List, Tuple

from flask import current_app

from tours.extensions import db
from tours.models import User, Package, Booking, BookingMember, WebSettings
from tours.models.enums import UserRole, BookingStatus
from tours.services.catalog import PackageCatalog
from tours.services.errors import ValidationError
from tours.services.pricing import PricingCalculator


def load_packages(package_data: List[dict], clear_existing: bool = False) -> Tuple[int, int, List[str]]:
    """
    Validate and insert packages

    Returns:
        (loaded, failed, error messages)
    """
    if clear_existing:
        Package.query.delete()
        db.session.commit()

    success, errors, error_list = 0, 0, []
    for data in package_data:
        try:
            cleaned = PackageCatalog.clean_package_payload(data)
        except ValidationError as e:
            errors += 1
            error_list.append(f"{data.get('title', '?')}: {e.errors}")
            continue

        if Package.query.filter_by(title=cleaned['title']).first():
            continue

        db.session.add(Package(**cleaned))
        success += 1

    db.session.commit()
    return success, errors, error_list


def create_admin(email: str, password: str, username: str = 'Admin') -> User:
    """Create an administrator, or promote the existing account"""
    user = User.query.filter_by(email=email.lower()).first()
    if user is None:
        user = User(username=username, email=email.lower(), role=UserRole.ADMIN, is_active=True)
        db.session.add(user)
    user.role = UserRole.ADMIN
    user.set_password(password)
    db.session.commit()
    return user


def create_sample_users() -> List[User]:
    print("   Creating users...")

    admin = create_admin(current_app.config['ADMIN_EMAIL'], current_app.config['ADMIN_PASSWORD'])

    customer = User.query.filter_by(email='anu.menon@example.com').first()
    if customer is None:
        customer = User(
            username='Anu Menon',
            email='anu.menon@example.com',
            phone='+91 98470 12345',
            role=UserRole.USER,
            is_active=True
        )
        customer.set_password('password123')
        db.session.add(customer)
        db.session.commit()

    return [admin, customer]


def create_sample_settings() -> WebSettings:
    print("   Creating web settings...")
    config = current_app.config
    settings = WebSettings.get_current()
    if settings:
        return settings

    return WebSettings.set_values(
        upi_number=config['DEFAULT_UPI_ID'],
        advance_amount_per_head=config['DEFAULT_ADVANCE_PER_HEAD'],
        whatsapp_phone_number=config['DEFAULT_CONTACT_PHONE'],
        contact_email=config['DEFAULT_CONTACT_EMAIL'],
        contact_phone=config['DEFAULT_CONTACT_PHONE']
    )


def create_sample_bookings(customer: User, packages: List[Package], settings: WebSettings) -> List[Booking]:
    """One pending and one confirmed booking for the sample customer"""
    print("   Creating bookings...")
    bookings = []

    for index, package in enumerate(packages[:2]):
        dates = package.get_available_date_values()
        if not dates:
            continue

        members = [('Anu Menon', 31, customer.phone), ('Ravi Menon', 34, None)]
        price = PricingCalculator.calculate_booking_price(
            package.price_per_head, settings.advance_amount_per_head, len(members)
        )
        booking = Booking(
            user_id=customer.id,
            package_id=package.id,
            booking_date=date.fromisoformat(dates[0]),
            number_of_members=len(members),
            total_price=price.total,
            advance_payment=price.advance,
            remaining_payment=price.remaining,
            status=BookingStatus.CONFIRMED if index else BookingStatus.PENDING
        )
        db.session.add(booking)
        db.session.flush()

        for position, (name, age, phone) in enumerate(members):
            db.session.add(BookingMember(
                booking_id=booking.id, position=position, name=name, age=age, phone=phone
            ))

        bookings.append(booking)

    db.session.commit()
    return bookings
