import pytest
from datetime import date, timedelta
from decimal import Decimal

from flask_jwt_extended import create_access_token

from tours import create_app
from tours.extensions import db as _db
from tours.models import User, Package, WebSettings
from tours.models.enums import UserRole
from tours.services.identity import Actor
from config import Config


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET_KEY = 'test-secret-key'
    SECRET_KEY = 'test-secret'
    DEFAULT_ADVANCE_PER_HEAD = 500
    DEFAULT_UPI_ID = 'default@upi'
    PAYEE_NAME = 'Kerala Tours'


TRIP_DATES = [date.today() + timedelta(days=30 * i) for i in range(1, 4)]


@pytest.fixture
def app(tmp_path):
    app = create_app(TestConfig)
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def db(app):
    return _db


def _make_user(email, username, role, password):
    user = User(
        username=username,
        email=email,
        phone='+91 98470 00000',
        role=role,
        is_active=True
    )
    user.set_password(password)
    _db.session.add(user)
    _db.session.commit()
    return user


@pytest.fixture
def user(app):
    return _make_user('user@test.com', 'Regular User', UserRole.USER, 'UserPass123')


@pytest.fixture
def other_user(app):
    return _make_user('other@test.com', 'Other User', UserRole.USER, 'OtherPass123')


@pytest.fixture
def admin_user(app):
    return _make_user('admin@test.com', 'Admin User', UserRole.ADMIN, 'AdminPass123')


@pytest.fixture
def user_actor(user):
    return Actor.from_user(user)


@pytest.fixture
def other_actor(other_user):
    return Actor.from_user(other_user)


@pytest.fixture
def admin_actor(admin_user):
    return Actor.from_user(admin_user)


@pytest.fixture
def user_headers(user):
    token = create_access_token(identity=user.id)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def admin_headers(admin_user):
    token = create_access_token(identity=admin_user.id)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def package(app):
    package = Package(
        title='Munnar Tea Hills Escape',
        description='Tea gardens and misty hills',
        price_per_head=Decimal('5000.00'),
        duration='3 Days / 2 Nights',
        images=['https://example.com/munnar.jpg'],
        itinerary=[
            {'day': 1, 'title': 'Arrival', 'description': 'Check in'},
            {'day': 2, 'title': 'Sightseeing', 'description': 'Tea museum'},
        ],
        inclusions=['Hotel', 'Breakfast'],
        exclusions=['Flights'],
        available_dates=[{'date': d.isoformat(), 'slotsAvailable': 10} for d in TRIP_DATES],
        is_active=True
    )
    _db.session.add(package)
    _db.session.commit()
    return package


@pytest.fixture
def web_settings(app):
    return WebSettings.set_values(
        upi_number='keralatours@okaxis',
        advance_amount_per_head=Decimal('500.00'),
        whatsapp_phone_number='+91 90000 11111',
        contact_email='hello@keralatours.test',
        contact_phone='+91 90000 22222'
    )


@pytest.fixture
def members():
    return [
        {'name': 'Anu', 'age': 31, 'phone': '9876543210'},
        {'name': 'Ravi', 'age': 34},
    ]


@pytest.fixture
def trip_date():
    return TRIP_DATES[0]
