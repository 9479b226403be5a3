"""
Tests for the db-manage CLI commands
Run with: pytest tests/test_cli.py -v
"""
from tours.models import Booking, Package, User, WebSettings
from tours.models.enums import BookingStatus, UserRole


def test_init_without_sample_data(runner):
    result = runner.invoke(args=['db-manage', 'init', '--no-sample-data'])

    assert result.exit_code == 0
    assert 'Database initialized successfully' in result.output
    assert Package.query.count() == 0


def test_init_with_sample_data(runner):
    result = runner.invoke(args=['db-manage', 'init'])

    assert result.exit_code == 0
    assert Package.query.count() == 4
    assert WebSettings.get_current() is not None
    assert User.query.filter_by(role=UserRole.ADMIN).count() == 1
    statuses = {b.status for b in Booking.query.all()}
    assert statuses == {BookingStatus.PENDING, BookingStatus.CONFIRMED}
    for booking in Booking.query.all():
        assert booking.members.count() == booking.number_of_members


def test_load_packages_is_repeatable(runner):
    first = runner.invoke(args=['db-manage', 'load-packages'])
    second = runner.invoke(args=['db-manage', 'load-packages'])

    assert 'Successfully loaded 4 packages' in first.output
    assert 'Successfully loaded 0 packages' in second.output
    assert Package.query.count() == 4


def test_create_admin_promotes_existing_user(runner, user):
    result = runner.invoke(args=['db-manage', 'create-admin', 'user@test.com', 'NewAdmin123'])

    assert result.exit_code == 0
    promoted = User.query.filter_by(email='user@test.com').one()
    assert promoted.role == UserRole.ADMIN
    assert promoted.check_password('NewAdmin123')
