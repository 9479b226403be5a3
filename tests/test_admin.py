"""
Tests for admin API endpoints
Run with: pytest tests/test_admin.py -v
"""
import json

import pytest

from tours.models import Package, WebSettings
from tours.services.booking import BookingService
from tours.services.payment import PaymentService


@pytest.fixture
def booking(user_actor, package, web_settings, trip_date, members):
    return BookingService.create_booking(user_actor, package.id, trip_date.isoformat(), 2, members)


@pytest.fixture
def payment(app, user_actor, booking):
    return PaymentService(app.config).submit_payment(
        user_actor, booking.id, 'advance', 'UTR555', b'png-bytes', 'proof.png'
    )


# ===== AUTHORIZATION TESTS =====

class TestAdminAuthorization:
    """Test admin-only access control"""

    @pytest.mark.parametrize('method, url', [
        ('get', '/api/admin/dashboard'),
        ('get', '/api/admin/bookings'),
        ('get', '/api/admin/payments'),
        ('get', '/api/admin/packages'),
        ('get', '/api/admin/settings'),
    ])
    def test_requires_authentication(self, client, method, url):
        response = getattr(client, method)(url)
        assert response.status_code == 401

    def test_regular_user_is_forbidden(self, client, user_headers, booking):
        response = client.post(f'/api/admin/bookings/{booking.id}/confirm', headers=user_headers)

        assert response.status_code == 403
        assert 'admin' in json.loads(response.data)['message'].lower()

    def test_admin_dashboard_accessible_by_admin(self, client, admin_headers):
        response = client.get('/api/admin/dashboard', headers=admin_headers)

        assert response.status_code == 200
        assert 'totalBookings' in json.loads(response.data)['data']['stats']


# ===== BOOKING MANAGEMENT TESTS =====

class TestBookingManagement:

    def test_list_bookings_with_customer(self, client, admin_headers, booking):
        response = client.get('/api/admin/bookings?status=pending', headers=admin_headers)

        assert response.status_code == 200
        data = json.loads(response.data)['data']
        assert data['pagination']['totalItems'] == 1
        assert data['bookings'][0]['customer']['email'] == 'user@test.com'

    def test_list_bookings_invalid_status(self, client, admin_headers):
        response = client.get('/api/admin/bookings?status=done', headers=admin_headers)

        assert response.status_code == 422

    def test_booking_detail(self, client, admin_headers, booking, payment):
        response = client.get(f'/api/admin/bookings/{booking.id}', headers=admin_headers)

        data = json.loads(response.data)['data']['booking']
        assert len(data['members']) == 2
        assert data['payments'][0]['utr_id'] == 'UTR555'

    def test_confirm_twice_is_ok(self, client, admin_headers, booking):
        first = client.post(f'/api/admin/bookings/{booking.id}/confirm', headers=admin_headers)
        second = client.post(f'/api/admin/bookings/{booking.id}/confirm', headers=admin_headers)

        assert first.status_code == 200
        assert second.status_code == 200
        assert json.loads(second.data)['data']['booking']['status'] == 'confirmed'

    def test_cancel_then_confirm_conflicts(self, client, admin_headers, booking):
        cancel = client.post(f'/api/admin/bookings/{booking.id}/cancel', headers=admin_headers,
                             json={'reason': 'Customer request'})
        confirm = client.post(f'/api/admin/bookings/{booking.id}/confirm', headers=admin_headers)

        assert cancel.status_code == 200
        assert confirm.status_code == 409

    def test_confirm_unknown_booking(self, client, admin_headers):
        response = client.post('/api/admin/bookings/missing/confirm', headers=admin_headers)

        assert response.status_code == 404


# ===== PAYMENT MANAGEMENT TESTS =====

class TestPaymentManagement:

    def test_list_pending_payments(self, client, admin_headers, payment):
        response = client.get('/api/admin/payments?status=pending', headers=admin_headers)

        data = json.loads(response.data)['data']
        assert [p['id'] for p in data['payments']] == [payment.id]
        assert data['payments'][0]['booking_reference'].startswith('KT-')

    def test_verify_payment_keeps_booking_pending(self, client, admin_headers, booking, payment):
        response = client.post(f'/api/admin/payments/{payment.id}/verify', headers=admin_headers,
                               json={'status': 'verified'})

        assert response.status_code == 200
        assert json.loads(response.data)['data']['payment']['status'] == 'verified'

        detail = client.get(f'/api/admin/bookings/{booking.id}', headers=admin_headers)
        assert json.loads(detail.data)['data']['booking']['status'] == 'pending'

    def test_second_verification_conflicts(self, client, admin_headers, payment):
        client.post(f'/api/admin/payments/{payment.id}/verify', headers=admin_headers,
                    json={'status': 'rejected'})
        response = client.post(f'/api/admin/payments/{payment.id}/verify', headers=admin_headers,
                               json={'status': 'verified'})

        assert response.status_code == 409

    def test_verify_requires_valid_status(self, client, admin_headers, payment):
        response = client.post(f'/api/admin/payments/{payment.id}/verify', headers=admin_headers,
                               json={'status': 'approved'})

        assert response.status_code == 422


# ===== PACKAGE MANAGEMENT TESTS =====

class TestPackageManagement:

    payload = {
        'title': 'Wayanad Forest Trails',
        'description': 'Caves and waterfalls',
        'pricePerHead': 7200,
        'duration': '4 Days / 3 Nights',
        'itinerary': [{'day': 1, 'title': 'Arrival'}],
        'availableDates': [{'date': '2030-03-01', 'slotsAvailable': 10}],
        'inclusions': ['Homestay'],
        'exclusions': ['Flights'],
    }

    def test_create_update_delete(self, client, admin_headers):
        created = client.post('/api/admin/packages', headers=admin_headers, json=self.payload)
        assert created.status_code == 201
        package_id = json.loads(created.data)['data']['package']['id']

        updated = client.put(f'/api/admin/packages/{package_id}', headers=admin_headers,
                             json=dict(self.payload, pricePerHead=7500, isActive=False))
        assert updated.status_code == 200
        assert json.loads(updated.data)['data']['package']['price_per_head'] == 7500.0

        detail = client.get(f'/api/admin/packages/{package_id}', headers=admin_headers)
        assert json.loads(detail.data)['data']['package']['total_bookings'] == 0

        deleted = client.delete(f'/api/admin/packages/{package_id}', headers=admin_headers)
        assert deleted.status_code == 200
        assert Package.query.count() == 0

    def test_invalid_package(self, client, admin_headers):
        response = client.post('/api/admin/packages', headers=admin_headers,
                               json=dict(self.payload, title='', pricePerHead='abc'))

        assert response.status_code == 422
        errors = json.loads(response.data)['errors']
        assert 'title' in errors
        assert 'pricePerHead' in errors

    def test_list_includes_inactive(self, client, db, admin_headers, package):
        package.is_active = False
        db.session.commit()

        response = client.get('/api/admin/packages', headers=admin_headers)

        assert len(json.loads(response.data)['data']['packages']) == 1

    def test_delete_booked_package_conflicts(self, client, admin_headers, booking, package):
        response = client.delete(f'/api/admin/packages/{package.id}', headers=admin_headers)

        assert response.status_code == 409


# ===== SETTINGS TESTS =====

class TestSettings:

    def test_defaults_before_first_save(self, client, admin_headers):
        response = client.get('/api/admin/settings', headers=admin_headers)

        settings = json.loads(response.data)['data']['settings']
        assert settings['is_default'] is True
        assert settings['upi_number'] == 'default@upi'
        assert settings['advance_amount_per_head'] == 500.0

    def test_first_save_creates_row(self, client, admin_headers):
        response = client.put('/api/admin/settings', headers=admin_headers,
                              json={'advanceAmountPerHead': 750})

        assert response.status_code == 200
        row = WebSettings.get_current()
        assert row.upi_number == 'default@upi'
        assert float(row.advance_amount_per_head) == 750.0

    def test_new_advance_applies_to_new_bookings(self, client, admin_headers, user_actor,
                                                 package, web_settings, trip_date):
        client.put('/api/admin/settings', headers=admin_headers,
                   json={'advanceAmountPerHead': 1000, 'upiNumber': 'new@upi'})

        booking = BookingService.create_booking(
            user_actor, package.id, trip_date.isoformat(), 1, [{'name': 'Anu', 'age': 31}]
        )

        assert float(booking.advance_payment) == 1000.0

    def test_invalid_settings(self, client, admin_headers):
        response = client.put('/api/admin/settings', headers=admin_headers,
                              json={'advanceAmountPerHead': -5, 'contactEmail': 'nope'})

        assert response.status_code == 422
        errors = json.loads(response.data)['errors']
        assert 'advanceAmountPerHead' in errors
        assert 'contactEmail' in errors
