from flask import request, current_app
from flask_jwt_extended import create_access_token
from datetime import datetime, timezone

from tours.extensions import db
from tours.models import User
from tours.api.auth.schemas import AuthSchemas
from tours.services.identity import current_actor
from tours.utils.api_response import APIResponse
from tours.utils.decorators import login_required

from tours.api.auth import auth_bp


@auth_bp.route('/login', methods=['POST'])
def login():
    """
    Login user with email and password

    Request Body:
        {
            "email": "anu@example.com",
            "password": "SecurePass123"
        }

    Returns:
        200: Login successful with token
        401: Invalid credentials
        403: Account deactivated
        422: Validation error
    """
    try:
        data = request.get_json(silent=True) or {}

        # Validate input
        is_valid, errors, cleaned_data = AuthSchemas.validate_login(data)
        if not is_valid:
            return APIResponse.validation_error(errors)

        user = User.query.filter_by(email=cleaned_data['email']).first()

        # Check if user exists and password is correct
        if not user or not user.check_password(cleaned_data['password']):
            current_app.logger.warning(f"Failed login attempt for {cleaned_data['email']}")
            return APIResponse.unauthorized('Invalid email or password')

        # Check if account is active
        if not user.is_active:
            return APIResponse.forbidden('Your account has been deactivated. Please contact support.')

        user.last_login = datetime.now(timezone.utc)
        db.session.commit()

        access_token = create_access_token(
            identity=user.id,
            additional_claims={'email': user.email, 'role': user.role.value}
        )

        return APIResponse.success(
            data={
                'user': user.to_dict(),
                'tokens': {
                    'accessToken': access_token,
                    'tokenType': 'Bearer'
                }
            },
            message='Login successful'
        )

    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Login error: {str(e)}")
        return APIResponse.error('An error occurred during login. Please try again.', status_code=500)


@auth_bp.route('/me', methods=['GET'])
@login_required()
def get_current_user():
    """Profile of the logged in user"""
    try:
        actor = current_actor()
        user = db.session.get(User, actor.id)
        return APIResponse.success(data={'user': user.to_dict()})

    except Exception as e:
        current_app.logger.error(f"Get current user error: {str(e)}")
        return APIResponse.error('Failed to fetch profile', status_code=500)
