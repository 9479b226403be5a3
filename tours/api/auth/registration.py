from flask import request, current_app
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError

from tours.extensions import db
from tours.models import User
from tours.models.enums import UserRole
from tours.api.auth.schemas import AuthSchemas
from tours.utils.api_response import APIResponse

from tours.api.auth import auth_bp


@auth_bp.route('/register', methods=['POST'])
def register():
    """
    Register a new user

    Request Body:
        {
            "username": "Anu",
            "email": "anu@example.com",
            "password": "SecurePass123",
            "confirmPassword": "SecurePass123",
            "phone": "+91 98765 43210"
        }

    Returns:
        201: User created with access token
        409: Email already exists
        422: Validation error
    """
    try:
        data = request.get_json(silent=True) or {}

        # Validate input
        is_valid, errors, cleaned_data = AuthSchemas.validate_registration(data)
        if not is_valid:
            return APIResponse.validation_error(errors)

        # Check if email already exists
        if User.query.filter_by(email=cleaned_data['email']).first():
            return APIResponse.error('Email already registered', status_code=409)

        user = User(
            username=cleaned_data['username'],
            email=cleaned_data['email'],
            phone=cleaned_data['phone'],
            role=UserRole.USER,
            is_active=True
        )
        user.set_password(cleaned_data['password'])

        db.session.add(user)
        db.session.commit()

        current_app.logger.info(f"User registered: {user.email}")

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
            message='Registration successful',
            status_code=201
        )

    except IntegrityError:
        db.session.rollback()
        return APIResponse.error('Email already registered', status_code=409)
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Registration error: {str(e)}")
        return APIResponse.error('An error occurred during registration. Please try again.', status_code=500)
