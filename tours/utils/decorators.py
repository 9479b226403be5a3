from functools import wraps

from flask_jwt_extended import verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from tours.services.identity import current_actor
from tours.utils.api_response import APIResponse


def login_required():
    """Decorator to require an active, authenticated user"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                verify_jwt_in_request()
            except (JWTExtendedException, PyJWTError):
                return APIResponse.unauthorized("Please login to continue")

            if current_actor() is None:
                return APIResponse.unauthorized("User not found or inactive")

            return f(*args, **kwargs)
        return decorated_function
    return decorator


def admin_required():
    """Decorator to require the admin role"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                verify_jwt_in_request()
            except (JWTExtendedException, PyJWTError):
                return APIResponse.unauthorized("Please login to continue")

            actor = current_actor()
            if actor is None:
                return APIResponse.unauthorized("User not found or inactive")

            if not actor.is_admin:
                return APIResponse.forbidden("Admin access required")

            return f(*args, **kwargs)
        return decorated_function
    return decorator
