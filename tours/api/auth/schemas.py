"""
Authentication validation schemas
"""
import re
from typing import Optional, Dict, Any, Tuple


class AuthSchemas:
    """Validation schemas for authentication endpoints"""

    @staticmethod
    def validate_registration(data: Dict[str, Any]) -> Tuple[bool, Optional[Dict[str, str]], Optional[Dict[str, Any]]]:
        """
        Validate user registration data

        Args:
            data: Dictionary containing registration data

        Returns:
            Tuple of (is_valid, errors, cleaned_data)
        """
        errors = {}
        cleaned_data = {}

        username = str(data.get('username') or '').strip()
        if not username:
            errors['username'] = 'Username is required'
        elif len(username) < 2:
            errors['username'] = 'Username must be at least 2 characters'
        elif len(username) > 100:
            errors['username'] = 'Username must be at most 100 characters'
        else:
            cleaned_data['username'] = username

        # Email validation
        email = str(data.get('email') or '').strip().lower()
        if not email:
            errors['email'] = 'Email is required'
        elif not AuthSchemas._validate_email_format(email):
            errors['email'] = 'Invalid email format'
        else:
            cleaned_data['email'] = email

        # Password validation
        password = data.get('password') or ''
        confirm_password = data.get('confirmPassword') or ''

        if not password:
            errors['password'] = 'Password is required'
        elif len(password) < 8:
            errors['password'] = 'Password must be at least 8 characters'
        elif not AuthSchemas._validate_password_strength(password):
            errors['password'] = 'Password must contain at least one letter and one number'
        else:
            cleaned_data['password'] = password

        # Password confirmation
        if not confirm_password:
            errors['confirmPassword'] = 'Password confirmation is required'
        elif password != confirm_password:
            errors['confirmPassword'] = 'Passwords do not match'

        phone = str(data.get('phone') or '').strip()
        if not phone:
            errors['phone'] = 'Phone number is required'
        elif not AuthSchemas._validate_phone(phone):
            errors['phone'] = 'Invalid phone number format'
        else:
            cleaned_data['phone'] = phone

        is_valid = len(errors) == 0
        return is_valid, errors if not is_valid else None, cleaned_data if is_valid else None

    @staticmethod
    def validate_login(data: Dict[str, Any]) -> Tuple[bool, Optional[Dict[str, str]], Optional[Dict[str, Any]]]:
        """
        Validate user login data

        Returns:
            Tuple of (is_valid, errors, cleaned_data)
        """
        errors = {}
        cleaned_data = {}

        # Email validation
        email = str(data.get('email') or '').strip().lower()
        if not email:
            errors['email'] = 'Email is required'
        elif not AuthSchemas._validate_email_format(email):
            errors['email'] = 'Invalid email format'
        else:
            cleaned_data['email'] = email

        # Password validation
        password = data.get('password') or ''
        if not password:
            errors['password'] = 'Password is required'
        else:
            cleaned_data['password'] = password

        is_valid = len(errors) == 0
        return is_valid, errors if not is_valid else None, cleaned_data if is_valid else None

    # Helper validation methods

    @staticmethod
    def _validate_email_format(email: str) -> bool:
        """Validate email format using regex"""
        pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        return re.match(pattern, email) is not None

    @staticmethod
    def _validate_password_strength(password: str) -> bool:
        """
        Validate password strength
        Must contain at least one letter and one number
        """
        has_letter = any(c.isalpha() for c in password)
        has_number = any(c.isdigit() for c in password)
        return has_letter and has_number

    @staticmethod
    def _validate_phone(phone: str) -> bool:
        """Validate phone number format"""
        cleaned = re.sub(r'[\s\-\(\)]', '', phone)
        if not cleaned:
            return False

        # Allow leading +
        digits = cleaned[1:] if cleaned.startswith('+') else cleaned
        return digits.isdigit() and 10 <= len(digits) <= 15
