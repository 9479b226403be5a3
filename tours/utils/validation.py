import re
from datetime import date
from typing import Optional


class Validator:
    """Input validation helpers"""

    @staticmethod
    def validate_email(email: str) -> bool:
        """Validate email format"""
        pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        return re.match(pattern, email) is not None

    @staticmethod
    def validate_phone(phone: str) -> bool:
        """Validate phone number format"""
        # Remove common formatting characters
        cleaned = re.sub(r'[\s\-\(\)\+]', '', phone)
        # Check if it's 10-15 digits
        return cleaned.isdigit() and 10 <= len(cleaned) <= 15

    @staticmethod
    def parse_date(value) -> Optional[date]:
        """Parse YYYY-MM-DD (or a date) into a date, None if invalid"""
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value).strip())
        except (ValueError, TypeError):
            return None

    @staticmethod
    def sanitize_input(text, max_length: int = None) -> str:
        """Sanitize user input"""
        if not text:
            return ""

        # Remove leading/trailing whitespace
        text = str(text).strip()

        # Truncate if needed
        if max_length and len(text) > max_length:
            text = text[:max_length]

        return text
