"""
Service layer exceptions

Every booking/payment operation raises one of these instead of returning
a half-finished result. The HTTP layer maps them onto response codes.
"""
from typing import Dict, Optional


class ServiceError(Exception):
    """Base exception for booking and payment service errors"""
    status_code = 400

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        self.message = message
        self.errors = errors or {}
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Raised when input is missing or out of range (nothing was written)"""
    status_code = 422


class PermissionDeniedError(ServiceError):
    """Raised when the actor may not perform the operation"""
    status_code = 403


class NotFoundError(ServiceError):
    """Raised when a referenced package, booking or payment does not exist"""
    status_code = 404


class StateError(ServiceError):
    """Raised on an illegal booking or payment status transition"""
    status_code = 409


class StorageError(ServiceError):
    """Raised when the database or the evidence store rejects a read/write"""
    status_code = 500
