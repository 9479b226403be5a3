from dataclasses import dataclass
from typing import Optional

from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity

from tours.extensions import db
from tours.models import User
from tours.models.enums import UserRole
from tours.services.errors import PermissionDeniedError


@dataclass(frozen=True)
class Actor:
    """The authenticated user an operation runs on behalf of"""
    id: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_user(cls, user: User) -> 'Actor':
        return cls(id=user.id, role=user.role)


def current_actor() -> Optional[Actor]:
    """Resolve the bearer token of the current request to an Actor"""
    verify_jwt_in_request(optional=True)
    user_id = get_jwt_identity()
    if not user_id:
        return None

    user = db.session.get(User, user_id)
    if not user or not user.is_active:
        return None
    return Actor.from_user(user)


def require_actor(actor: Optional[Actor]) -> Actor:
    if actor is None:
        raise PermissionDeniedError('Please login to continue')
    return actor


def require_admin(actor: Optional[Actor]) -> Actor:
    actor = require_actor(actor)
    if not actor.is_admin:
        raise PermissionDeniedError('Administrator access required')
    return actor
