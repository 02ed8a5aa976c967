"""
Access control gate.

Admin access is decided by a single configured email address.  Profiles
also carry a ``role`` column that admins can edit, but the role does not
open the admin screens; only the email match does.
"""
from functools import lru_cache
from typing import Optional

from washbay.config import get_settings
from washbay.exceptions import AuthRequiredError, PermissionDeniedError


class AuthorizationPolicy:
    """Decides whether a profile may use the admin operations."""

    def is_admin(self, profile) -> bool:
        raise NotImplementedError


class EmailAuthorizationPolicy(AuthorizationPolicy):
    """Admin iff the profile email equals the configured one, exactly."""

    def __init__(self, admin_email: str):
        self.admin_email = admin_email

    def is_admin(self, profile) -> bool:
        if profile is None:
            return False
        return profile.email == self.admin_email


@lru_cache()
def get_policy() -> AuthorizationPolicy:
    return EmailAuthorizationPolicy(get_settings().admin_email)


def is_admin(profile, policy: Optional[AuthorizationPolicy] = None) -> bool:
    return (policy or get_policy()).is_admin(profile)


def require_actor(actor):
    """Return the actor, or raise if nobody is signed in."""
    if actor is None:
        raise AuthRequiredError()
    return actor


def require_admin(actor, policy: Optional[AuthorizationPolicy] = None):
    require_actor(actor)
    if not is_admin(actor, policy):
        raise PermissionDeniedError()
    return actor
