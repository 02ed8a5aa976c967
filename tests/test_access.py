import unittest
from types import SimpleNamespace

from tests import ADMIN_EMAIL
from washbay.exceptions import AuthRequiredError, PermissionDeniedError
from washbay.models.profile import ProfileRole
from washbay.services.access_service import (
    EmailAuthorizationPolicy,
    is_admin,
    require_actor,
    require_admin,
)


def profile(email, role=ProfileRole.USER):
    return SimpleNamespace(id=1, email=email, role=role)


class TestEmailAuthorizationPolicy(unittest.TestCase):

    def setUp(self):
        self.policy = EmailAuthorizationPolicy("boss@example.com")

    def test_exact_email_is_admin(self):
        self.assertTrue(self.policy.is_admin(profile("boss@example.com")))

    def test_other_email_is_not_admin(self):
        self.assertFalse(self.policy.is_admin(profile("staff@example.com")))

    def test_admin_role_with_other_email_is_not_admin(self):
        self.assertFalse(self.policy.is_admin(profile("staff@example.com", ProfileRole.ADMIN)))

    def test_comparison_is_case_sensitive(self):
        self.assertFalse(self.policy.is_admin(profile("Boss@example.com")))

    def test_no_profile_is_not_admin(self):
        self.assertFalse(self.policy.is_admin(None))


class TestConfiguredGate(unittest.TestCase):

    def test_default_policy_uses_configured_email(self):
        self.assertTrue(is_admin(profile(ADMIN_EMAIL)))
        self.assertFalse(is_admin(profile("someone@example.com", ProfileRole.ADMIN)))

    def test_require_actor(self):
        actor = profile("staff@example.com")
        self.assertIs(require_actor(actor), actor)
        with self.assertRaises(AuthRequiredError):
            require_actor(None)

    def test_require_admin(self):
        with self.assertRaises(AuthRequiredError):
            require_admin(None)
        with self.assertRaises(PermissionDeniedError):
            require_admin(profile("staff@example.com", ProfileRole.ADMIN))
        owner = profile(ADMIN_EMAIL)
        self.assertIs(require_admin(owner), owner)


if __name__ == "__main__":
    unittest.main()
