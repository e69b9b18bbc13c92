"""HTTP Basic authentication backed by the profile ``CredentialStore``.

Security decisions
------------------
* **Fail Closed**: unknown users and wrong passwords both return 401
  with the same message.
* The credential set is read from the ``core`` app config on every
  request; nothing is cached on the authenticator.
* Only views that demand ``IsAuthenticated`` reject anonymous requests;
  the global default permission is ``AllowAny``.
"""

import structlog
from django.apps import apps

from rest_framework.authentication import BasicAuthentication
from rest_framework.exceptions import AuthenticationFailed

logger = structlog.get_logger(__name__)


class ProfileBasicAuthentication(BasicAuthentication):
    """DRF Basic auth that checks the in-memory credential set."""

    www_authenticate_realm = "api"

    def authenticate_credentials(self, userid, password, request=None):
        """Return ``(InMemoryUser, None)`` or raise ``AuthenticationFailed``."""
        store = apps.get_app_config("core").credentials
        user = store.authenticate(userid, password)
        if user is None:
            logger.warning(
                "basic_auth_failed",
                username=userid,
                profile=store.profile,
            )
            raise AuthenticationFailed("Invalid username/password.")

        logger.info("basic_auth_authenticated", username=user.username)
        return (user, None)
