"""In-memory API credentials selected by deployment profile.

``CredentialStore`` is built once at startup (see ``CoreConfig.ready``)
from ``settings.SECURITY_PROFILE`` and ``settings.SECURITY_USERS``.
Passwords are hashed with Django's configured password hashers as soon
as the store is built; plaintext never outlives construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

import structlog
from django.contrib.auth.hashers import check_password, make_password
from django.core.exceptions import ImproperlyConfigured

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class InMemoryUser:
    """Principal attached to ``request.user`` after Basic authentication.

    There is no Django ``User`` row behind it.
    """

    username: str
    roles: Tuple[str, ...] = ("USER",)

    # DRF checks
    is_authenticated = True
    is_active = True

    def __str__(self) -> str:
        return self.username


@dataclass(frozen=True)
class Credential:
    username: str
    password_hash: str = field(repr=False)
    roles: Tuple[str, ...] = ("USER",)


class CredentialStore:
    """Immutable username -> hashed password lookup."""

    def __init__(self, profile: str, credentials: Iterable[Credential]) -> None:
        self.profile = profile
        self._credentials: Dict[str, Credential] = {
            credential.username: credential for credential in credentials
        }

    @classmethod
    def for_profile(
        cls,
        profile: str,
        users: Mapping[str, Sequence[Tuple[str, str]]],
    ) -> CredentialStore:
        """Build the store for ``profile`` from ``(username, password)`` pairs.

        Users configured with an empty password are skipped so that a
        missing environment variable never yields a passwordless login.

        Raises:
            ImproperlyConfigured: if ``profile`` has no entry in ``users``.
        """
        if profile not in users:
            raise ImproperlyConfigured(
                f"Unknown security profile '{profile}'. "
                f"Expected one of: {', '.join(sorted(users))}."
            )

        credentials = []
        for username, password in users[profile]:
            if not password:
                logger.warning(
                    "security.user_skipped",
                    profile=profile,
                    username=username,
                    reason="empty password",
                )
                continue
            credentials.append(
                Credential(username=username, password_hash=make_password(password))
            )

        store = cls(profile, credentials)
        logger.info(
            "security.credentials_loaded",
            profile=profile,
            usernames=store.usernames,
        )
        return store

    @property
    def usernames(self) -> list[str]:
        return sorted(self._credentials)

    def authenticate(self, username: str, password: str) -> Optional[InMemoryUser]:
        """Return the matching user, or ``None`` on unknown user / bad password."""
        credential = self._credentials.get(username)
        if credential is None:
            return None
        if not check_password(password, credential.password_hash):
            return None
        return InMemoryUser(username=credential.username, roles=credential.roles)

    def __len__(self) -> int:
        return len(self._credentials)
