from django.apps import AppConfig
from django.conf import settings


class CoreConfig(AppConfig):
    name = "modules.core"
    label = "core"

    def ready(self) -> None:
        from modules.core.security import CredentialStore

        self.credentials = CredentialStore.for_profile(
            settings.SECURITY_PROFILE, settings.SECURITY_USERS
        )
