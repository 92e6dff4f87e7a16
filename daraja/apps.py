from django.apps import AppConfig


class DarajaConfig(AppConfig):
    name = 'daraja'
    verbose_name = 'M-Pesa Daraja'

    def ready(self):
        """
        Fail fast on DARAJA_* settings that can never produce a client.
        Missing credentials are left for the first client to report.
        """
        from django.conf import settings
        from .constants import ALLOWED_BASE_URLS
        from .exceptions import ConfigurationError

        base_url = getattr(settings, 'DARAJA_BASE_URL', None)
        if base_url is not None and base_url not in ALLOWED_BASE_URLS:
            raise ConfigurationError(
                f"DARAJA_BASE_URL must be one of {sorted(ALLOWED_BASE_URLS)}, got {base_url!r}"
            )
