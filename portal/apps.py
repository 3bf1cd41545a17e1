"""
Django app configuration for the portal module
===============================================

AppConfig subclass that defines the portal app and checks the language
configuration once the settings are loaded.
"""

from django.apps import AppConfig # pyright: ignore[reportMissingModuleSource]


class PortalConfig(AppConfig):
    """Configuration class for the portal application."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'portal'
    verbose_name = 'Localized Portal'

    def ready(self):
        """
        Validate the supported language set at startup.
        Raises ImproperlyConfigured if it is empty or lacks the default.
        """
        from .languages import validate_language_settings
        validate_language_settings()
