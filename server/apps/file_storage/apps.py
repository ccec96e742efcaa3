"""Django app configuration for file_storage app."""

from typing import override

from django.apps import AppConfig


class FileStorageConfig(AppConfig):
    """Configuration for file_storage app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.file_storage'
    verbose_name = 'File Storage'

    @override
    def ready(self) -> None:
        """Import signal handlers when app is ready."""
        from server.apps.file_storage import signals  # noqa: F401
