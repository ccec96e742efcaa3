"""Signal handlers for file_storage app."""

import logging

from django.core.signals import setting_changed
from django.dispatch import receiver

from server.apps.file_storage.logic.storage_manager import filesystems

logger = logging.getLogger(__name__)

_FILESYSTEM_SETTINGS = frozenset(('FILE_STORAGE', 'STORAGES'))


@receiver(setting_changed)
def reset_filesystems(
    sender: object,
    setting: str,
    **kwargs: object,
) -> None:
    """Drop cached filesystems when their settings are overridden.

    Args:
        sender: Signal sender.
        setting: Name of the changed setting.
        **kwargs: Additional signal arguments.
    """
    if setting in _FILESYSTEM_SETTINGS:
        logger.debug('Resetting filesystems after %s changed', setting)
        filesystems.reset()
