"""Channel to filesystem resolution."""

import logging
from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from server.apps.file_storage.exceptions import UnknownChannelError
from server.apps.file_storage.logic.file_meta import FileMeta
from server.apps.file_storage.logic.filesystem import Filesystem
from server.apps.file_storage.values import Resource

logger = logging.getLogger(__name__)


class FilesystemHandler:
    """Lazily builds and caches filesystems from ``FILE_STORAGE``.

    Modeled on Django's ``StorageHandler``: one instance per process,
    one filesystem per configured name, reset when settings change.
    """

    def __init__(self) -> None:
        """Initialize with an empty cache."""
        self._filesystems: dict[str, Filesystem] = {}

    def get(self, name: str) -> Filesystem:
        """Get a filesystem by its configured name.

        Args:
            name: Key in ``FILE_STORAGE['FILESYSTEMS']``.

        Returns:
            Cached filesystem instance.

        Raises:
            KeyError: If no such filesystem is configured.
        """
        try:
            return self._filesystems[name]
        except KeyError:
            filesystem = self._create(name)
            self._filesystems[name] = filesystem
            return filesystem

    def for_channel(self, channel: str) -> Filesystem:
        """Get the filesystem serving a channel.

        Args:
            channel: Resource channel.

        Returns:
            Filesystem configured for the channel.

        Raises:
            UnknownChannelError: If the channel is not configured.
        """
        channels: dict[str, str] = _config()['CHANNELS']
        try:
            name = channels[channel]
        except KeyError as error:
            raise UnknownChannelError(channel) from error
        return self.get(name)

    def reset(self) -> None:
        """Drop cached filesystems."""
        self._filesystems.clear()

    def _create(self, name: str) -> Filesystem:
        params = _config()['FILESYSTEMS'][name]
        backend = import_string(params['BACKEND'])
        logger.info('Creating filesystem %s: %s', name, params['BACKEND'])
        return backend(**params.get('OPTIONS', {}))


filesystems = FilesystemHandler()


def _config() -> dict[str, Any]:
    return settings.FILE_STORAGE


def default_channel() -> str:
    """Get the channel used when callers do not name one."""
    return _config()['DEFAULT_CHANNEL']


def get_file_meta(resource: Resource) -> FileMeta:
    """Build file metadata for a resource on its channel's filesystem.

    Args:
        resource: Resource to describe.

    Returns:
        New FileMeta instance for the request.

    Raises:
        UnknownChannelError: If the channel is not configured.
    """
    return filesystems.for_channel(resource.channel).meta(resource)
