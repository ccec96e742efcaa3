"""Filesystem backed by any Django storage.

Works with the local ``FileSystemStorage`` as well as the
django-storages ``S3Storage``. Paywalls are kept in the database.
"""

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Final, final, override

from botocore.exceptions import BotoCoreError, ClientError
from django.core.files.images import get_image_dimensions
from django.core.files.storage import Storage, storages
from django.http import FileResponse

from server.apps.file_storage.exceptions import (
    MalformedVendorResponseError,
    VendorQueryFailedError,
)
from server.apps.file_storage.infrastructure.mime import (
    ImageTypePredicate,
    detect_mime_type,
    image_type_predicate,
)
from server.apps.file_storage.logic.file_meta import FileMeta
from server.apps.file_storage.logic.filesystem import Filesystem
from server.apps.file_storage.models import PaidNode
from server.apps.file_storage.values import ImageDimension, Pay, Resource

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractBaseUser

DEFAULT_VENDOR_NAME: Final = 'local'

# Failures a Django storage may raise: local disk or S3 through boto3
_STORAGE_ERRORS: Final = (OSError, BotoCoreError, ClientError)

logger = logging.getLogger(__name__)


@final
class StorageFileMeta(FileMeta):
    """FileMeta answered by a Django storage.

    Image dimensions are read from the image header with Pillow.
    """

    def __init__(
        self,
        storage: Storage,
        resource: Resource,
        *,
        vendor_name: str = DEFAULT_VENDOR_NAME,
        image_types: ImageTypePredicate | None = None,
    ) -> None:
        """Initialize storage file meta.

        Args:
            storage: Django storage holding the file.
            resource: Resource to describe.
            vendor_name: Name reported as the vendor.
            image_types: Image MIME type predicate.
        """
        super().__init__(resource, image_types=image_types)
        self._storage = storage
        self._vendor_name = vendor_name

    @override
    def get_size(self) -> int:
        """Get file size from the storage.

        Returns:
            Size in bytes.

        Raises:
            VendorQueryFailedError: If the storage cannot stat the file.
        """
        path = self._resource.path
        try:
            logger.info('Querying storage size: %s', path)
            return self._storage.size(path)
        except _STORAGE_ERRORS as error:
            logger.exception('Storage size query failed: %s', path)
            raise VendorQueryFailedError(
                self._vendor_name,
                'size',
                self._resource,
            ) from error

    @override
    def get_vendor_name(self) -> str:
        return self._vendor_name

    @override
    def get_pay(self, user: 'AbstractBaseUser') -> Pay | None:
        """Get paywall state from the resource's paid node.

        Args:
            user: Requesting user.

        Returns:
            Pay info, or None if the resource is free.
        """
        node = PaidNode.objects.filter(resource=str(self._resource)).first()
        if node is None:
            return None
        return Pay(
            node_id=node.pk,
            amount=node.amount,
            paid=user.pk is not None and node.is_paid_by(user.pk),
        )

    @override
    def _query_image_dimension(self) -> ImageDimension:
        path = self._resource.path
        try:
            logger.info('Reading image header: %s', path)
            with self._storage.open(path, 'rb') as image_file:
                width, height = get_image_dimensions(image_file)
        except _STORAGE_ERRORS as error:
            logger.exception('Failed to open image: %s', path)
            raise VendorQueryFailedError(
                self._vendor_name,
                'open',
                self._resource,
            ) from error

        if width is None or height is None:
            logger.error('Unreadable image header: %s', path)
            raise MalformedVendorResponseError(
                self._vendor_name,
                self._resource,
                'unreadable image header',
            )
        return ImageDimension(width=float(width), height=float(height))


@final
class StorageFilesystem(Filesystem):
    """Channels backed by a Django storage alias from ``STORAGES``."""

    def __init__(
        self,
        *,
        storage_alias: str = 'default',
        vendor_name: str = DEFAULT_VENDOR_NAME,
        image_types: Iterable[str] | None = None,
        storage: Storage | None = None,
    ) -> None:
        """Initialize storage filesystem.

        Args:
            storage_alias: Key in ``settings.STORAGES``.
            vendor_name: Name reported as the vendor.
            image_types: MIME types treated as images.
            storage: Prebuilt storage, skips the alias lookup.
        """
        self._storage = storage or storages[storage_alias]
        self._vendor_name = vendor_name
        self._image_types: ImageTypePredicate | None = None
        if image_types is not None:
            self._image_types = image_type_predicate(image_types)

    @override
    def meta(self, resource: Resource) -> StorageFileMeta:
        return StorageFileMeta(
            self._storage,
            resource,
            vendor_name=self._vendor_name,
            image_types=self._image_types,
        )

    @override
    def response(self, resource: Resource) -> FileResponse:
        """Stream the file from the storage.

        Args:
            resource: Resource to serve.

        Returns:
            Streaming file response.

        Raises:
            VendorQueryFailedError: If the file cannot be opened.
        """
        path = resource.path
        try:
            file_obj = self._storage.open(path, 'rb')
        except _STORAGE_ERRORS as error:
            logger.exception('Failed to open file for response: %s', path)
            raise VendorQueryFailedError(
                self._vendor_name,
                'open',
                resource,
            ) from error
        return FileResponse(
            file_obj,
            content_type=detect_mime_type(path),
            filename=PurePosixPath(path).name,
        )
