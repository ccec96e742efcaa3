"""Vendor-neutral file metadata contract."""

import abc
import logging
from typing import TYPE_CHECKING, Any

from server.apps.file_storage.exceptions import NotAnImageError
from server.apps.file_storage.infrastructure.mime import (
    ImageTypePredicate,
    default_image_types,
    detect_mime_type,
)
from server.apps.file_storage.logic.resource_urls import build_resource_url
from server.apps.file_storage.values import ImageDimension, Pay, Resource

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractBaseUser

logger = logging.getLogger(__name__)


class FileMeta(abc.ABC):
    """Read-only metadata view over one stored resource.

    One instance serves one request and is discarded afterwards. Size
    is queried from the vendor on every call; only the image dimension
    is computed once and kept on the instance.

    Backends implement the vendor specific queries:
    ``get_size``, ``get_vendor_name``, ``get_pay`` and
    ``_query_image_dimension``.
    """

    def __init__(
        self,
        resource: Resource,
        *,
        image_types: ImageTypePredicate | None = None,
    ) -> None:
        """Initialize file meta.

        Args:
            resource: Resource to describe.
            image_types: Predicate telling which MIME types are images.
                Defaults to jpeg, png, gif, bmp, tiff and webp.
        """
        self._resource = resource
        self._is_image_type = image_types or default_image_types
        self._dimension: ImageDimension | None = None

    def has_image(self) -> bool:
        """Check if the resource is an allowed image type.

        Returns:
            True if the resolved MIME type is in the image allow-list.
        """
        return self._is_image_type(self.get_mime_type())

    def get_image_dimension(self) -> ImageDimension:
        """Get the pixel size of the image.

        The vendor is queried at most once per instance.

        Returns:
            Image width and height.

        Raises:
            NotAnImageError: If the resource is not an allowed image.
                Raised before any vendor call.
        """
        if not self.has_image():
            raise NotAnImageError(self._resource, self.get_mime_type())

        if self._dimension is None:
            self._dimension = self._query_image_dimension()
        else:
            logger.debug('Image dimension cache hit: %s', self._resource)
        return self._dimension

    def get_mime_type(self) -> str:
        """Get MIME type from the resource path extension."""
        return detect_mime_type(self._resource.path)

    def url(self) -> str:
        """Get the public URL served by the storage:get route."""
        return build_resource_url(self._resource)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses.

        Returns:
            ``url``, ``vendor``, ``mime`` and ``size`` keys, plus
            ``dimension`` only when the resource is an image.
        """
        serialized: dict[str, Any] = {
            'url': self.url(),
            'vendor': self.get_vendor_name(),
            'mime': self.get_mime_type(),
            'size': self.get_size(),
        }
        if self.has_image():
            serialized['dimension'] = self.get_image_dimension().to_dict()
        return serialized

    @abc.abstractmethod
    def get_size(self) -> int:
        """Get the object size in bytes, fresh from the vendor.

        Raises:
            VendorQueryFailedError: If the vendor call fails.
        """

    @abc.abstractmethod
    def get_vendor_name(self) -> str:
        """Get the constant name identifying the backend."""

    @abc.abstractmethod
    def get_pay(self, user: 'AbstractBaseUser') -> Pay | None:
        """Get paywall state of the resource for a requesting user.

        Args:
            user: Requesting user.

        Returns:
            Pay info, or None when the backend has no paywall.
        """

    @abc.abstractmethod
    def _query_image_dimension(self) -> ImageDimension:
        """Ask the vendor for the image pixel size.

        Raises:
            VendorQueryFailedError: If the vendor call fails.
            MalformedVendorResponseError: If the answer is unusable.
        """
