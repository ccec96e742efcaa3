"""Exceptions for file_storage app."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from server.apps.file_storage.values import Resource


class FileStorageError(Exception):
    """Base class for file storage failures."""


class NotAnImageError(FileStorageError):
    """Raised when image dimensions are requested for a non-image file."""

    def __init__(self, resource: 'Resource', mime_type: str) -> None:
        """Initialize NotAnImageError.

        Args:
            resource: Resource the dimension was requested for.
            mime_type: MIME type resolved for the resource.
        """
        self.resource = resource
        self.mime_type = mime_type
        super().__init__(
            f'Resource {resource} ({mime_type}) is not a supported image',
        )


class VendorQueryFailedError(FileStorageError):
    """Raised when a call to the storage vendor fails.

    The original vendor exception is always chained as ``__cause__``.
    """

    def __init__(
        self,
        vendor: str,
        operation: str,
        resource: 'Resource',
    ) -> None:
        """Initialize VendorQueryFailedError.

        Args:
            vendor: Vendor name of the failing backend.
            operation: Short name of the failed operation.
            resource: Resource the operation was issued for.
        """
        self.vendor = vendor
        self.operation = operation
        self.resource = resource
        super().__init__(
            f'{vendor}: {operation} failed for resource {resource}',
        )


class MalformedVendorResponseError(FileStorageError):
    """Raised when a vendor answer lacks the fields we need."""

    def __init__(
        self,
        vendor: str,
        resource: 'Resource',
        detail: str,
    ) -> None:
        """Initialize MalformedVendorResponseError.

        Args:
            vendor: Vendor name of the backend.
            resource: Resource the response was for.
            detail: What was wrong with the response.
        """
        self.vendor = vendor
        self.resource = resource
        self.detail = detail
        super().__init__(
            f'{vendor}: malformed response for resource {resource}: {detail}',
        )


class UnknownChannelError(FileStorageError):
    """Raised when no filesystem is configured for a channel."""

    def __init__(self, channel: str) -> None:
        """Initialize UnknownChannelError.

        Args:
            channel: Channel name that could not be resolved.
        """
        self.channel = channel
        super().__init__(f'No filesystem configured for channel: {channel}')
