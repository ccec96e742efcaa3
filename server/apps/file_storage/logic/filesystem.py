"""Per-backend filesystem contract."""

import abc

from django.http.response import HttpResponseBase

from server.apps.file_storage.logic.file_meta import FileMeta
from server.apps.file_storage.values import Resource


class Filesystem(abc.ABC):
    """Storage backend serving the resources of one or more channels."""

    @abc.abstractmethod
    def meta(self, resource: Resource) -> FileMeta:
        """Build a metadata view for a resource.

        Args:
            resource: Resource stored on this filesystem.

        Returns:
            New FileMeta instance, one per request.
        """

    @abc.abstractmethod
    def response(self, resource: Resource) -> HttpResponseBase:
        """Build the HTTP response serving the resource bytes.

        Args:
            resource: Resource stored on this filesystem.

        Returns:
            Streaming response or redirect to the vendor.

        Raises:
            VendorQueryFailedError: If the vendor cannot serve it.
        """
