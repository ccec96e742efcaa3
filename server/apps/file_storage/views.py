"""Views for file_storage app."""

import logging

from django.core.exceptions import ValidationError
from django.http import Http404, HttpRequest, HttpResponseBadRequest
from django.http.response import HttpResponseBase
from django.views.decorators.http import require_GET

from server.apps.file_storage.exceptions import (
    UnknownChannelError,
    VendorQueryFailedError,
)
from server.apps.file_storage.logic.resource_urls import decode_resource
from server.apps.file_storage.logic.storage_manager import filesystems

logger = logging.getLogger(__name__)


@require_GET
def get_resource(request: HttpRequest) -> HttpResponseBase:
    """Serve a stored resource addressed by channel and base64 path.

    Args:
        request: Request with ``channel`` and ``path`` query values.

    Returns:
        The filesystem's response: a stream or a vendor redirect.

    Raises:
        Http404: If the channel is unknown or the vendor cannot serve
            the resource.
    """
    try:
        resource = decode_resource(
            request.GET.get('channel'),
            request.GET.get('path'),
        )
    except ValidationError as error:
        return HttpResponseBadRequest('; '.join(error.messages))

    try:
        filesystem = filesystems.for_channel(resource.channel)
    except UnknownChannelError as error:
        raise Http404(str(error)) from error

    try:
        return filesystem.response(resource)
    except VendorQueryFailedError as error:
        logger.warning('Resource not served: %s', resource)
        raise Http404(str(error)) from error
