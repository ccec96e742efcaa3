"""Public URLs for stored resources.

URLs point at the application's own ``storage:get`` route and carry
``channel`` and the base64 encoded ``path`` as query parameters, so no
vendor signing detail ever reaches the client.
"""

import base64
import binascii
from urllib.parse import parse_qs, urlencode, urlsplit

from django.conf import settings
from django.core.exceptions import ValidationError
from django.urls import reverse

from server.apps.file_storage.values import Resource


def encode_path(path: str) -> str:
    """Encode a storage path for use in a URL query.

    Args:
        path: Raw storage path.

    Returns:
        Standard base64 of the UTF-8 path.
    """
    return base64.b64encode(path.encode('utf-8')).decode('ascii')


def decode_resource(channel: str | None, encoded_path: str | None) -> Resource:
    """Rebuild a resource from ``storage:get`` query values.

    Args:
        channel: Channel query value.
        encoded_path: Base64 encoded path query value.

    Returns:
        Decoded resource.

    Raises:
        ValidationError: If a value is missing or the path is not
            valid base64 encoded UTF-8.
    """
    if not channel or not encoded_path:
        raise ValidationError('Both channel and path are required')

    try:
        raw_path = base64.b64decode(encoded_path, validate=True)
        path = raw_path.decode('utf-8')
    except (binascii.Error, UnicodeDecodeError) as error:
        raise ValidationError('Path is not valid base64') from error

    return Resource(channel=channel, path=path)


def build_resource_url(resource: Resource) -> str:
    """Build the public URL of a resource.

    Args:
        resource: Resource to address.

    Returns:
        ``SITE_URL`` + storage:get route + query string. Host-relative
        when ``SITE_URL`` is empty.
    """
    query = urlencode({
        'channel': resource.channel,
        'path': encode_path(resource.path),
    })
    origin = settings.SITE_URL.rstrip('/')
    return f'{origin}{reverse("storage:get")}?{query}'


def parse_resource_url(url: str) -> Resource:
    """Recover the resource addressed by a URL from build_resource_url.

    Args:
        url: Absolute or host-relative resource URL.

    Returns:
        The resource the URL was built for.

    Raises:
        ValidationError: If the query does not carry a single channel
            and path.
    """
    query = parse_qs(urlsplit(url).query)
    channels = query.get('channel', [])
    paths = query.get('path', [])
    if len(channels) != 1 or len(paths) != 1:
        raise ValidationError(f'Not a resource URL: {url}')
    return decode_resource(channels[0], paths[0])
