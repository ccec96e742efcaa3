"""Aliyun OSS filesystem."""

import logging
from collections.abc import Iterable
from typing import final, override

import requests
from botocore.exceptions import BotoCoreError, ClientError
from django.http import HttpResponseRedirect

from server.apps.file_storage.exceptions import VendorQueryFailedError
from server.apps.file_storage.infrastructure.aliyun_oss.client import OssClient
from server.apps.file_storage.infrastructure.aliyun_oss.meta import (
    DEFAULT_SIGN_TTL,
    VENDOR_NAME,
    AliyunOssFileMeta,
)
from server.apps.file_storage.infrastructure.mime import (
    ImageTypePredicate,
    image_type_predicate,
)
from server.apps.file_storage.logic.filesystem import Filesystem
from server.apps.file_storage.values import Resource

logger = logging.getLogger(__name__)


@final
class AliyunOssFilesystem(Filesystem):
    """Channels backed by one OSS bucket.

    Bytes are never proxied: responses redirect the client to a
    signed, time-limited OSS URL.
    """

    def __init__(  # noqa: WPS211
        self,
        *,
        bucket: str,
        endpoint_url: str | None = None,
        region_name: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        sign_ttl: int = DEFAULT_SIGN_TTL,
        image_types: Iterable[str] | None = None,
        oss: OssClient | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize OSS filesystem.

        Args:
            bucket: Bucket holding the objects.
            endpoint_url: OSS endpoint URL.
            region_name: OSS region.
            access_key: AccessKey ID.
            secret_key: AccessKey secret.
            sign_ttl: Lifetime of signed URLs in seconds.
            image_types: MIME types treated as images, defaults to the
                common web image formats.
            oss: Prebuilt client, skips building one from options.
            session: HTTP session shared by file metas.
        """
        self._bucket = bucket
        self._sign_ttl = sign_ttl
        self._oss = oss or OssClient.from_options(
            endpoint_url=endpoint_url,
            region_name=region_name,
            access_key=access_key,
            secret_key=secret_key,
        )
        self._session = session or requests.Session()
        self._image_types: ImageTypePredicate | None = None
        if image_types is not None:
            self._image_types = image_type_predicate(image_types)

    @override
    def meta(self, resource: Resource) -> AliyunOssFileMeta:
        return AliyunOssFileMeta(
            self._oss,
            resource,
            self._bucket,
            session=self._session,
            sign_ttl=self._sign_ttl,
            image_types=self._image_types,
        )

    @override
    def response(self, resource: Resource) -> HttpResponseRedirect:
        """Redirect to a signed download URL.

        Args:
            resource: Resource to serve.

        Returns:
            Temporary redirect to OSS.

        Raises:
            VendorQueryFailedError: If the URL cannot be signed.
        """
        try:
            url = self._oss.sign_url(
                self._bucket,
                resource.path,
                self._sign_ttl,
            )
        except (BotoCoreError, ClientError) as error:
            logger.exception('Failed to sign OSS URL: %s', resource)
            raise VendorQueryFailedError(
                VENDOR_NAME,
                'sign_url',
                resource,
            ) from error
        return HttpResponseRedirect(url)
