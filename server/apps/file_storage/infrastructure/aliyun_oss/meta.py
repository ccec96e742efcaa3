"""File metadata for objects stored on Aliyun OSS."""

import logging
import math
from typing import TYPE_CHECKING, Any, Final, final, override

import requests
from botocore.exceptions import BotoCoreError, ClientError

from server.apps.file_storage.exceptions import (
    MalformedVendorResponseError,
    VendorQueryFailedError,
)
from server.apps.file_storage.infrastructure.aliyun_oss.client import (
    OSS_PROCESS,
    OssClient,
)
from server.apps.file_storage.infrastructure.mime import ImageTypePredicate
from server.apps.file_storage.logic.file_meta import FileMeta
from server.apps.file_storage.values import ImageDimension, Pay, Resource

if TYPE_CHECKING:
    from django.contrib.auth.models import AbstractBaseUser

VENDOR_NAME: Final = 'aliyun-oss'
DEFAULT_SIGN_TTL: Final = 3600

_IMAGE_INFO_PROCESS: Final = 'image/info'
_FETCH_TIMEOUT: Final = 30.0

logger = logging.getLogger(__name__)


@final
class AliyunOssFileMeta(FileMeta):
    """FileMeta answered by OSS object metadata and image processing.

    Image dimensions come from the ``image/info`` process, fetched
    through a signed URL. OSS has no paywall concept.
    """

    def __init__(  # noqa: WPS211
        self,
        oss: OssClient,
        resource: Resource,
        bucket: str,
        *,
        session: requests.Session | None = None,
        sign_ttl: int = DEFAULT_SIGN_TTL,
        image_types: ImageTypePredicate | None = None,
    ) -> None:
        """Initialize OSS file meta.

        Args:
            oss: OSS vendor client.
            resource: Resource to describe.
            bucket: Bucket holding the object.
            session: HTTP session used to fetch image info.
            sign_ttl: Lifetime of signed URLs in seconds.
            image_types: Image MIME type predicate.
        """
        super().__init__(resource, image_types=image_types)
        self._oss = oss
        self._bucket = bucket
        self._session = session or requests.Session()
        self._sign_ttl = sign_ttl

    @override
    def get_size(self) -> int:
        """Get object size from OSS object metadata.

        Returns:
            Content length in bytes.

        Raises:
            VendorQueryFailedError: If the HEAD request fails or the
                metadata carries no usable content length.
        """
        path = self._resource.path
        try:
            logger.info('Querying OSS object meta: %s/%s', self._bucket, path)
            meta = self._oss.get_object_meta(self._bucket, path)
            return int(meta['content-length'])
        except (BotoCoreError, ClientError, KeyError, TypeError, ValueError) as error:
            logger.exception('OSS object meta query failed: %s', path)
            raise VendorQueryFailedError(
                VENDOR_NAME,
                'get_object_meta',
                self._resource,
            ) from error

    @override
    def get_vendor_name(self) -> str:
        return VENDOR_NAME

    @override
    def get_pay(self, user: 'AbstractBaseUser') -> Pay | None:
        return None

    @override
    def _query_image_dimension(self) -> ImageDimension:
        path = self._resource.path
        try:
            url = self._oss.sign_url(
                self._bucket,
                path,
                self._sign_ttl,
                'GET',
                {OSS_PROCESS: _IMAGE_INFO_PROCESS},
            )
            logger.info('Fetching OSS image info: %s/%s', self._bucket, path)
            response = self._session.get(url, timeout=_FETCH_TIMEOUT)
            response.raise_for_status()
            payload = response.json()
        except requests.JSONDecodeError as error:
            logger.exception('OSS image info is not JSON: %s', path)
            raise MalformedVendorResponseError(
                VENDOR_NAME,
                self._resource,
                'image info is not JSON',
            ) from error
        except (BotoCoreError, ClientError, requests.RequestException) as error:
            logger.exception('OSS image info request failed: %s', path)
            raise VendorQueryFailedError(
                VENDOR_NAME,
                'image_info',
                self._resource,
            ) from error

        return ImageDimension(
            width=self._read_pixels(payload, 'ImageWidth'),
            height=self._read_pixels(payload, 'ImageHeight'),
        )

    def _read_pixels(self, payload: Any, field: str) -> float:
        # Image info fields look like {"ImageWidth": {"value": "400"}}
        try:
            pixels = float(payload[field]['value'])
        except (KeyError, TypeError, ValueError) as error:
            logger.exception(
                'OSS image info has invalid %s: %s',
                field,
                self._resource,
            )
            raise MalformedVendorResponseError(
                VENDOR_NAME,
                self._resource,
                f'missing or invalid {field}',
            ) from error

        if not math.isfinite(pixels) or pixels <= 0:
            logger.error(
                'OSS image info %s is not positive: %s',
                field,
                self._resource,
            )
            raise MalformedVendorResponseError(
                VENDOR_NAME,
                self._resource,
                f'{field} must be positive, got {pixels}',
            )
        return pixels
