"""Thin Aliyun OSS client on top of boto3.

OSS speaks the S3 protocol, so a regular boto3 S3 client does the
transport and signing. The only OSS specific part is extra query
parameters (``x-oss-process``) that must be part of the signed URL.
"""

import logging
from collections.abc import Mapping
from typing import Any, Final, Self, final
from urllib.parse import urlencode, urlsplit

import boto3
from botocore.awsrequest import AWSRequest
from botocore.client import BaseClient
from botocore.config import Config

OSS_PROCESS: Final = 'x-oss-process'

# Pseudo API parameter carrying extra query params into the signer
_QUERY_PARAM: Final = 'OssQuery'
_QUERY_CONTEXT_KEY: Final = 'oss_query'

_CLIENT_METHODS: Final = {
    'GET': 'get_object',
    'HEAD': 'head_object',
    'PUT': 'put_object',
    'DELETE': 'delete_object',
}

logger = logging.getLogger(__name__)


def _pop_query_params(
    params: dict[str, Any],
    context: dict[str, Any],
    **kwargs: Any,
) -> None:
    query = params.pop(_QUERY_PARAM, None)
    if query:
        context[_QUERY_CONTEXT_KEY] = query


def _append_query_params(request: AWSRequest, **kwargs: Any) -> None:
    query = request.context.get(_QUERY_CONTEXT_KEY)
    if not query:
        return
    separator = '&' if urlsplit(request.url).query else '?'
    request.url = f'{request.url}{separator}{urlencode(query)}'


@final
class OssClient:
    """Vendor client exposing the calls file metadata needs.

    Wraps a boto3 S3 client. Errors from botocore are not translated
    here; callers map them to their own failures.
    """

    def __init__(self, client: BaseClient) -> None:
        """Initialize OSS client.

        Args:
            client: boto3 S3 client pointed at an OSS endpoint.
        """
        self._client = client
        events = client.meta.events
        events.register(
            'provide-client-params.s3',
            _pop_query_params,
            unique_id='oss-pop-query-params',
        )
        events.register(
            'before-sign.s3',
            _append_query_params,
            unique_id='oss-append-query-params',
        )

    @classmethod
    def from_options(
        cls,
        *,
        endpoint_url: str | None,
        region_name: str | None,
        access_key: str | None,
        secret_key: str | None,
    ) -> Self:
        """Create client from connection options.

        Args:
            endpoint_url: OSS endpoint, e.g.
                'https://oss-cn-hangzhou.aliyuncs.com'.
            region_name: OSS region, e.g. 'oss-cn-hangzhou'.
            access_key: AccessKey ID.
            secret_key: AccessKey secret.

        Returns:
            OssClient with a virtual-hosted style S3 client.
        """
        client = boto3.client(
            's3',
            endpoint_url=endpoint_url,
            region_name=region_name,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            config=Config(
                signature_version='s3v4',
                s3={'addressing_style': 'virtual'},
            ),
        )
        return cls(client)

    def sign_url(  # noqa: WPS211
        self,
        bucket: str,
        path: str,
        ttl: int,
        method: str = 'GET',
        params: Mapping[str, str] | None = None,
    ) -> str:
        """Create a time-limited signed URL for an object.

        Args:
            bucket: Bucket name.
            path: Object key.
            ttl: Seconds the URL stays valid.
            method: HTTP method the URL is signed for.
            params: Extra query parameters to sign, e.g.
                ``{OSS_PROCESS: 'image/info'}``.

        Returns:
            Signed URL.

        Raises:
            ValueError: If the HTTP method is not supported.
        """
        http_method = method.upper()
        try:
            client_method = _CLIENT_METHODS[http_method]
        except KeyError as error:
            raise ValueError(f'Unsupported method: {method}') from error

        api_params: dict[str, Any] = {'Bucket': bucket, 'Key': path}
        if params:
            api_params[_QUERY_PARAM] = dict(params)

        logger.debug('Signing %s URL for %s/%s', http_method, bucket, path)
        return self._client.generate_presigned_url(
            client_method,
            Params=api_params,
            ExpiresIn=ttl,
            HttpMethod=http_method,
        )

    def get_object_meta(self, bucket: str, path: str) -> dict[str, Any]:
        """Fetch object metadata with a HEAD request.

        Args:
            bucket: Bucket name.
            path: Object key.

        Returns:
            Header style dict with ``content-length``, ``content-type``,
            ``etag`` and ``last-modified`` keys.
        """
        response = self._client.head_object(Bucket=bucket, Key=path)
        return {
            'content-length': response['ContentLength'],
            'content-type': response.get('ContentType', ''),
            'etag': response.get('ETag', '').strip('"'),
            'last-modified': response.get('LastModified'),
        }
