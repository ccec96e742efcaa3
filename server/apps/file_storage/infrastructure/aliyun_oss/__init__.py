"""Aliyun OSS backend, reached through its S3-compatible API."""

from server.apps.file_storage.infrastructure.aliyun_oss.client import (
    OSS_PROCESS,
    OssClient,
)
from server.apps.file_storage.infrastructure.aliyun_oss.filesystem import (
    AliyunOssFilesystem,
)
from server.apps.file_storage.infrastructure.aliyun_oss.meta import (
    VENDOR_NAME,
    AliyunOssFileMeta,
)

__all__ = [
    'OSS_PROCESS',
    'VENDOR_NAME',
    'AliyunOssFileMeta',
    'AliyunOssFilesystem',
    'OssClient',
]
