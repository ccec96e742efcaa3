"""File storage channels and filesystems.

Every stored resource belongs to a channel. A channel is served by one
filesystem, and every filesystem is built from a dotted ``BACKEND`` path
and its ``OPTIONS``, the same way Django builds ``STORAGES``.
"""

from typing import Any, Final

from server.settings.components import config

FILE_STORAGE: Final[dict[str, Any]] = {
    'DEFAULT_CHANNEL': config('FILE_STORAGE_DEFAULT_CHANNEL', default='public'),
    'CHANNELS': {
        'public': 'local',
        'avatar': 'local',
        'feed': config('FILE_STORAGE_FEED_FILESYSTEM', default='local'),
        'bucket': 's3',
        'oss': 'aliyun-oss',
    },
    'FILESYSTEMS': {
        'local': {
            'BACKEND': (
                'server.apps.file_storage.infrastructure.storage_backend'
                '.StorageFilesystem'
            ),
            'OPTIONS': {
                'storage_alias': 'default',
                'vendor_name': 'local',
            },
        },
        's3': {
            'BACKEND': (
                'server.apps.file_storage.infrastructure.storage_backend'
                '.StorageFilesystem'
            ),
            'OPTIONS': {
                'storage_alias': 's3',
                'vendor_name': 'aws-s3',
            },
        },
        'aliyun-oss': {
            'BACKEND': (
                'server.apps.file_storage.infrastructure.aliyun_oss'
                '.AliyunOssFilesystem'
            ),
            'OPTIONS': {
                'bucket': config('ALIYUN_OSS_BUCKET', default='plus'),
                'endpoint_url': config(
                    'ALIYUN_OSS_ENDPOINT_URL',
                    default='https://oss-cn-hangzhou.aliyuncs.com',
                ),
                'region_name': config(
                    'ALIYUN_OSS_REGION_NAME',
                    default='oss-cn-hangzhou',
                ),
                'access_key': config('ALIYUN_OSS_ACCESS_KEY_ID', default=None),
                'secret_key': config(
                    'ALIYUN_OSS_ACCESS_KEY_SECRET',
                    default=None,
                ),
                'sign_ttl': config(
                    'ALIYUN_OSS_SIGN_TTL',
                    cast=int,
                    default=3600,
                ),
            },
        },
    },
}
