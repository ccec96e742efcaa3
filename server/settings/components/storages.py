"""Django storage configuration.

Two storage aliases are used by the file storage channels:
- ``default``: local disk under ``FILE_STORAGE_ROOT``
- ``s3``: S3-compatible bucket (AWS S3, MinIO, Cloudflare R2)
  through django-storages
"""

from typing import Any, Final

from server.settings.components import BASE_DIR, config

STORAGES: Final[dict[str, dict[str, Any]]] = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
        'OPTIONS': {
            'location': config(
                'FILE_STORAGE_ROOT',
                default=str(BASE_DIR.joinpath('storage')),
            ),
        },
    },
    's3': {
        'BACKEND': 'storages.backends.s3.S3Storage',
        'OPTIONS': {
            'bucket_name': config('AWS_STORAGE_BUCKET_NAME', default='plus'),
            'access_key': config('AWS_ACCESS_KEY_ID', default=None),
            'secret_key': config('AWS_SECRET_ACCESS_KEY', default=None),
            'endpoint_url': config(
                'AWS_S3_ENDPOINT_URL',
                default=None,
            ),
            'region_name': config(
                'AWS_S3_REGION_NAME',
                default='us-east-1',
            ),
            'file_overwrite': False,  # Prevent accidental overwrites
            'default_acl': None,  # Inherit bucket ACL
        },
    },
    'staticfiles': {
        # Keep static files separate from user files
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
