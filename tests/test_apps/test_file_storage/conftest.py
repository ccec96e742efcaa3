"""Shared fixtures for file_storage app tests."""

from collections.abc import Callable, Iterator
from io import BytesIO
from typing import Any
from unittest.mock import Mock

import boto3
import pytest
import requests
from botocore.config import Config
from django.contrib.auth import get_user_model
from django.core.files.base import ContentFile
from django.core.files.storage import FileSystemStorage
from moto import mock_aws
from PIL import Image

from server.apps.file_storage.infrastructure.aliyun_oss import OssClient

User = get_user_model()

TEST_BUCKET = 'plus'


@pytest.fixture
def user(db):
    """Create test user.

    Returns:
        User instance for testing.
    """
    return User.objects.create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
    )


@pytest.fixture
def other_user(db):
    """Create second test user.

    Returns:
        Second user instance.
    """
    return User.objects.create_user(
        username='otheruser',
        password='testpass123',
        email='other@example.com',
    )


@pytest.fixture
def mock_s3() -> Iterator[Any]:
    """Mock S3 service with the plus bucket.

    Yields:
        boto3 S3 resource with plus bucket created.
    """
    with mock_aws():
        conn = boto3.resource('s3', region_name='us-east-1')
        conn.create_bucket(Bucket=TEST_BUCKET)
        yield conn


@pytest.fixture
def oss_client(mock_s3) -> OssClient:
    """OSS client talking to mocked S3.

    Returns:
        OssClient wrapping a moto backed boto3 client.
    """
    client = boto3.client(
        's3',
        region_name='us-east-1',
        config=Config(signature_version='s3v4'),
    )
    return OssClient(client)


@pytest.fixture
def image_info_session() -> Callable[..., Mock]:
    """Factory of HTTP sessions answering OSS image info requests.

    Returns:
        Callable taking the JSON payload and returning a session mock.
    """
    def factory(payload: Any = None, **response_attrs: Any) -> Mock:
        response = Mock(spec=requests.Response)
        response.json.return_value = payload
        for attr_name, attr_value in response_attrs.items():
            setattr(response, attr_name, attr_value)
        session = Mock(spec=requests.Session)
        session.get.return_value = response
        return session

    return factory


@pytest.fixture
def oss_image_info() -> dict[str, Any]:
    """Image info document as returned by OSS for a 400x267 JPEG.

    Returns:
        Parsed image info payload.
    """
    return {
        'FileSize': {'value': '21839'},
        'Format': {'value': 'jpg'},
        'ImageHeight': {'value': '267'},
        'ImageWidth': {'value': '400'},
    }


@pytest.fixture
def png_bytes() -> bytes:
    """A real 40x30 PNG image.

    Returns:
        Encoded PNG bytes.
    """
    buffer = BytesIO()
    Image.new('RGB', (40, 30), color='red').save(buffer, format='PNG')
    return buffer.getvalue()


@pytest.fixture
def local_storage(tmp_path) -> FileSystemStorage:
    """Local storage rooted in a temporary directory.

    Returns:
        FileSystemStorage instance.
    """
    return FileSystemStorage(location=tmp_path)


@pytest.fixture
def stored_png(local_storage, png_bytes) -> str:
    """Store a PNG image in the local storage.

    Returns:
        Storage path of the image.
    """
    return local_storage.save('2024/01/photo.png', ContentFile(png_bytes))


@pytest.fixture
def file_storage_settings(settings, tmp_path):
    """Point channels at a temporary local storage and a fake OSS.

    Returns:
        pytest-django settings wrapper.
    """
    settings.SITE_URL = ''
    settings.STORAGES = {
        'default': {
            'BACKEND': 'django.core.files.storage.FileSystemStorage',
            'OPTIONS': {'location': str(tmp_path)},
        },
        'staticfiles': {
            'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
        },
    }
    settings.FILE_STORAGE = {
        'DEFAULT_CHANNEL': 'public',
        'CHANNELS': {
            'public': 'local',
            'oss': 'aliyun-oss',
        },
        'FILESYSTEMS': {
            'local': {
                'BACKEND': (
                    'server.apps.file_storage.infrastructure.storage_backend'
                    '.StorageFilesystem'
                ),
                'OPTIONS': {'storage_alias': 'default'},
            },
            'aliyun-oss': {
                'BACKEND': (
                    'server.apps.file_storage.infrastructure.aliyun_oss'
                    '.AliyunOssFilesystem'
                ),
                'OPTIONS': {
                    'bucket': TEST_BUCKET,
                    'region_name': 'us-east-1',
                    'access_key': 'testing',
                    'secret_key': 'testing',
                },
            },
        },
    }
    return settings
