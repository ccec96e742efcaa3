"""Tests for resource URL building and parsing."""

import base64
from urllib.parse import parse_qs, urlsplit

import pytest
from django.core.exceptions import ValidationError

from server.apps.file_storage.logic.resource_urls import (
    build_resource_url,
    decode_resource,
    encode_path,
    parse_resource_url,
)
from server.apps.file_storage.values import Resource


def test_build_resource_url_shape(settings):
    """Test URL points at storage:get with channel and base64 path."""
    settings.SITE_URL = 'https://plus.example/'
    resource = Resource(channel='public', path='photo.png')

    url = build_resource_url(resource)

    parts = urlsplit(url)
    assert f'{parts.scheme}://{parts.netloc}' == 'https://plus.example'
    assert parts.path == '/storage/'
    assert parse_qs(parts.query) == {
        'channel': ['public'],
        'path': [base64.b64encode(b'photo.png').decode('ascii')],
    }


def test_build_resource_url_relative(settings):
    """Test URL is host-relative without SITE_URL."""
    settings.SITE_URL = ''

    url = build_resource_url(Resource(channel='c', path='photo.png'))

    assert url.startswith('/storage/?channel=c&path=')


@pytest.mark.parametrize('path', [
    'photo.png',
    '2024/01/a b+c=d.jpg',
    'folder/with:colon/??.png',
    '头像/图片.webp',
    'x',
])
def test_resource_url_round_trip(settings, path):
    """Test decoding a built URL recovers the original resource."""
    settings.SITE_URL = 'https://plus.example'
    resource = Resource(channel='feed', path=path)

    assert parse_resource_url(build_resource_url(resource)) == resource


def test_encode_path_is_standard_base64():
    """Test path encoding matches plain base64 of UTF-8 bytes."""
    assert encode_path('a/b.png') == 'YS9iLnBuZw=='


@pytest.mark.parametrize(('channel', 'encoded_path'), [
    (None, 'cGhvdG8ucG5n'),
    ('public', None),
    ('', 'cGhvdG8ucG5n'),
    ('public', ''),
])
def test_decode_resource_missing_values(channel, encoded_path):
    """Test channel and path are both required."""
    with pytest.raises(ValidationError, match='required'):
        decode_resource(channel, encoded_path)


@pytest.mark.parametrize('encoded_path', [
    'not base64!',
    base64.b64encode(b'\xff\xfe').decode('ascii'),
])
def test_decode_resource_invalid_path(encoded_path):
    """Test invalid base64 and non UTF-8 payloads are rejected."""
    with pytest.raises(ValidationError, match='base64'):
        decode_resource('public', encoded_path)


def test_parse_resource_url_rejects_foreign_url():
    """Test URLs without resource query are rejected."""
    with pytest.raises(ValidationError, match='Not a resource URL'):
        parse_resource_url('https://plus.example/feeds/?page=2')
