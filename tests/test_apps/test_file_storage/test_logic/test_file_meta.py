"""Tests for the vendor-neutral FileMeta behavior."""

from typing import override

import pytest

from server.apps.file_storage.exceptions import NotAnImageError
from server.apps.file_storage.infrastructure.mime import image_type_predicate
from server.apps.file_storage.logic.file_meta import FileMeta
from server.apps.file_storage.logic.resource_urls import build_resource_url
from server.apps.file_storage.values import ImageDimension, Pay, Resource


class CountingFileMeta(FileMeta):
    """FileMeta recording how often the vendor is asked."""

    def __init__(self, resource, **kwargs):
        super().__init__(resource, **kwargs)
        self.size_queries = 0
        self.dimension_queries = 0

    @override
    def get_size(self) -> int:
        self.size_queries += 1
        return 2048

    @override
    def get_vendor_name(self) -> str:
        return 'counting'

    @override
    def get_pay(self, user) -> Pay | None:
        return None

    @override
    def _query_image_dimension(self) -> ImageDimension:
        self.dimension_queries += 1
        return ImageDimension(width=640.0, height=480.0)


@pytest.mark.parametrize(('path', 'expected'), [
    ('photo.png', True),
    ('photo.jpeg', True),
    ('scan.tiff', True),
    ('doc.pdf', False),
    ('clip.mp4', False),
    ('vector.svg', False),
])
def test_has_image_follows_allow_list(path, expected):
    """Test has_image is true exactly for allowed image types."""
    file_meta = CountingFileMeta(Resource(channel='public', path=path))

    assert file_meta.has_image() is expected


def test_has_image_with_injected_predicate():
    """Test a backend can narrow the image allow-list."""
    file_meta = CountingFileMeta(
        Resource(channel='public', path='photo.jpg'),
        image_types=image_type_predicate(['image/png']),
    )

    assert file_meta.has_image() is False


def test_image_dimension_is_queried_once():
    """Test repeated dimension requests reuse the first answer."""
    file_meta = CountingFileMeta(Resource(channel='public', path='photo.png'))

    first = file_meta.get_image_dimension()
    second = file_meta.get_image_dimension()

    assert first == second == ImageDimension(width=640.0, height=480.0)
    assert file_meta.dimension_queries == 1


def test_image_dimension_not_an_image():
    """Test non-images fail before any vendor query."""
    file_meta = CountingFileMeta(Resource(channel='public', path='doc.pdf'))

    with pytest.raises(NotAnImageError) as exc_info:
        file_meta.get_image_dimension()

    assert exc_info.value.mime_type == 'application/pdf'
    assert file_meta.dimension_queries == 0


def test_size_is_never_cached():
    """Test every size request goes to the vendor."""
    file_meta = CountingFileMeta(Resource(channel='public', path='photo.png'))

    file_meta.get_size()
    file_meta.get_size()

    assert file_meta.size_queries == 2


def test_to_dict_for_image():
    """Test image serialization includes the dimension."""
    resource = Resource(channel='public', path='photo.png')
    file_meta = CountingFileMeta(resource)

    assert file_meta.to_dict() == {
        'url': build_resource_url(resource),
        'vendor': 'counting',
        'mime': 'image/png',
        'size': 2048,
        'dimension': {'width': 640.0, 'height': 480.0},
    }


def test_to_dict_for_non_image():
    """Test non-image serialization omits the dimension key."""
    file_meta = CountingFileMeta(Resource(channel='public', path='doc.pdf'))

    serialized = file_meta.to_dict()

    assert 'dimension' not in serialized
    assert serialized['mime'] == 'application/pdf'
    assert file_meta.dimension_queries == 0
