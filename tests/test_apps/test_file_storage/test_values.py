"""Tests for storage value types."""

from dataclasses import FrozenInstanceError

import pytest
from django.core.exceptions import ValidationError

from server.apps.file_storage.values import ImageDimension, Pay, Resource


def test_resource_string_form():
    """Test resource renders as channel:path."""
    resource = Resource(channel='public', path='2024/01/photo.png')

    assert str(resource) == 'public:2024/01/photo.png'


def test_resource_parse():
    """Test parsing splits on the first separator only."""
    resource = Resource.parse('public:folder/with:colon.txt')

    assert resource.channel == 'public'
    assert resource.path == 'folder/with:colon.txt'
    assert Resource.parse(str(resource)) == resource


def test_resource_parse_without_separator():
    """Test parsing a string with no channel."""
    with pytest.raises(ValidationError, match='channel:path'):
        Resource.parse('photo.png')


@pytest.mark.parametrize(('channel', 'path'), [
    ('', 'photo.png'),
    ('public', ''),
    ('pub:lic', 'photo.png'),
])
def test_resource_rejects_invalid_parts(channel, path):
    """Test empty parts and separator in channel are rejected."""
    with pytest.raises(ValidationError):
        Resource(channel=channel, path=path)


def test_resource_is_immutable():
    """Test resource fields cannot be reassigned."""
    resource = Resource(channel='public', path='photo.png')

    with pytest.raises(FrozenInstanceError):
        resource.path = 'other.png'  # type: ignore[misc]


def test_image_dimension_to_dict():
    """Test dimension serialization."""
    dimension = ImageDimension(width=400.0, height=267.0)

    assert dimension.to_dict() == {'width': 400.0, 'height': 267.0}


def test_pay_to_dict():
    """Test pay serialization."""
    pay = Pay(node_id=7, amount=100, paid=False)

    assert pay.to_dict() == {'node': 7, 'amount': 100, 'paid': False}
