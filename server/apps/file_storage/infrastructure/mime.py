"""MIME type utilities for stored files."""

import mimetypes
from collections.abc import Callable, Iterable
from typing import Final

type ImageTypePredicate = Callable[[str], bool]

DEFAULT_MIME_TYPE: Final = 'application/octet-stream'

DEFAULT_IMAGE_TYPES: Final = (
    'image/jpeg',
    'image/png',
    'image/gif',
    'image/bmp',
    'image/tiff',
    'image/webp',
)

# Not every platform's mime.types knows webp
mimetypes.add_type('image/webp', '.webp')


def detect_mime_type(path: str) -> str:
    """Detect MIME type from a storage path.

    Uses Python's built-in mimetypes table keyed by the file extension,
    no content sniffing and no network call.

    Args:
        path: Storage path or filename with extension.

    Returns:
        MIME type string (e.g., 'image/jpeg', 'application/pdf').
        Returns 'application/octet-stream' if type cannot be determined.
    """
    mime_type, _ = mimetypes.guess_type(path, strict=False)
    if mime_type is None:
        return DEFAULT_MIME_TYPE
    return mime_type


def image_type_predicate(image_types: Iterable[str]) -> ImageTypePredicate:
    """Build an allow-list check for image MIME types.

    Args:
        image_types: MIME types treated as images.

    Returns:
        Callable answering whether a MIME type is an allowed image.
    """
    allowed = frozenset(mime_type.lower() for mime_type in image_types)

    def is_image(mime_type: str) -> bool:
        return mime_type.lower() in allowed

    return is_image


default_image_types: Final = image_type_predicate(DEFAULT_IMAGE_TYPES)
