"""Value types shared by every storage backend."""

from dataclasses import dataclass
from typing import Final, Self, final, override

from django.core.exceptions import ValidationError

_SEPARATOR: Final = ':'


@final
@dataclass(frozen=True, slots=True)
class Resource:
    """Vendor-neutral locator of a stored object.

    ``channel`` is the logical bucket the object belongs to, ``path``
    is the opaque key understood by the channel's filesystem.
    """

    channel: str
    path: str

    def __post_init__(self) -> None:
        """Reject locators that cannot address anything.

        Raises:
            ValidationError: If channel or path is empty, or the
                channel contains the separator.
        """
        if not self.channel:
            raise ValidationError('Resource channel cannot be empty')
        if _SEPARATOR in self.channel:
            raise ValidationError(
                f'Resource channel cannot contain {_SEPARATOR!r}',
            )
        if not self.path:
            raise ValidationError('Resource path cannot be empty')

    @override
    def __str__(self) -> str:
        """String form ``channel:path``."""
        return f'{self.channel}{_SEPARATOR}{self.path}'

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Build a resource from its ``channel:path`` string form.

        Args:
            raw: String such as ``'public:2024/01/photo.png'``.

        Returns:
            Parsed resource. The path may itself contain ``:``.

        Raises:
            ValidationError: If the separator is missing.
        """
        channel, separator, path = raw.partition(_SEPARATOR)
        if not separator:
            raise ValidationError(
                f'Resource must look like "channel{_SEPARATOR}path": {raw!r}',
            )
        return cls(channel=channel, path=path)


@final
@dataclass(frozen=True, slots=True)
class ImageDimension:
    """Pixel size of an image."""

    width: float
    height: float

    def to_dict(self) -> dict[str, float]:
        """Serialize for API responses."""
        return {'width': self.width, 'height': self.height}


@final
@dataclass(frozen=True, slots=True)
class Pay:
    """Paywall state of a resource for one requesting user."""

    node_id: int
    amount: int
    paid: bool

    def to_dict(self) -> dict[str, int | bool]:
        """Serialize for API responses."""
        return {
            'node': self.node_id,
            'amount': self.amount,
            'paid': self.paid,
        }
