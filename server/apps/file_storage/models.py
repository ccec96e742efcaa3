"""Database models for file_storage app."""

from typing import Final, final, override

from django.conf import settings
from django.db import models

# Constants for field max lengths
_RESOURCE_MAX_LENGTH: Final = 512


@final
class PaidNode(models.Model):
    """Paywall attached to one stored resource.

    ``resource`` holds the ``channel:path`` string form of the resource.
    Users who bought access are tracked in ``paid_users``.
    """

    resource = models.CharField(
        max_length=_RESOURCE_MAX_LENGTH,
        unique=True,
        help_text='Resource locator: {channel}:{path}',
    )

    amount = models.PositiveBigIntegerField(
        help_text='Price in the smallest currency unit',
    )

    paid_users = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name='paid_nodes',
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Paid Node'  # type: ignore[mutable-override]
        verbose_name_plural = 'Paid Nodes'  # type: ignore[mutable-override]
        ordering = ['-created_at']

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.resource} ({self.amount})'

    def is_paid_by(self, user_id: int) -> bool:
        """Check whether the user already bought access.

        Args:
            user_id: Requesting user's ID.

        Returns:
            True if the user is among paid users.
        """
        return self.paid_users.filter(pk=user_id).exists()
