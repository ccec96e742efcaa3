"""Management command to print metadata of a stored resource."""

import json
import logging
from typing import Any

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from server.apps.file_storage.exceptions import FileStorageError
from server.apps.file_storage.logic.storage_manager import (
    default_channel,
    get_file_meta,
)
from server.apps.file_storage.values import Resource

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Print the API serialization of a resource as JSON."""

    help = 'Show metadata of a stored resource (channel:path)'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            'resource',
            help=(
                'Resource locator, e.g. public:2024/01/photo.png. '
                'A bare path uses the default channel.'
            ),
        )
        parser.add_argument(
            '--user-id',
            type=int,
            default=None,
            help='Include paywall state for this user',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the command.

        Args:
            args: Positional arguments (unused).
            options: Command options.

        Raises:
            CommandError: If the resource or user cannot be resolved, or
                the vendor query fails.
        """
        try:
            resource = _resolve_resource(options['resource'])
        except ValidationError as error:
            raise CommandError('; '.join(error.messages)) from error

        try:
            file_meta = get_file_meta(resource)
            serialized = file_meta.to_dict()
            if options['user_id'] is not None:
                user = get_user_model().objects.get(pk=options['user_id'])
                pay = file_meta.get_pay(user)
                serialized['pay'] = pay.to_dict() if pay else None
        except get_user_model().DoesNotExist as error:
            raise CommandError(
                f'User not found: {options["user_id"]}',
            ) from error
        except FileStorageError as error:
            logger.exception('Metadata query failed: %s', resource)
            raise CommandError(str(error)) from error

        self.stdout.write(json.dumps(serialized, indent=2, sort_keys=True))


def _resolve_resource(raw: str) -> Resource:
    if ':' in raw:
        return Resource.parse(raw)
    return Resource(channel=default_channel(), path=raw)
