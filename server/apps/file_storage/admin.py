"""Django admin configuration for file_storage app."""

from django.contrib import admin

from server.apps.file_storage.models import PaidNode


@admin.register(PaidNode)
class PaidNodeAdmin(admin.ModelAdmin):
    """Admin interface for PaidNode model."""

    list_display = [
        'resource',
        'amount',
        'paid_count_display',
        'created_at',
    ]

    search_fields = [
        'resource',
    ]

    readonly_fields = [
        'created_at',
    ]

    filter_horizontal = ['paid_users']

    def paid_count_display(self, obj: PaidNode) -> int:
        """Display how many users paid for the resource.

        Args:
            obj: PaidNode instance.

        Returns:
            Number of paying users.
        """
        return obj.paid_users.count()
    paid_count_display.short_description = 'Paid by'  # type: ignore[attr-defined]
