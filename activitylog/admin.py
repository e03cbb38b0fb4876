from django.contrib import admin

from .models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ['created_at', 'log_name', 'description', 'subject_type', 'subject_id', 'causer_type', 'causer_id']
    list_filter = ['log_name', 'created_at']
    search_fields = ['description', 'log_name']
    readonly_fields = [
        'created_at', 'updated_at',
        'subject_type', 'subject_id', 'causer_type', 'causer_id',
    ]
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        # Activities are written through the builder API, not by hand
        return False
