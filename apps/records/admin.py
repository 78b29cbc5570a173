from django.contrib import admin
from django.utils.html import format_html
from .models import DailyRecord


@admin.register(DailyRecord)
class DailyRecordAdmin(admin.ModelAdmin):
    """
    Admin interface for daily records.

    Profit is shown but never edited; DailyRecord.save() recomputes it
    from sales and expenses on every save.
    """

    list_display = [
        'date',
        'sales',
        'expenses',
        'profit_badge',
        'notes',
        'created_at',
    ]
    list_filter = ['date']
    search_fields = ['notes']
    date_hierarchy = 'date'
    ordering = ['-date', '-created_at']
    readonly_fields = ['id', 'profit', 'created_at', 'updated_at']

    fieldsets = (
        ('Day', {
            'fields': ('id', 'date')
        }),
        ('Amounts', {
            'fields': ('sales', 'expenses', 'profit')
        }),
        ('Notes', {
            'fields': ('notes',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def profit_badge(self, obj):
        """Display profit in blue, or orange when negative."""
        color = '#2563eb' if obj.profit >= 0 else '#ea580c'
        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, obj.profit
        )
    profit_badge.short_description = 'Profit'
    profit_badge.admin_order_field = 'profit'
