"""
Django admin configuration for blogify.
"""
from django.contrib import admin
from django.utils.html import format_html

from .models import Comment, ContactMessage, ContentItem, Profile, Tag


@admin.register(ContentItem)
class ContentItemAdmin(admin.ModelAdmin):
    list_display = [
        "title_preview",
        "category",
        "author",
        "tag_list",
        "created_at",
        "updated_at",
    ]
    list_filter = ["category", "created_at"]
    search_fields = ["title", "author", "excerpt", "content"]
    date_hierarchy = "created_at"
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        (None, {
            "fields": ("category", "title", "author", "excerpt", "content")
        }),
        ("Taxonomy", {
            "fields": ("tags",)
        }),
        ("Media", {
            "fields": ("image_url",)
        }),
        ("Metadata", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",),
        }),
    )

    def title_preview(self, obj):
        """Truncated title for list display."""
        return obj.title[:60] + "..." if len(obj.title) > 60 else obj.title

    title_preview.short_description = "Title"

    def tag_list(self, obj):
        return ", ".join(obj.tags or [])

    tag_list.short_description = "Tags"


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    """Tags in use by any content item cannot be deleted."""

    list_display = ["name", "color_swatch", "usage_count", "created_at"]
    search_fields = ["name", "description"]
    readonly_fields = ["created_at", "updated_at"]

    def color_swatch(self, obj):
        return format_html(
            '<span style="display:inline-block;width:1em;height:1em;background:{};"></span> {}',
            obj.color,
            obj.color,
        )

    color_swatch.short_description = "Color"

    def usage_count(self, obj):
        return obj.usage_count

    usage_count.short_description = "Used by"

    def has_delete_permission(self, request, obj=None):
        if obj is not None and obj.usage_count:
            return False
        return super().has_delete_permission(request, obj)

    def get_actions(self, request):
        # Bulk delete would bypass the per-tag usage check.
        actions = super().get_actions(request)
        actions.pop("delete_selected", None)
        return actions


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["preview", "name", "email", "post_type", "post_id", "created_at"]
    list_filter = ["post_type", "created_at"]
    search_fields = ["content", "name", "email"]
    readonly_fields = ["created_at"]


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ["fullname", "email", "created_at"]
    search_fields = ["fullname", "email", "message"]
    readonly_fields = ["fullname", "email", "message", "created_at"]


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["user", "role", "phone", "updated_at"]
    list_filter = ["role"]
    search_fields = ["user__username", "user__email", "phone"]
    raw_id_fields = ["user"]
    readonly_fields = ["updated_at"]
