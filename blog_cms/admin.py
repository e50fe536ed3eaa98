"""
Django admin configuration for blog_cms.
"""
from django import forms
from django.contrib import admin

from .conf import blog_settings
from .models import Post
from .store import MUTABLE_FIELDS, PostStore


class PostAdminForm(forms.ModelForm):
    """
    Admin form for posts.

    The unique slug constraint is left to PostStore, which suffixes a taken
    slug instead of rejecting it.
    """

    class Meta:
        model = Post
        fields = "__all__"

    def _get_validation_exclusions(self):
        exclude = set(super()._get_validation_exclusions())
        exclude.add("slug")
        return exclude

    def clean_tags(self):
        tags = self.cleaned_data.get("tags")
        if tags is None:
            return []
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise forms.ValidationError(
                'Enter tags as a JSON list of strings, e.g. ["news", "python"].'
            )
        return tags


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    form = PostAdminForm
    list_display = ["title_preview", "author", "slug", "tag_list", "created_at", "updated_at"]
    list_filter = ["created_at"]
    search_fields = ["title", "content", "author", "slug"]
    date_hierarchy = "created_at"
    readonly_fields = ["created_at", "updated_at"]
    prepopulated_fields = {"slug": ("title",)}

    fieldsets = (
        (None, {
            "fields": ("title", "slug", "author", "content", "excerpt")
        }),
        ("Media & Tags", {
            "fields": ("featured_image", "tags")
        }),
        ("SEO", {
            "fields": ("seo_title", "seo_description"),
            "classes": ("collapse",),
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
        return ", ".join(obj.tags)

    tag_list.short_description = "Tags"

    def save_model(self, request, obj, form, change):
        """Save through PostStore so admin edits get the same slug handling."""
        store = PostStore(using=blog_settings.DATABASE_ALIAS)
        data = {name: getattr(obj, name) for name in MUTABLE_FIELDS}
        saved = store.update(obj.pk, data) if change else store.create(data)
        obj.pk = saved.pk
        obj.refresh_from_db(using=store.using)
