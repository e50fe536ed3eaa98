"""
Post model for django-blog-cms.

The model only describes storage. Slug defaulting and uniqueness handling
live in blog_cms.store.PostStore.
"""
from django.db import models
from django.db.models import Q

from ..text import excerpt_from_html, reading_time as estimate_reading_time


class Post(models.Model):
    """
    Blog post / article.

    Content is HTML produced by the rich-text editor. Tags are kept as an
    ordered list of strings.
    """

    # Content
    title = models.CharField(
        max_length=100,
        error_messages={
            "blank": "Please provide a title for this post",
            "max_length": "Title cannot be more than 100 characters",
        },
    )
    content = models.TextField(
        error_messages={"blank": "Please provide content for this post"},
    )
    author = models.CharField(
        max_length=50,
        error_messages={
            "blank": "Please provide an author name",
            "max_length": "Author name cannot be more than 50 characters",
        },
    )
    slug = models.CharField(max_length=255, blank=True, db_index=True)
    excerpt = models.CharField(
        max_length=160,
        blank=True,
        error_messages={"max_length": "Excerpt cannot be more than 160 characters"},
    )
    tags = models.JSONField(default=list, blank=True)
    featured_image = models.CharField(max_length=500, blank=True)

    # SEO
    seo_title = models.CharField(
        max_length=60,
        blank=True,
        error_messages={"max_length": "SEO title cannot be more than 60 characters"},
    )
    seo_description = models.CharField(
        max_length=160,
        blank=True,
        error_messages={
            "max_length": "SEO description cannot be more than 160 characters",
        },
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-pk"]
        constraints = [
            models.UniqueConstraint(
                fields=["slug"],
                condition=~Q(slug=""),
                name="blog_cms_post_unique_slug",
            ),
        ]

    def __str__(self):
        return self.title

    @property
    def preview(self):
        """Return the excerpt, or a plain-text cut of the content."""
        if self.excerpt:
            return self.excerpt
        return excerpt_from_html(self.content)

    @property
    def reading_time(self):
        """Estimated reading time in minutes."""
        return estimate_reading_time(self.content)

    @property
    def meta_title(self):
        """Title for the <title> tag."""
        return self.seo_title or self.title

    @property
    def meta_description(self):
        """Description for search engines, falling back to the excerpt."""
        return self.seo_description or self.preview
