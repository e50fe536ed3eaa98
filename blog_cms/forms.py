"""
Authoring form for posts.
"""
from django import forms
from django.utils.text import Truncator

from .conf import blog_settings
from .text import excerpt_from_html, split_tags
from .widgets import RichTextEditorWidget


class PostForm(forms.Form):
    """
    Form state for creating and editing a post.

    Blank optional fields get defaults on clean:
    - excerpt: plain text of the content, cut to EXCERPT_LENGTH
    - seo_title: the title, cut to SEO_TITLE_LENGTH
    - seo_description: the excerpt
    """

    title = forms.CharField(max_length=100)
    author = forms.CharField(max_length=50)
    content = forms.CharField(widget=RichTextEditorWidget)
    excerpt = forms.CharField(max_length=160, required=False, widget=forms.Textarea(attrs={"rows": 3}))
    slug = forms.CharField(
        max_length=255,
        required=False,
        help_text="Leave blank to generate one from the title.",
    )
    tags = forms.CharField(required=False, help_text="Separate tags with commas.")
    featured_image = forms.CharField(max_length=500, required=False)
    seo_title = forms.CharField(max_length=60, required=False)
    seo_description = forms.CharField(max_length=160, required=False, widget=forms.Textarea(attrs={"rows": 3}))

    @classmethod
    def for_post(cls, post, **kwargs):
        """Return an unbound form pre-filled from ``post``."""
        initial = {
            "title": post.title,
            "author": post.author,
            "content": post.content,
            "excerpt": post.excerpt,
            "slug": post.slug,
            "tags": ", ".join(post.tags),
            "featured_image": post.featured_image,
            "seo_title": post.seo_title,
            "seo_description": post.seo_description,
        }
        return cls(initial=initial, **kwargs)

    def clean_tags(self):
        return split_tags(self.cleaned_data.get("tags"))

    def clean(self):
        cleaned_data = super().clean()
        title = cleaned_data.get("title")
        content = cleaned_data.get("content")

        if not cleaned_data.get("excerpt") and content:
            cleaned_data["excerpt"] = excerpt_from_html(content)

        if not cleaned_data.get("seo_title") and title:
            cleaned_data["seo_title"] = Truncator(title).chars(blog_settings.SEO_TITLE_LENGTH)

        if not cleaned_data.get("seo_description") and cleaned_data.get("excerpt"):
            cleaned_data["seo_description"] = cleaned_data["excerpt"]

        return cleaned_data

    def to_post_data(self):
        """Return cleaned values as PostStore input."""
        return dict(self.cleaned_data)
