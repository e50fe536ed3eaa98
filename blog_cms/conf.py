"""
Configuration settings for django-blog-cms.

Override these in your Django settings.py:

    BLOG_CMS = {
        'DATABASE_ALIAS': 'default',
        'SLUG_SUFFIX_LENGTH': 5,
        'MEDIA_MAX_SIZE_MB': 5,
        ...
    }
"""
import string

from django.conf import settings

DEFAULTS = {
    # Connection alias handed to PostStore by the views
    "DATABASE_ALIAS": "default",

    # Slugs
    "SLUG_SUFFIX_LENGTH": 5,
    "SLUG_SUFFIX_CHARS": string.ascii_lowercase + string.digits,
    "SLUG_MAX_ATTEMPTS": 5,

    # Form defaults
    "EXCERPT_LENGTH": 160,
    "SEO_TITLE_LENGTH": 60,
    "READING_WORDS_PER_MINUTE": 200,

    # Uploads
    "MEDIA_UPLOAD_PATH": "blog/uploads/%Y/%m/",
    "MEDIA_MAX_SIZE_MB": 5,
    "ALLOWED_IMAGE_TYPES": ["image/jpeg", "image/png", "image/gif", "image/webp"],
}


class BlogCMSSettings:
    """
    Lazy settings object that reads from Django settings.

    Access via: from blog_cms.conf import blog_settings
    """

    def __getattr__(self, name):
        if name not in DEFAULTS:
            raise AttributeError(f"Invalid blog_cms setting: {name}")

        user_settings = getattr(settings, "BLOG_CMS", {})
        return user_settings.get(name, DEFAULTS[name])


blog_settings = BlogCMSSettings()
