"""
Models for django-blog-cms.

    from blog_cms.models import Post
"""
from .posts import Post

__all__ = ["Post"]
