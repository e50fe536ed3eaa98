"""
django-blog-cms - A small Django blog content-management app.

Features:
- Posts with title, rich-text content, author, tags and featured image
- SEO title and description per post
- Slugs derived from titles, kept unique across posts
- JSON API for listing, creating, reading, updating and deleting posts
- Image upload endpoint used by the rich-text editor
"""

__version__ = "0.1.0"
