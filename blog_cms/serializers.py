"""
JSON wire format for posts.

The API speaks camelCase; the store and model use snake_case.
"""

# wire key -> model field
FIELD_MAP = {
    "title": "title",
    "content": "content",
    "author": "author",
    "slug": "slug",
    "excerpt": "excerpt",
    "tags": "tags",
    "featuredImage": "featured_image",
    "seoTitle": "seo_title",
    "seoDescription": "seo_description",
}


def serialize_post(post):
    """Return the JSON-ready representation of ``post``."""
    data = {"id": post.pk}
    for key, field in FIELD_MAP.items():
        data[key] = getattr(post, field)
    data["createdAt"] = post.created_at.isoformat()
    data["updatedAt"] = post.updated_at.isoformat()
    return data


def post_data_from_payload(payload):
    """Map a decoded request body onto store input, ignoring unknown keys."""
    return {field: payload[key] for key, field in FIELD_MAP.items() if key in payload}
