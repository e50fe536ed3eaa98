"""
Post persistence.

PostStore is the only code that writes posts. It owns the required-field
check, slug defaulting and the collision suffix, and translates database
failures into blog_cms.exceptions.
"""
import logging
from contextlib import contextmanager

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DEFAULT_DB_ALIAS, DatabaseError, IntegrityError, transaction
from django.utils.crypto import get_random_string

from .conf import blog_settings
from .exceptions import NotFoundError, PersistenceError, ValidationError
from .models import Post
from .slugs import slugify

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "content", "author")

TEXT_FIELDS = (
    "title",
    "content",
    "author",
    "slug",
    "excerpt",
    "featured_image",
    "seo_title",
    "seo_description",
)

MUTABLE_FIELDS = TEXT_FIELDS + ("tags",)


def random_suffix():
    """Return a short random string used to make a slug unique."""
    return get_random_string(
        blog_settings.SLUG_SUFFIX_LENGTH,
        allowed_chars=blog_settings.SLUG_SUFFIX_CHARS,
    )


def suffixed_slug(base_slug):
    """
    Append a random suffix to ``base_slug``.

    The base is cut so the result still fits in Post.slug.
    """
    max_length = Post._meta.get_field("slug").max_length
    base = base_slug[: max_length - blog_settings.SLUG_SUFFIX_LENGTH - 1].rstrip("-")
    return f"{base}-{random_suffix()}"


def clean_post_data(data):
    """
    Validate raw post input and return every mutable field.

    Optional fields missing from ``data`` come back empty, so applying the
    result to a post replaces all of its fields.

    Raises:
        ValidationError: a required field is missing or a value has the
            wrong type.
    """
    missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
    if missing:
        raise ValidationError(
            errors={name: ["This field is required."] for name in missing},
        )

    cleaned = {}
    errors = {}
    for name in TEXT_FIELDS:
        value = data.get(name)
        if value is None:
            value = ""
        if isinstance(value, str):
            cleaned[name] = value
        else:
            errors[name] = ["Expected a string."]

    tags = data.get("tags")
    if tags is None:
        tags = []
    if isinstance(tags, (list, tuple)) and all(isinstance(tag, str) for tag in tags):
        cleaned["tags"] = [tag.strip() for tag in tags if tag.strip()]
    else:
        errors["tags"] = ["Tags must be a list of strings."]

    if errors:
        raise ValidationError("Invalid post data", errors=errors)

    cleaned["slug"] = cleaned["slug"].strip()
    return cleaned


@contextmanager
def translate_database_errors(fallback):
    """Re-raise driver errors as PersistenceError."""
    try:
        yield
    except DatabaseError as exc:
        raise PersistenceError(str(exc) or fallback) from exc


class PostStore:
    """
    CRUD operations on posts against one database connection.

    Usage:
        store = PostStore(using="default")
        post = store.create({"title": "Hello", "content": "<p>Hi</p>", "author": "Ann"})
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def posts(self):
        return Post.objects.using(self.using)

    def list(self):
        """Return all posts, newest first."""
        with translate_database_errors("Failed to fetch posts"):
            return list(self.posts.order_by("-created_at", "-pk"))

    def create(self, data):
        """Validate ``data`` and persist it as a new post."""
        post = Post(**clean_post_data(data))
        with translate_database_errors("Failed to create post"):
            base_slug = self._assign_slug(post)
            self._validate(post)
            self._save(post, base_slug)
        logger.info("Created post %s with slug %r", post.pk, post.slug)
        return post

    def get_by_id(self, pk):
        """Return the post with primary key ``pk``."""
        try:
            with translate_database_errors("Failed to fetch post"):
                return self.posts.get(pk=pk)
        except (Post.DoesNotExist, ValueError, TypeError):
            raise NotFoundError() from None

    def update(self, pk, data):
        """Replace every mutable field of post ``pk`` with ``data``."""
        cleaned = clean_post_data(data)
        post = self.get_by_id(pk)
        for name, value in cleaned.items():
            setattr(post, name, value)
        with translate_database_errors("Failed to update post"):
            base_slug = self._assign_slug(post)
            self._validate(post)
            self._save(post, base_slug)
        logger.info("Updated post %s with slug %r", post.pk, post.slug)
        return post

    def delete(self, pk):
        """Remove post ``pk`` permanently."""
        post = self.get_by_id(pk)
        with translate_database_errors("Failed to delete post"):
            post.delete(using=self.using)
        logger.info("Deleted post %s", pk)

    def slug_taken(self, slug, exclude_pk=None):
        """Check whether another post already uses ``slug``."""
        qs = self.posts.filter(slug=slug)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()

    def _assign_slug(self, post):
        """
        Default the slug from the title and suffix it on collision.

        Returns the slug before any suffix was added.
        """
        if not post.slug:
            post.slug = slugify(post.title)
        base_slug = post.slug
        if base_slug and self.slug_taken(base_slug, exclude_pk=post.pk):
            post.slug = suffixed_slug(base_slug)
            logger.info("Slug %r already in use, using %r", base_slug, post.slug)
        return base_slug

    def _validate(self, post):
        try:
            post.clean_fields()
        except DjangoValidationError as exc:
            errors = exc.message_dict
            message = "; ".join(msg for messages in errors.values() for msg in messages)
            raise ValidationError(message, errors=errors) from exc

    def _save(self, post, base_slug):
        """
        Save ``post``, drawing a fresh suffix when the unique slug constraint
        fires because another writer took the slug after our check.

        Existing posts are only ever updated; if the row vanished since it was
        loaded, NotFoundError is raised instead of inserting it again.
        """
        updating = post.pk is not None
        for _ in range(blog_settings.SLUG_MAX_ATTEMPTS):
            try:
                with transaction.atomic(using=self.using):
                    post.save(using=self.using, force_update=updating)
                return
            except IntegrityError:
                if not post.slug or not self.slug_taken(post.slug, exclude_pk=post.pk):
                    raise
                logger.warning("Slug %r was taken concurrently, retrying", post.slug)
                post.slug = suffixed_slug(base_slug)
            except DatabaseError:
                if updating and not self.posts.filter(pk=post.pk).exists():
                    raise NotFoundError() from None
                raise
        raise PersistenceError(f"Could not find a free slug for {base_slug!r}")
