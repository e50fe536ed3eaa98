"""
Tests for the Post admin.
"""
import pytest
from django.urls import reverse

from blog_cms.models import Post
from blog_cms.store import PostStore


@pytest.fixture
def admin_data():
    return {
        "title": "From the admin",
        "slug": "",
        "author": "Ada",
        "content": "<p>Body</p>",
        "excerpt": "",
        "featured_image": "",
        "tags": '["admin"]',
        "seo_title": "",
        "seo_description": "",
    }


class TestPostAdmin:
    """Tests for PostAdmin."""

    def test_changelist(self, admin_client):
        PostStore().create({"title": "Listed", "content": "<p>x</p>", "author": "Ada"})
        response = admin_client.get(reverse("admin:blog_cms_post_changelist"))

        assert response.status_code == 200
        assert b"Listed" in response.content

    def test_add_derives_slug(self, admin_client, admin_data):
        response = admin_client.post(reverse("admin:blog_cms_post_add"), admin_data)

        assert response.status_code == 302
        post = Post.objects.get()
        assert post.slug == "from-the-admin"
        assert post.tags == ["admin"]

    def test_add_with_taken_slug_gets_suffix(self, admin_client, admin_data):
        PostStore().create({"title": "First", "content": "<p>x</p>", "author": "Ada", "slug": "taken"})
        admin_data["slug"] = "taken"
        response = admin_client.post(reverse("admin:blog_cms_post_add"), admin_data)

        assert response.status_code == 302
        assert Post.objects.count() == 2
        added = Post.objects.get(title="From the admin")
        assert added.slug.startswith("taken-")
        assert len(added.slug) == len("taken-") + 5

    def test_change_keeps_own_slug(self, admin_client, admin_data):
        post = PostStore().create({"title": "Mine", "content": "<p>x</p>", "author": "Ada"})
        admin_data.update({"title": "Mine", "slug": "mine"})
        response = admin_client.post(reverse("admin:blog_cms_post_change", args=[post.pk]), admin_data)

        assert response.status_code == 302
        post.refresh_from_db()
        assert post.slug == "mine"

    @pytest.mark.parametrize("tags", ['"a,b"', '{"x": 1}', "[1, 2]"])
    def test_tags_must_be_list_of_strings(self, admin_client, admin_data, tags):
        admin_data["tags"] = tags
        response = admin_client.post(reverse("admin:blog_cms_post_add"), admin_data)

        assert response.status_code == 200
        assert b"JSON list of strings" in response.content
        assert not Post.objects.exists()
