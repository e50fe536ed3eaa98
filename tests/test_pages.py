"""
Tests for the authoring form and HTML pages.
"""
import pytest
from django.urls import reverse

from blog_cms.forms import PostForm
from blog_cms.models import Post
from blog_cms.store import PostStore


@pytest.fixture
def post(db):
    return PostStore().create({
        "title": "Hello, World!",
        "content": "<p>My <strong>first</strong> post.</p>",
        "author": "Ada",
        "tags": ["intro", "news"],
        "seo_title": "Hello SEO",
    })


@pytest.fixture
def form_data():
    return {
        "title": "A new post",
        "author": "Grace",
        "content": "<p>Some &amp; rich <em>text</em>.</p>",
        "tags": "python, django , ,web",
    }


class TestPostForm:
    """Tests for PostForm defaults."""

    def test_tags_split(self, form_data):
        form = PostForm(data=form_data)
        assert form.is_valid(), form.errors
        assert form.cleaned_data["tags"] == ["python", "django", "web"]

    def test_excerpt_from_content(self, form_data):
        form = PostForm(data=form_data)
        assert form.is_valid()
        assert form.cleaned_data["excerpt"] == "Some & rich text."

    def test_long_excerpt_truncated(self, form_data):
        form_data["content"] = "<p>" + "word " * 100 + "</p>"
        form = PostForm(data=form_data)
        assert form.is_valid()
        assert len(form.cleaned_data["excerpt"]) == 160

    def test_seo_defaults(self, form_data):
        form_data["title"] = "t" * 80
        form = PostForm(data=form_data)
        assert form.is_valid()
        assert len(form.cleaned_data["seo_title"]) == 60
        assert form.cleaned_data["seo_description"] == form.cleaned_data["excerpt"]

    def test_explicit_values_kept(self, form_data):
        form_data.update({"excerpt": "Mine", "seo_title": "SEO", "seo_description": "Desc"})
        form = PostForm(data=form_data)
        assert form.is_valid()
        assert form.cleaned_data["excerpt"] == "Mine"
        assert form.cleaned_data["seo_title"] == "SEO"
        assert form.cleaned_data["seo_description"] == "Desc"

    def test_required_fields(self):
        form = PostForm(data={})
        assert not form.is_valid()
        assert set(form.errors) == {"title", "author", "content"}

    def test_for_post(self, post):
        form = PostForm.for_post(post)
        assert form.initial["tags"] == "intro, news"
        assert form.initial["slug"] == "hello-world"

    def test_editor_widget_renders(self, db):
        html = PostForm().as_p()
        assert "data-rte" in html
        assert reverse("blog_cms:api_upload") in html


class TestReadingTime:
    """Tests for Post.reading_time."""

    def test_short_post_is_one_minute(self, post):
        assert post.reading_time == 1

    def test_rounds_up_by_200_words(self, db):
        post = PostStore().create({
            "title": "Long read",
            "content": "<p>" + "word " * 401 + "</p>",
            "author": "Ada",
        })
        assert post.reading_time == 3

    def test_empty_content_is_one_minute(self):
        assert Post(content="<p></p>").reading_time == 1


class TestListPage:
    """Tests for the listing page."""

    def test_lists_posts(self, client, post):
        response = client.get(reverse("blog_cms:post_list"))

        assert response.status_code == 200
        assert b"Hello, World!" in response.content
        assert b"intro" in response.content
        assert b"1 min read" in response.content

    def test_empty(self, client, db):
        response = client.get(reverse("blog_cms:post_list"))
        assert b"No posts yet" in response.content


class TestDetailPage:
    """Tests for the post page."""

    def test_renders_content_and_meta(self, client, post):
        response = client.get(reverse("blog_cms:post_detail", args=[post.pk]))

        assert response.status_code == 200
        assert b"<strong>first</strong>" in response.content
        assert b"1 min read" in response.content
        assert b"<title>Hello SEO</title>" in response.content
        assert b'name="description" content="My first post."' in response.content

    def test_not_found(self, client, db):
        response = client.get(reverse("blog_cms:post_detail", args=[999]))
        assert response.status_code == 404


class TestCreatePage:
    """Tests for the create page."""

    def test_get(self, client, db):
        response = client.get(reverse("blog_cms:post_create"))
        assert response.status_code == 200
        assert b"Create New Post" in response.content

    def test_create(self, client, db, form_data):
        response = client.post(reverse("blog_cms:post_create"), data=form_data)

        assert response.status_code == 302
        assert response.url == reverse("blog_cms:post_list")
        post = Post.objects.get()
        assert post.slug == "a-new-post"
        assert post.tags == ["python", "django", "web"]
        assert post.seo_title == "A new post"

    def test_invalid(self, client, db, form_data):
        form_data["author"] = ""
        response = client.post(reverse("blog_cms:post_create"), data=form_data)

        assert response.status_code == 200
        assert not Post.objects.exists()


class TestEditPage:
    """Tests for the edit page."""

    def test_get_prefilled(self, client, post):
        response = client.get(reverse("blog_cms:post_update", args=[post.pk]))

        assert response.status_code == 200
        assert b"Edit Post" in response.content
        assert b'value="intro, news"' in response.content

    def test_update(self, client, post, form_data):
        form_data["slug"] = "hello-world"
        response = client.post(reverse("blog_cms:post_update", args=[post.pk]), data=form_data)

        assert response.status_code == 302
        post.refresh_from_db()
        assert post.title == "A new post"
        assert post.slug == "hello-world"

    def test_not_found(self, client, db, form_data):
        response = client.post(reverse("blog_cms:post_update", args=[999]), data=form_data)
        assert response.status_code == 404


class TestDeletePage:
    """Tests for the delete page."""

    def test_confirm(self, client, post):
        response = client.get(reverse("blog_cms:post_delete", args=[post.pk]))
        assert response.status_code == 200
        assert b"cannot be undone" in response.content

    def test_delete(self, client, post):
        response = client.post(reverse("blog_cms:post_delete", args=[post.pk]))

        assert response.status_code == 302
        assert not Post.objects.exists()

    def test_not_found(self, client, db):
        response = client.post(reverse("blog_cms:post_delete", args=[999]))
        assert response.status_code == 404
