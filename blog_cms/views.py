"""
Views for django-blog-cms.

JSON API views translate requests into PostStore calls and store errors into
status codes. Page views render the listing, detail and authoring screens.
"""
import hashlib
import json
import logging
import os

from django.core.files.base import ContentFile
from django.core.files.storage import default_storage
from django.http import Http404, JsonResponse
from django.shortcuts import redirect
from django.urls import reverse, reverse_lazy
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import TemplateView
from django.views.generic.edit import FormView

from .conf import blog_settings
from .exceptions import BlogCMSError, NotFoundError, ValidationError
from .forms import PostForm
from .serializers import post_data_from_payload, serialize_post
from .store import PostStore

logger = logging.getLogger(__name__)


class StoreMixin:
    """Give a view a PostStore bound to the configured database alias."""

    store_class = PostStore

    def get_store(self):
        return self.store_class(using=blog_settings.DATABASE_ALIAS)


def error_response(error):
    """Render a BlogCMSError as a JSON response."""
    body = {"message": error.message}
    if getattr(error, "errors", None):
        body["errors"] = error.errors
    return JsonResponse(body, status=error.status_code)


def read_json_body(request):
    """Decode a request body that must be a JSON object."""
    try:
        payload = json.loads(request.body or b"null")
    except (ValueError, UnicodeDecodeError):
        raise ValidationError("Invalid JSON body") from None
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON body")
    return payload


@method_decorator(csrf_exempt, name="dispatch")
class PostAPIView(StoreMixin, View):
    """Base for the JSON post endpoints."""

    failure_messages = {}
    # Methods whose unexpected errors report the exception text itself.
    detailed_failures = ("post", "put")

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except BlogCMSError as error:
            if error.status_code >= 500:
                logger.error("%s %s failed: %s", request.method, request.path, error.message)
            return error_response(error)
        except Exception as exc:
            logger.exception("%s %s failed", request.method, request.path)
            method = request.method.lower()
            message = self.failure_messages.get(method, "Internal server error")
            if method in self.detailed_failures:
                message = str(exc) or message
            return JsonResponse({"message": message}, status=500)


class PostCollectionView(PostAPIView):
    """GET lists posts, POST creates one."""

    failure_messages = {
        "get": "Failed to fetch posts",
        "post": "Failed to create post",
    }

    def get(self, request):
        posts = self.get_store().list()
        return JsonResponse([serialize_post(post) for post in posts], safe=False)

    def post(self, request):
        data = post_data_from_payload(read_json_body(request))
        post = self.get_store().create(data)
        return JsonResponse(serialize_post(post), status=201)


class PostResourceView(PostAPIView):
    """GET, PUT and DELETE a single post by id."""

    failure_messages = {
        "get": "Failed to fetch post",
        "put": "Failed to update post",
        "delete": "Failed to delete post",
    }

    def get(self, request, pk):
        post = self.get_store().get_by_id(pk)
        return JsonResponse(serialize_post(post))

    def put(self, request, pk):
        data = post_data_from_payload(read_json_body(request))
        post = self.get_store().update(pk, data)
        return JsonResponse(serialize_post(post))

    def delete(self, request, pk):
        self.get_store().delete(pk)
        return JsonResponse({"message": "Post deleted successfully"})


@method_decorator(csrf_exempt, name="dispatch")
class ImageUploadView(View):
    """
    Store an uploaded image and return its public URL.

    Files are named by the SHA256 of their content, so uploading the same
    image twice reuses the stored file.
    """

    def post(self, request):
        upload = request.FILES.get("file")
        if upload is None:
            return JsonResponse({"message": "No file uploaded"}, status=400)

        if upload.content_type not in blog_settings.ALLOWED_IMAGE_TYPES:
            allowed = ", ".join(blog_settings.ALLOWED_IMAGE_TYPES)
            return JsonResponse({"message": f"Allowed types: {allowed}"}, status=400)

        max_size = blog_settings.MEDIA_MAX_SIZE_MB * 1024 * 1024
        if upload.size > max_size:
            return JsonResponse(
                {"message": f"File too large (max {blog_settings.MEDIA_MAX_SIZE_MB} MB)"},
                status=400,
            )

        contents = upload.read()
        content_hash = hashlib.sha256(contents).hexdigest()
        ext = os.path.splitext(upload.name)[1].lower()
        path = timezone.now().strftime(blog_settings.MEDIA_UPLOAD_PATH) + content_hash + ext

        if default_storage.exists(path):
            name = path
        else:
            name = default_storage.save(path, ContentFile(contents))
            logger.info("Stored upload %s (%d bytes)", name, len(contents))

        return JsonResponse({"url": default_storage.url(name), "filename": os.path.basename(name)})


class PostListView(StoreMixin, TemplateView):
    """Listing page, newest posts first."""

    template_name = "blog_cms/post_list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["posts"] = self.get_store().list()
        return context


class PostObjectMixin(StoreMixin):
    """Load the post named by the ``pk`` URL kwarg or raise 404."""

    def get_post(self):
        if not hasattr(self, "post_object"):
            try:
                self.post_object = self.get_store().get_by_id(self.kwargs["pk"])
            except NotFoundError:
                raise Http404("Post not found") from None
        return self.post_object


class PostDetailView(PostObjectMixin, TemplateView):
    """Display a single post."""

    template_name = "blog_cms/post_detail.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["post"] = self.get_post()
        return context


class PostFormView(StoreMixin, FormView):
    """Shared handling for the create and edit pages."""

    form_class = PostForm
    template_name = "blog_cms/post_form.html"
    success_url = reverse_lazy("blog_cms:post_list")
    is_editing = False

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["is_editing"] = self.is_editing
        return context

    def form_valid(self, form):
        try:
            self.save(form.to_post_data())
        except ValidationError as error:
            for field, messages in error.errors.items():
                for message in messages:
                    form.add_error(field if field in form.fields else None, message)
            if not error.errors:
                form.add_error(None, error.message)
            return self.form_invalid(form)
        except BlogCMSError as error:
            logger.error("Saving post failed: %s", error.message)
            form.add_error(None, error.message)
            return self.form_invalid(form)
        return super().form_valid(form)

    def save(self, data):
        raise NotImplementedError


class PostCreateView(PostFormView):
    """Create a new post."""

    def save(self, data):
        return self.get_store().create(data)


class PostUpdateView(PostObjectMixin, PostFormView):
    """Edit an existing post."""

    is_editing = True

    def dispatch(self, request, *args, **kwargs):
        self.get_post()
        return super().dispatch(request, *args, **kwargs)

    def get_form(self, form_class=None):
        if self.request.method in ("POST", "PUT"):
            return super().get_form(form_class)
        return PostForm.for_post(self.get_post(), prefix=self.get_prefix())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["post"] = self.get_post()
        return context

    def save(self, data):
        return self.get_store().update(self.get_post().pk, data)


class PostDeleteView(PostObjectMixin, TemplateView):
    """Confirm on GET, delete on POST."""

    template_name = "blog_cms/post_confirm_delete.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["post"] = self.get_post()
        return context

    def post(self, request, pk):
        try:
            self.get_store().delete(self.get_post().pk)
        except NotFoundError:
            raise Http404("Post not found") from None
        return redirect(reverse("blog_cms:post_list"))
