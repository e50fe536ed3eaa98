"""
URL configuration for django-blog-cms.

Include in your project urls.py:

    path('blog/', include('blog_cms.urls')),
"""
from django.urls import path

from . import views

app_name = "blog_cms"

urlpatterns = [
    # JSON API
    path("api/posts", views.PostCollectionView.as_view(), name="api_post_list"),
    path("api/posts/<int:pk>", views.PostResourceView.as_view(), name="api_post_detail"),
    path("api/upload", views.ImageUploadView.as_view(), name="api_upload"),

    # Pages
    path("", views.PostListView.as_view(), name="post_list"),
    path("post/<int:pk>/", views.PostDetailView.as_view(), name="post_detail"),
    path("create/", views.PostCreateView.as_view(), name="post_create"),
    path("edit/<int:pk>/", views.PostUpdateView.as_view(), name="post_update"),
    path("delete/<int:pk>/", views.PostDeleteView.as_view(), name="post_delete"),
]
