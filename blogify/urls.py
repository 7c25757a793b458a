"""
URL configuration for blogify.

Include in your project urls.py:

    path('api/', include('blogify.urls')),
"""
from django.urls import path, register_converter

from . import views

COLLECTION_CATEGORIES = {
    "blogs": "blog",
    "blog": "blog",
    "news": "news",
    "stories": "story",
    "story": "story",
}


class CollectionConverter:
    """Matches plural or singular collection names and yields the category."""

    regex = "blogs|blog|news|stories|story"

    def to_python(self, value):
        return COLLECTION_CATEGORIES[value]

    def to_url(self, value):
        return value


class CategoryConverter:
    regex = "blog|news|story"

    def to_python(self, value):
        return value

    def to_url(self, value):
        return value


register_converter(CollectionConverter, "collection")
register_converter(CategoryConverter, "category")

app_name = "blogify"

urlpatterns = [
    # Content. Related routes come first so "related" is never read as an id.
    path(
        "posts/<category:category>/related/<int:pk>",
        views.RelatedContentView.as_view(),
        name="content_related",
    ),
    path("posts/<category:category>/<int:pk>", views.ContentDetailView.as_view(), name="content_detail"),
    path("posts/<collection:category>", views.ContentCollectionView.as_view(), name="content_collection"),

    # Tags
    path("tags", views.TagCollectionView.as_view(), name="tag_collection"),
    path("tags/usage", views.TagUsageView.as_view(), name="tag_usage"),
    path("tags/<int:pk>", views.TagDetailView.as_view(), name="tag_detail"),

    # Comments and contact
    path("comments", views.CommentCreateView.as_view(), name="comment_create"),
    path(
        "comments/<int:post_id>/<category:post_type>",
        views.CommentListView.as_view(),
        name="comment_list",
    ),
    path("contact", views.ContactView.as_view(), name="contact"),

    # Accounts
    path("auth/register", views.RegisterView.as_view(), name="register"),
    path("auth/login", views.LoginView.as_view(), name="login"),
    path("auth/me", views.CurrentUserView.as_view(), name="current_user"),
    path("profile/<int:pk>", views.ProfileView.as_view(), name="profile"),
    path(
        "profile/<int:pk>/profile-picture",
        views.ProfilePictureView.as_view(),
        name="profile_picture",
    ),

    # Dashboard
    path("stats", views.StatsView.as_view(), name="stats"),
]
