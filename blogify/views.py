"""
JSON API views for blogify.

Every response uses the envelope ``{"success": bool, "data"?, "message"?}``.
Services raise BlogifyError subclasses; ApiView.dispatch turns them into
responses with the matching status code.
"""
import json
import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .conf import blog_settings
from .exceptions import BlogifyError, ValidationError
from .services import accounts, comments, content, stats
from .services import tags as tag_services
from .tokens import user_from_request

logger = logging.getLogger(__name__)


def api_response(data=None, message=None, status=200, success=True):
    """Build an enveloped JSON response."""
    payload = {"success": success}
    if data is not None:
        payload["data"] = data
    if message:
        payload["message"] = message
    return JsonResponse(payload, status=status)


def parse_limit(raw):
    """Parse the related-content limit, falling back to the default."""
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return blog_settings.RELATED_DEFAULT_LIMIT
    return max(0, limit)


def parse_tags(raw):
    """
    Parse a JSON array of tag names from a query parameter.

    Malformed values are logged and ignored so the caller falls back to the
    source item's stored tags.
    """
    if not raw:
        return None
    try:
        tags = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring malformed tags parameter: %r", raw)
        return None
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        logger.warning("Ignoring non-list tags parameter: %r", raw)
        return None
    return tags or None


@method_decorator(csrf_exempt, name="dispatch")
class ApiView(View):
    """
    Base class for API endpoints.

    HTTP methods listed in ``token_required`` need a valid bearer token
    while REQUIRE_TOKEN_FOR_WRITES is on. The token's user is exposed as
    ``request.token_user`` (None when no check ran).
    """

    token_required = ()

    def dispatch(self, request, *args, **kwargs):
        request.token_user = None
        try:
            method = request.method.lower()
            if method in self.token_required and blog_settings.REQUIRE_TOKEN_FOR_WRITES:
                request.token_user = user_from_request(request)
            return super().dispatch(request, *args, **kwargs)
        except BlogifyError as exc:
            return api_response(message=exc.message, status=exc.status_code, success=False)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return api_response(message="Server Error", status=500, success=False)

    def http_method_not_allowed(self, request, *args, **kwargs):
        response = api_response(message="Method not allowed", status=405, success=False)
        response["Allow"] = ", ".join(self._allowed_methods())
        return response

    def json_body(self):
        """Return the request body as a dict."""
        if not self.request.body:
            return {}
        try:
            data = json.loads(self.request.body)
        except (ValueError, UnicodeDecodeError) as exc:
            raise ValidationError("Request body must be valid JSON") from exc
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data


# Content


class ContentCollectionView(ApiView):
    """List items of a category, or create one."""

    token_required = ("post",)

    def get(self, request, category):
        items = content.list_items(category)
        return api_response(data=[item.as_json() for item in items])

    def post(self, request, category):
        item = content.create_item(category, self.json_body())
        label = content.CATEGORY_LABELS[category]
        return api_response(
            data=item.as_json(),
            message=f"{label} created successfully",
            status=201,
        )


class ContentDetailView(ApiView):
    token_required = ("put", "delete")

    def get(self, request, category, pk):
        return api_response(data=content.get_item(category, pk).as_json())

    def put(self, request, category, pk):
        item = content.update_item(category, pk, self.json_body())
        label = content.CATEGORY_LABELS[category]
        return api_response(data=item.as_json(), message=f"{label} updated successfully")

    def delete(self, request, category, pk):
        content.delete_item(category, pk)
        label = content.CATEGORY_LABELS[category]
        return api_response(message=f"{label} deleted successfully")


class RelatedContentView(ApiView):
    """
    Related items from every category, ranked by shared tags.

    ``?tags=`` (a JSON array) overrides the source item's stored tags.
    """

    def get(self, request, category, pk):
        limit = parse_limit(request.GET.get("limit"))
        tags = parse_tags(request.GET.get("tags"))
        results, source_found = content.related_content(category, pk, tags=tags, limit=limit)

        message = None
        if not source_found:
            message = "Post not found; showing the most recent posts"
        return api_response(data=[entry.as_json() for entry in results], message=message)


# Tags


class TagCollectionView(ApiView):
    token_required = ("post",)

    def get(self, request):
        return api_response(data=[tag.as_json() for tag in tag_services.list_tags()])

    def post(self, request):
        tag = tag_services.create_tag(self.json_body())
        return api_response(data=tag.as_json(), message="Tag created successfully", status=201)


class TagUsageView(ApiView):
    def get(self, request):
        return api_response(data=tag_services.tag_usage())


class TagDetailView(ApiView):
    token_required = ("put", "delete")

    def get(self, request, pk):
        return api_response(data=tag_services.get_tag(pk).as_json())

    def put(self, request, pk):
        tag = tag_services.update_tag(pk, self.json_body())
        return api_response(data=tag.as_json(), message="Tag updated successfully")

    def delete(self, request, pk):
        tag_services.delete_tag(pk)
        return api_response(message="Tag deleted successfully")


# Comments and contact


class CommentCreateView(ApiView):
    def post(self, request):
        comment = comments.create_comment(self.json_body())
        return api_response(
            data=comment.as_json(),
            message="Comment added successfully",
            status=201,
        )


class CommentListView(ApiView):
    def get(self, request, post_id, post_type):
        found = comments.list_comments(post_id, post_type)
        return api_response(data=[comment.as_json() for comment in found])


class ContactView(ApiView):
    def post(self, request):
        comments.create_contact_message(self.json_body())
        return api_response(message="Message added successfully", status=201)


# Accounts


class RegisterView(ApiView):
    def post(self, request):
        profile = accounts.register_user(self.json_body())
        return api_response(
            data=profile.as_json(),
            message="User registered successfully",
            status=201,
        )


class LoginView(ApiView):
    def post(self, request):
        profile, token = accounts.login_user(self.json_body())
        return api_response(
            data={"user": profile.as_json(), "token": token},
            message="Login successful",
        )


class CurrentUserView(ApiView):
    """Return the profile of the token's owner. Always needs a token."""

    def get(self, request):
        user = user_from_request(request)
        return api_response(data=accounts.get_profile(user.pk, user).as_json())


class ProfileView(ApiView):
    token_required = ("get", "put")

    def get(self, request, pk):
        profile = accounts.get_profile(pk, request.token_user)
        return api_response(data=profile.as_json())

    def put(self, request, pk):
        profile = accounts.update_profile(pk, self.json_body(), request.token_user)
        return api_response(data=profile.as_json(), message="Profile updated successfully")


class ProfilePictureView(ApiView):
    token_required = ("post",)

    def post(self, request, pk):
        upload = request.FILES.get("profile_picture")
        profile = accounts.update_profile_picture(pk, upload, request.token_user)
        return api_response(
            data=profile.as_json(),
            message="Profile picture updated successfully",
        )


# Dashboard


class StatsView(ApiView):
    def get(self, request):
        return api_response(data=stats.dashboard_stats())
