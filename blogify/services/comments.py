"""
Comment and contact message services.
"""
import logging

from ..exceptions import NotFoundError
from ..forms import CommentForm, ContactForm, remap, validated
from ..models import Comment, ContentItem

logger = logging.getLogger(__name__)


def create_comment(data):
    """
    Create a reader comment.

    The (postId, postType) pair must name an existing content item.
    """
    form = CommentForm(remap(data, CommentForm.API_KEYS))
    cleaned = validated(form)

    exists = ContentItem.objects.filter(
        pk=cleaned["post_id"],
        category=cleaned["post_type"],
    ).exists()
    if not exists:
        raise NotFoundError("Post not found")

    comment = form.save()
    logger.info("Comment %s added to %s %s", comment.pk, comment.post_type, comment.post_id)
    return comment


def list_comments(post_id, post_type):
    """Return comments on one item, newest first."""
    return list(
        Comment.objects.filter(post_id=post_id, post_type=post_type).order_by("-created_at", "-id")
    )


def create_contact_message(data):
    form = ContactForm(data)
    validated(form)
    message = form.save()
    logger.info("Contact message %s received", message.pk)
    return message
