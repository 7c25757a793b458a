"""
Content item services: CRUD and related-content lookup.

Every operation acts on one category at a time. Image handling follows a
write-new, save-record, delete-old order so a failed save never loses the
image the record still points at.
"""
import logging

from ..conf import blog_settings
from ..exceptions import NotFoundError
from ..forms import ContentItemForm, validated
from ..images import delete_uploaded_file, resolve_image_url
from ..models import ContentItem
from ..ranking import rank

logger = logging.getLogger(__name__)

CATEGORY_LABELS = {
    "blog": "Blog post",
    "news": "News article",
    "story": "Story",
}


def list_items(category):
    """Return all items of a category, newest first."""
    return list(ContentItem.objects.filter(category=category).order_by("-created_at"))


def get_item(category, pk):
    item = ContentItem.objects.filter(category=category, pk=pk).first()
    if item is None:
        raise NotFoundError(f"{CATEGORY_LABELS[category]} not found")
    return item


def _form_for(data, instance=None):
    fields = {
        key: data.get(key)
        for key in ("title", "author", "excerpt", "content", "tags")
        if key in data
    }
    return ContentItemForm(fields, instance=instance)


def create_item(category, data):
    """
    Validate a payload and create an item in ``category``.

    An inline imageUrl is written to disk before the record is saved; if the
    save fails the file is removed again.
    """
    form = _form_for(data)
    cleaned = validated(form)

    image_url, written = resolve_image_url(data.get("imageUrl"))
    item = form.save(commit=False)
    item.category = category
    item.tags = cleaned["tags"]
    item.image_url = image_url
    try:
        item.save()
    except Exception:
        if written:
            delete_uploaded_file(image_url)
        raise

    logger.info("Created %s %s", category, item.pk)
    return item


def update_item(category, pk, data):
    """
    Replace the editable fields of an item.

    Only an inline imageUrl triggers file work: the new file is written, the
    record saved, and the previous upload deleted once the save succeeded.
    """
    item = get_item(category, pk)
    previous_image = item.image_url

    form = _form_for(data, instance=item)
    cleaned = validated(form)

    image_url, written = resolve_image_url(data.get("imageUrl"))
    item = form.save(commit=False)
    item.tags = cleaned["tags"]
    item.image_url = image_url
    try:
        item.save()
    except Exception:
        if written:
            delete_uploaded_file(image_url)
        raise

    if written and previous_image and previous_image != image_url:
        delete_uploaded_file(previous_image)

    logger.info("Updated %s %s", category, item.pk)
    return item


def delete_item(category, pk):
    """Delete an item, then the image it uploaded, if any."""
    item = get_item(category, pk)
    image_url = item.image_url
    item.delete()
    delete_uploaded_file(image_url)
    logger.info("Deleted %s %s", category, pk)


def related_content(category, pk, tags=None, limit=None):
    """
    Rank content from every category against a source item's tags.

    When ``tags`` is given it is used as-is and the source item is not
    looked up. Otherwise the source item's stored tags are used; a missing
    source item is reported through the return value and the ranking falls
    back to recency alone.

    Returns:
        (list of ScoredItem, source_found boolean)
    """
    if limit is None:
        limit = blog_settings.RELATED_DEFAULT_LIMIT

    source_found = True
    if not tags:
        source = ContentItem.objects.filter(category=category, pk=pk).first()
        if source is None:
            logger.warning("Related lookup for missing %s %s; ranking by recency", category, pk)
            source_found = False
            tags = []
        else:
            tags = source.tags or []

    items = ContentItem.objects.all()
    return rank(pk, tags, items, limit), source_found
