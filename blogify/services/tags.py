"""
Tag services.

Tag usage is counted over content tag lists, so deleting a tag is refused
while any item still carries its name. The check and the delete are not
atomic with respect to concurrent content edits.
"""
import logging

from ..exceptions import NotFoundError, TagInUseError
from ..forms import TagForm, validated
from ..models import ContentItem, Tag
from ..usage import count_usage

logger = logging.getLogger(__name__)


def list_tags():
    return list(Tag.objects.order_by("name"))


def get_tag(pk):
    tag = Tag.objects.filter(pk=pk).first()
    if tag is None:
        raise NotFoundError("Tag not found")
    return tag


def create_tag(data):
    form = TagForm(data)
    validated(form)
    tag = form.save()
    logger.info("Created tag %s (%s)", tag.pk, tag.name)
    return tag


def update_tag(pk, data):
    """
    Update a tag's name, description and colour.

    Renaming does not rewrite the tag names already stored on content.
    """
    tag = get_tag(pk)
    form = TagForm(data, instance=tag)
    validated(form)
    tag = form.save()
    logger.info("Updated tag %s (%s)", tag.pk, tag.name)
    return tag


def delete_tag(pk):
    tag = get_tag(pk)
    count = tag.usage_count
    if count:
        raise TagInUseError(
            f'Cannot delete tag "{tag.name}" because it is used in {count} posts.'
        )
    tag.delete()
    logger.info("Deleted tag %s (%s)", pk, tag.name)


def tag_usage():
    """Return ``[{"tag": name, "count": n}]`` for every known tag."""
    names = list(Tag.objects.order_by("name").values_list("name", flat=True))
    counts = count_usage(names, ContentItem.objects.only("tags"))
    return [{"tag": name, "count": counts[name]} for name in names]
