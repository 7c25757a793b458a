"""
Tag usage counting.

A tag is used by an item when the item's tag list contains the tag name,
compared case-insensitively. Membership is exact: "AI" is not used by an
item tagged "Maintenance".
"""


def fold_tags(tags):
    """Return the set of lower-cased tag names."""
    return {tag.lower() for tag in tags or [] if isinstance(tag, str)}


def count_usage(tag_names, items):
    """
    Count how many items reference each tag name.

    Args:
        tag_names: iterable of tag names to count
        items: iterable of objects with a ``tags`` list

    Returns:
        dict mapping every given name to its usage count
    """
    folded_items = [fold_tags(item.tags) for item in items]
    counts = {}
    for name in tag_names:
        wanted = name.lower()
        counts[name] = sum(1 for folded in folded_items if wanted in folded)
    return counts
