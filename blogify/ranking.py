"""
Related content ranking.

Items are ranked by how many tags they share with a source tag set, most
shared first, ties going to the most recently created item.
"""
from dataclasses import dataclass, field

from .usage import fold_tags


@dataclass(frozen=True)
class ScoredItem:
    """A candidate item with its relevance score and the tags that matched."""

    item: object
    score: int
    matching_tags: list = field(default_factory=list)

    def as_json(self):
        data = self.item.as_json()
        data["relevanceScore"] = self.score
        data["matchingTags"] = list(self.matching_tags)
        return data


def score_item(item, source_tags):
    """
    Score one item against a set of source tags.

    ``source_tags`` must already be lower-cased. Matching tags keep the
    item's own spelling and order.
    """
    matching = [
        tag for tag in item.tags or []
        if isinstance(tag, str) and tag.lower() in source_tags
    ]
    return ScoredItem(item=item, score=len(matching), matching_tags=matching)


def rank(source_id, source_tags, items, limit=3):
    """
    Rank items by tag overlap with ``source_tags``.

    The item whose primary key equals ``source_id`` is never returned. With
    no source tags every item scores 0, so the result is ordered purely by
    recency. Zero-score items are kept; callers decide whether to hide them.

    Args:
        source_id: primary key of the item to exclude
        source_tags: sequence of tag names, possibly empty
        items: iterable of content items with ``pk``, ``tags`` and ``created_at``
        limit: maximum number of results

    Returns:
        list of ScoredItem, at most ``limit`` long
    """
    folded = fold_tags(source_tags)
    scored = [
        score_item(item, folded)
        for item in items
        if item.pk != source_id
    ]
    scored.sort(key=lambda entry: (entry.score, entry.item.created_at), reverse=True)
    return scored[:max(limit, 0)]
