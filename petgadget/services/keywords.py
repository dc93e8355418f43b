"""SEO keyword sets for dog and cat product articles."""

from typing import List

_COMMON_KEYWORDS = [
    "pet gadgets",
    "pet supplies reviews",
    "automatic pet feeder",
    "smart pet products",
    "best pet products",
]

_DOG_KEYWORDS = [
    "dog gadgets",
    "automatic dog feeder",
    "dog supplies",
    "best dog products",
    "dog feeder with timer",
]

_CAT_KEYWORDS = [
    "cat gadgets",
    "automatic cat feeder",
    "cat supplies",
    "best cat products",
    "cat feeder with timer",
]


def get_keywords(is_dog: bool) -> List[str]:
    """Return a fresh keyword list for a dog (``True``) or cat (``False``) article."""
    species = _DOG_KEYWORDS if is_dog else _CAT_KEYWORDS
    return species + _COMMON_KEYWORDS


def is_dog_article(main_category_slug: str) -> bool:
    return "dog" in main_category_slug
