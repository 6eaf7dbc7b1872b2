from __future__ import annotations

from typing import Iterable, List, Tuple

from mediacat.domain.entities.media import Media
from mediacat.domain.entities.restriction import validate_country_code


def available_media(items: Iterable[Media], country: str, catalogue: str) -> List[Media]:
    """
    Domain policy: the media playable in `country` under `catalogue`, in input order.
    """
    available, _ = partition_by_availability(items, country, catalogue)
    return available


def partition_by_availability(
    items: Iterable[Media], country: str, catalogue: str
) -> Tuple[List[Media], List[Media]]:
    """Split into (available, restricted). The country code is checked even for empty input."""
    validate_country_code(country)
    available: List[Media] = []
    restricted: List[Media] = []
    for media in items:
        (restricted if media.is_restricted(country, catalogue) else available).append(media)
    return available, restricted
