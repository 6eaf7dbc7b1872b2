# mediacat/services/mappers/media.py
from __future__ import annotations

import math
from typing import FrozenSet, List, Optional

from mediacat.domain.entities.media import Media, validate_media_id, validate_popularity
from mediacat.domain.entities.restriction import Restriction
from mediacat.services.schemas.media import MediaPatch, MediaRead, RestrictionRead


def _sorted_codes(codes: Optional[FrozenSet[str]]) -> Optional[List[str]]:
    return sorted(codes) if codes is not None else None


def restriction_to_read(r: Restriction) -> RestrictionRead:
    return RestrictionRead(
        catalogues=list(r.catalogues),
        allowed=_sorted_codes(r.allowed),
        forbidden=_sorted_codes(r.forbidden),
    )


def to_read_schema(media: Media) -> MediaRead:
    popularity = None if math.isnan(media.popularity) else media.popularity
    return MediaRead(
        id=media.id,
        popularity=popularity,
        restrictions=[restriction_to_read(r) for r in media.restrictions],
        external_ids=dict(media.external_ids),
    )


def apply_patch_to_domain(media: Media, p: MediaPatch) -> Media:
    # validate everything up front so a bad field leaves the media untouched
    if p.id is not None: validate_media_id(p.id)
    if p.popularity is not None: validate_popularity(p.popularity)

    if p.id is not None: media.id = p.id
    if p.popularity is not None: media.popularity = p.popularity
    if p.external_ids is not None: media.external_ids = p.external_ids
    return media
