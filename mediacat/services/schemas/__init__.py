from mediacat.services.schemas.media import (
    MediaRead,
    MediaPatch,
    RestrictionRead,
)
__all__ = [
    "MediaRead",
    "MediaPatch",
    "RestrictionRead",
]
