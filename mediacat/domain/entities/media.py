# mediacat/domain/entities/media.py
from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Optional

from mediacat.common.logging import get_logger
from mediacat.common.strings.hexstr import is_hex
from mediacat.domain.entities.restriction import Restriction, validate_country_code
from mediacat.domain.errors import InvalidArgument, ParseError
from mediacat.domain.ports.element import ElementPort

logger = get_logger()

MEDIA_ID_LENGTH = 32

_UNSET: Any = object()


def is_valid_media_id(value: Any) -> bool:
    return isinstance(value, str) and len(value) == MEDIA_ID_LENGTH and is_hex(value)


def validate_media_id(value: Any) -> str:
    if not is_valid_media_id(value):
        raise InvalidArgument("Expecting a 32-character hex string.")
    return value


def validate_popularity(value: Any) -> float:
    # NaN never compares equal to itself, so it has to be checked explicitly.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument("Expecting a value from 0.0 to 1.0 or NaN.")
    value = float(value)
    if math.isnan(value):
        return value
    if value < 0.0 or value > 1.0:
        raise InvalidArgument("Expecting a value from 0.0 to 1.0 or NaN.")
    return value


class Media:
    """
    A piece of catalogue media (e.g. a track).

    Invariants kept by every mutator:
      - id is None or a 32-character hex string
      - popularity is NaN ("unknown") or within [0.0, 1.0]
      - restrictions and external_ids are never None

    `restrictions` and `external_ids` hand out the live containers; mutating
    them mutates this instance. Assigning a new value copies it.

    Not thread-safe; share an instance across threads only under external locking.
    """

    def __init__(self, id: str = _UNSET) -> None:
        # Media() is the empty state; any explicit id, None included, must be valid
        self._id: Optional[str] = None if id is _UNSET else validate_media_id(id)
        self._popularity: float = math.nan
        self._restrictions: List[Restriction] = []
        self._external_ids: Dict[str, str] = {}

    # ---- Identity ----------------------------------------------------------

    @property
    def id(self) -> Optional[str]:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        self._id = validate_media_id(value)

    # ---- Popularity --------------------------------------------------------

    @property
    def popularity(self) -> float:
        return self._popularity

    @popularity.setter
    def popularity(self, value: float) -> None:
        self._popularity = validate_popularity(value)

    # ---- Restrictions ------------------------------------------------------

    @property
    def restrictions(self) -> List[Restriction]:
        return self._restrictions

    @restrictions.setter
    def restrictions(self, value: Iterable[Restriction]) -> None:
        if value is None:
            raise InvalidArgument("restrictions must not be None")
        self._restrictions = list(value)

    def is_restricted(self, country: str, catalogue: str) -> bool:
        """
        True if the first restriction that covers `catalogue` either forbids
        `country` or does not allow it. Raises InvalidArgument unless `country`
        is a 2-letter code.
        """
        validate_country_code(country)
        for restriction in self._restrictions:
            if restriction.is_catalogue(catalogue) and (
                restriction.is_forbidden(country) or not restriction.is_allowed(country)
            ):
                return True
        return False

    # ---- External ids ------------------------------------------------------

    @property
    def external_ids(self) -> Dict[str, str]:
        return self._external_ids

    @external_ids.setter
    def external_ids(self, value: Mapping[str, str]) -> None:
        if value is None:
            raise InvalidArgument("external_ids must not be None")
        self._external_ids = dict(value)

    def external_id(self, service: str) -> Optional[str]:
        return self._external_ids.get(service)

    # ---- Deserialization ---------------------------------------------------

    @classmethod
    def from_element(cls, element: ElementPort, *, strict: bool = False) -> Media:
        """
        Build a Media from a parsed <track>-like element, reading only its
        <id> and <popularity> children.

        By default the values are taken as found in the document, without the
        id/popularity checks the setters apply. Pass strict=True to route them
        through the setters (InvalidArgument on bad values).
        Non-numeric popularity text raises ParseError either way.
        """
        media = cls()

        if element.has_child("id"):
            raw_id = element.get_child_text("id")
            if strict:
                media.id = raw_id
            else:
                if not is_valid_media_id(raw_id):
                    logger.warning("Media id %r is not a 32-character hex string; keeping it as-is", raw_id)
                media._id = raw_id

        if element.has_child("popularity"):
            text = element.get_child_text("popularity")
            try:
                value = float(text)
            except (TypeError, ValueError) as exc:
                raise ParseError(f"popularity is not a number: {text!r}") from exc
            if strict:
                media.popularity = value
            else:
                media._popularity = value

        return media

    # ---- Misc --------------------------------------------------------------

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self._id,
            "popularity": self._popularity,
            "restrictions": list(self._restrictions),
            "external_ids": dict(self._external_ids),
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, popularity={self._popularity!r}, "
            f"restrictions={len(self._restrictions)}, external_ids={sorted(self._external_ids)!r})"
        )
