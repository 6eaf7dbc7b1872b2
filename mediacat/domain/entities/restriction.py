# mediacat/domain/entities/restriction.py
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Tuple

from mediacat.common.strings.splitters import csv_to_list, fixed_width_split
from mediacat.domain.errors import InvalidArgument, ParseError
from mediacat.domain.ports.element import ElementPort

COUNTRY_CODE_LENGTH = 2


def validate_country_code(country: str) -> str:
    if not isinstance(country, str) or len(country) != COUNTRY_CODE_LENGTH:
        raise InvalidArgument("Expecting a 2-letter country code!")
    return country


def _normalize_countries(value: str | Iterable[str] | None) -> Optional[FrozenSet[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = fixed_width_split(value, COUNTRY_CODE_LENGTH)
        except ValueError as exc:
            raise InvalidArgument(str(exc)) from exc
    return frozenset(validate_country_code(c).upper() for c in value)


@dataclass(frozen=True)
class Restriction:
    """
    Availability rule for one or more catalogues.

    `allowed` is an allow-list and `forbidden` a deny-list of 2-letter country
    codes. Either may be None, meaning that list is not defined for this rule:
    no allow-list allows every country, no deny-list forbids none.
    Country lists accept an iterable of codes or a run like "DEFRGB".
    """
    catalogues: Tuple[str, ...] = ()
    allowed: Optional[FrozenSet[str]] = None
    forbidden: Optional[FrozenSet[str]] = None

    def __post_init__(self):
        catalogues = self.catalogues
        if isinstance(catalogues, str):
            catalogues = csv_to_list(catalogues)
        object.__setattr__(self, "catalogues", tuple(catalogues))
        object.__setattr__(self, "allowed", _normalize_countries(self.allowed))
        object.__setattr__(self, "forbidden", _normalize_countries(self.forbidden))

    def is_catalogue(self, catalogue: str) -> bool:
        return catalogue in self.catalogues

    def is_allowed(self, country: str) -> bool:
        if self.allowed is None:
            return True
        return validate_country_code(country).upper() in self.allowed

    def is_forbidden(self, country: str) -> bool:
        if self.forbidden is None:
            return False
        return validate_country_code(country).upper() in self.forbidden

    @classmethod
    def from_element(cls, element: ElementPort) -> Restriction:
        """
        Build from a <restriction catalogues="premium,free" allowed="DEFR" forbidden="US"/>
        node. Missing or empty attributes leave the corresponding list undefined.
        """
        try:
            return cls(
                catalogues=tuple(csv_to_list(element.get_attribute("catalogues"))),
                allowed=element.get_attribute("allowed") or None,
                forbidden=element.get_attribute("forbidden") or None,
            )
        except InvalidArgument as exc:
            raise ParseError(f"invalid restriction: {exc}") from exc
