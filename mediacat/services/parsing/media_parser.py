# mediacat/services/parsing/media_parser.py
from __future__ import annotations

from typing import Dict, List, Optional

from mediacat.common.logging import get_logger
from mediacat.common.settings import Settings, get_settings
from mediacat.domain.entities.media import Media
from mediacat.domain.entities.restriction import Restriction
from mediacat.domain.errors import ParseError
from mediacat.domain.ports.element import ElementPort
from mediacat.services.xml.element import parse_xml

logger = get_logger()


class MediaParser:
    """
    Turns catalogue metadata elements into Media, including the parts
    Media.from_element leaves alone:

        <track>
          <id>...</id>
          <popularity>0.42</popularity>
          <restrictions>
            <restriction catalogues="premium,free" forbidden="USCA"/>
          </restrictions>
          <external-ids>
            <external-id type="isrc" id="GBAYE0601498"/>
          </external-ids>
        </track>
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.cfg = settings or get_settings()

    @property
    def strict(self) -> bool:
        return self.cfg.parsing.strict

    def parse(self, element: ElementPort) -> Media:
        media = Media.from_element(element, strict=self.strict)
        media.restrictions = self._restrictions(element)
        media.external_ids = self._external_ids(element)
        logger.debug(
            "Parsed media %s (%d restrictions, %d external ids)",
            media.id, len(media.restrictions), len(media.external_ids),
        )
        return media

    def parse_all(self, element: ElementPort, child: str = "track") -> List[Media]:
        """Parse every direct `child` of a container element, e.g. <tracks>."""
        return [self.parse(e) for e in element.get_children(child)]

    def parse_xml(self, text: str | bytes) -> Media:
        return self.parse(parse_xml(text))

    # ---- internals ---------------------------------------------------------

    def _restrictions(self, element: ElementPort) -> List[Restriction]:
        container = element.get_child("restrictions")
        if container is None:
            return []
        return [Restriction.from_element(e) for e in container.get_children("restriction")]

    def _external_ids(self, element: ElementPort) -> Dict[str, str]:
        container = element.get_child("external-ids")
        if container is None:
            return {}
        out: Dict[str, str] = {}
        for e in container.get_children("external-id"):
            service = e.get_attribute("type")
            value = e.get_attribute("id")
            if not service or not value:
                if self.strict:
                    raise ParseError("external-id requires both 'type' and 'id' attributes")
                logger.warning("Skipping incomplete external-id (type=%r, id=%r)", service, value)
                continue
            out[service] = value
        return out
