# tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from mediacat.common import settings as settings_module


HEX_ID = "0123456789abcdefABCDEF0123456789"


class FakeElement:
    """Minimal ElementPort built from a dict of child texts."""

    def __init__(self, children: Optional[Dict[str, str]] = None, attrs: Optional[Dict[str, str]] = None):
        self.children = children or {}
        self.attrs = attrs or {}

    def has_child(self, name: str) -> bool:
        return name in self.children

    def get_child_text(self, name: str) -> str:
        return self.children[name]

    def get_child(self, name: str):
        return None

    def get_children(self, name: str) -> List["FakeElement"]:
        return []

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attrs.get(name)


@pytest.fixture()
def hex_id() -> str:
    return HEX_ID


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    # settings are lru_cached; keep each test isolated from env leftovers
    for var in ("MEDIACAT_PARSING__STRICT", "MEDIACAT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings_module.get_settings.cache_clear()
    yield
    settings_module.get_settings.cache_clear()


TRACK_XML = """
<track>
  <id>{id}</id>
  <title>Some Song</title>
  <popularity>0.42</popularity>
  <restrictions>
    <restriction catalogues="premium,on-demand" forbidden="USCA"/>
    <restriction catalogues="free" allowed="DEFR"/>
  </restrictions>
  <external-ids>
    <external-id type="isrc" id="GBAYE0601498"/>
    <external-id type="upc" id="5099902895529"/>
  </external-ids>
</track>
""".format(id=HEX_ID)


@pytest.fixture()
def track_xml() -> str:
    return TRACK_XML


@pytest.fixture()
def make_element():
    return FakeElement
